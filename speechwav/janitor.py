"""Removal of previously converted files for Speech WAV."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from speechwav.config import ConverterSettings
from speechwav.constants import DEFAULT_OUTPUT_EXTENSION, DEFAULT_OUTPUT_PREFIX
from speechwav.output.naming import matches_output_name

logger = logging.getLogger(__name__)


class CleanupReport(BaseModel):
    """What a cleanup run removed and what it could not."""

    removed: list[Path] = Field(default_factory=list)
    failed: list[tuple[Path, str]] = Field(default_factory=list)

    @property
    def removed_count(self) -> int:
        return len(self.removed)

    @property
    def ok(self) -> bool:
        return not self.failed


class TempFileJanitor:
    """Delete converted files left in the output directory.

    Only names produced by the pipeline's naming convention are touched.
    Cleanup is best effort: problems are logged and reported, never raised.
    Run it when no conversions are in flight, since a file that is still
    being written carries the same kind of name.
    """

    def __init__(
        self,
        output_dir: Path,
        *,
        prefix: str = DEFAULT_OUTPUT_PREFIX,
        extension: str = DEFAULT_OUTPUT_EXTENSION,
    ) -> None:
        self.output_dir = output_dir
        self.prefix = prefix
        self.extension = extension

    @classmethod
    def from_settings(cls, settings: ConverterSettings) -> "TempFileJanitor":
        return cls(settings.output_dir, prefix=settings.file_prefix, extension=settings.extension)

    def cleanup(self) -> CleanupReport:
        """Remove every converted file in the output directory.

        Returns:
            CleanupReport listing removed files and per-file failures
        """
        report = CleanupReport()
        if not self.output_dir.exists():
            logger.debug("Output directory %s does not exist; nothing to clean", self.output_dir)
            return report

        try:
            entries = sorted(self.output_dir.iterdir())
        except OSError as e:
            logger.warning("Failed to list %s for cleanup: %s", self.output_dir, e)
            report.failed.append((self.output_dir, str(e)))
            return report

        for entry in entries:
            if not matches_output_name(entry.name, self.prefix, self.extension):
                continue
            if not entry.is_file():
                continue
            try:
                entry.unlink()
            except FileNotFoundError:
                # Already gone, e.g. removed by a concurrent cleanup
                continue
            except OSError as e:
                logger.warning("Failed to remove %s: %s", entry, e)
                report.failed.append((entry, str(e)))
            else:
                report.removed.append(entry)

        logger.info("Removed %d converted file(s) from %s", report.removed_count, self.output_dir)
        return report


def cleanup_temp_files(settings: ConverterSettings | None = None) -> CleanupReport:
    """Run a janitor over the configured output directory."""
    return TempFileJanitor.from_settings(settings or ConverterSettings()).cleanup()
