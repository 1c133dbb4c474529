"""CLI utility functions for Speech WAV."""
from __future__ import annotations

import logging
from pathlib import Path

from speechwav.config import ConverterSettings, load_settings


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _configure_logging(verbose: bool) -> None:
    """Switch the root logger between WARNING and DEBUG."""

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if verbose:
        logging.getLogger(__name__).debug("Verbose logging enabled")


def _resolve_settings(
    config: Path | None,
    output_dir: Path | None,
    **overrides,
) -> ConverterSettings:
    """Merge the optional YAML file with CLI overrides."""

    if output_dir is not None:
        overrides["output_dir"] = _sanitize_path(output_dir)
    return load_settings(_sanitize_path(config) if config else None, **overrides)
