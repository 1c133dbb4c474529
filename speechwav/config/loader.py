"""Settings loader for Speech WAV."""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from speechwav.config.default_source import DefaultSettingsSource
from speechwav.config.models import ConverterSettings
from speechwav.config.protocols import SettingsSource
from speechwav.config.yaml_source import YAMLSettingsSource
from speechwav.exceptions import ConfigValidationError


class SettingsLoader:
    """Build validated ConverterSettings from a source plus explicit overrides.

    Precedence, highest first: overrides (CLI options), the source (YAML
    file), ConverterSettings defaults.
    """

    def __init__(self, source: SettingsSource | None = None) -> None:
        self._source = source or DefaultSettingsSource()

    @classmethod
    def from_yaml(cls, config_path: Path) -> "SettingsLoader":
        """Create a loader reading from a YAML file."""
        return cls(YAMLSettingsSource(config_path))

    @property
    def source_description(self) -> str:
        return self._source.source_description

    def load(self, **overrides: Any) -> ConverterSettings:
        """Return validated settings.

        Args:
            **overrides: Field values that win over the source; None values are ignored

        Raises:
            ConfigValidationError: If the merged values fail validation
        """
        values = dict(self._source.load())
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return ConverterSettings(**values)
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid settings from {self.source_description}: {e}", errors=e
            ) from e


def load_settings(config_path: Path | None = None, **overrides: Any) -> ConverterSettings:
    """Load settings from ``config_path`` if given, else from defaults."""
    loader = SettingsLoader.from_yaml(config_path) if config_path else SettingsLoader()
    return loader.load(**overrides)
