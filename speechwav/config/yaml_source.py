"""YAML settings source for Speech WAV."""

from pathlib import Path
from typing import Any

import yaml

from speechwav.config.protocols import CURRENT_SCHEMA_VERSION
from speechwav.exceptions import YAMLConfigError

SECTION_NAME = "converter"


class YAMLSettingsSource:
    """Load settings from YAML files.

    Values may sit under a ``converter:`` section or at the top level of the
    document. An optional ``schema_version`` key is checked against
    :data:`CURRENT_SCHEMA_VERSION`.

    Attributes:
        config_path: Path to the YAML settings file
    """

    def __init__(self, config_path: Path) -> None:
        """Initialize the YAML settings source.

        Args:
            config_path: Path to the YAML settings file

        Raises:
            YAMLConfigError: If the file does not exist
        """
        self._config_path = config_path
        if not config_path.exists():
            raise YAMLConfigError(f"Configuration file not found: {config_path}")
        if not config_path.is_file():
            raise YAMLConfigError(f"Configuration path is not a file: {config_path}")

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return f"YAML file: {self._config_path}"

    def load(self) -> dict[str, Any]:
        """Load and parse the YAML settings file.

        Returns:
            Raw settings values

        Raises:
            YAMLConfigError: If YAML parsing fails or structure is invalid
        """
        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            error_msg = f"Failed to parse YAML configuration: {e}"
            if hasattr(e, 'problem_mark') and e.problem_mark is not None:
                mark = e.problem_mark
                error_msg += f" (line {mark.line + 1}, column {mark.column + 1})"
            raise YAMLConfigError(error_msg) from e

        if data is None:
            raise YAMLConfigError("Configuration file is empty")

        if not isinstance(data, dict):
            raise YAMLConfigError(
                f"Configuration must be a YAML mapping, got {type(data).__name__}"
            )

        return self._extract_settings(data)

    def _extract_settings(self, data: dict[str, Any]) -> dict[str, Any]:
        schema_version = data.pop('schema_version', 1)
        if not isinstance(schema_version, int):
            raise YAMLConfigError(
                f"'schema_version' must be an integer, got {type(schema_version).__name__}"
            )
        if schema_version > CURRENT_SCHEMA_VERSION:
            raise YAMLConfigError(
                f"Configuration schema version {schema_version} is not supported. "
                f"Maximum supported version is {CURRENT_SCHEMA_VERSION}."
            )

        if SECTION_NAME not in data:
            return data

        section = data[SECTION_NAME]
        if not isinstance(section, dict):
            raise YAMLConfigError(
                f"'{SECTION_NAME}' must be a mapping, got {type(section).__name__}"
            )
        return dict(section)
