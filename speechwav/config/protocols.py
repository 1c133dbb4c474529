"""Protocol definitions for settings sources."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SettingsSource(Protocol):
    """Protocol for settings data sources.

    Implementations include:
    - YAMLSettingsSource: Load from YAML files
    - DefaultSettingsSource: Built-in defaults (no values)
    """

    def load(self) -> dict[str, Any]:
        """Return raw settings values keyed by ConverterSettings field name.

        Raises:
            ConfigError: If settings cannot be loaded
        """
        ...

    @property
    def source_description(self) -> str:
        """Human-readable description of the source, for error messages."""
        ...


# Current supported schema version
CURRENT_SCHEMA_VERSION = 1
