"""Built-in settings source for Speech WAV."""

from typing import Any


class DefaultSettingsSource:
    """Settings source that contributes no values, leaving model defaults in place."""

    @property
    def source_description(self) -> str:
        return "built-in defaults"

    def load(self) -> dict[str, Any]:
        return {}
