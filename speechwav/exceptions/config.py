"""Configuration-related exceptions for Speech WAV."""

from pydantic import ValidationError

from speechwav.exceptions.base import SpeechWavError


class ConfigError(SpeechWavError):
    """Base class for settings errors."""


class ConfigValidationError(ConfigError):
    """Raised when Pydantic validation fails for user supplied settings.

    The original ``ValidationError`` is kept on ``errors`` so callers can
    render field level details.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class YAMLConfigError(ConfigError):
    """Raised when a YAML settings file is missing, unparsable or malformed."""
