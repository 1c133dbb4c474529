"""Exception hierarchy for Speech WAV."""
from speechwav.exceptions.base import SpeechWavError
from speechwav.exceptions.config import (
    ConfigError,
    ConfigValidationError,
    YAMLConfigError,
)
from speechwav.exceptions.audio import (
    ConversionErrorKind,
    AudioConversionError,
    ReadError,
    WriteError,
    FormatError,
    ConversionFailedError,
    EmptyFileError,
)

__all__ = [
    "SpeechWavError",
    "ConfigError",
    "ConfigValidationError",
    "YAMLConfigError",
    "ConversionErrorKind",
    "AudioConversionError",
    "ReadError",
    "WriteError",
    "FormatError",
    "ConversionFailedError",
    "EmptyFileError",
]
