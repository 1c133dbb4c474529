"""Audio conversion exceptions for Speech WAV.

Every failure of a conversion surfaces as exactly one subclass of
:class:`AudioConversionError`. The ``kind`` attribute gives the flat
classification so callers can dispatch without ``isinstance`` chains.
"""

from enum import Enum

from speechwav.exceptions.base import SpeechWavError


class ConversionErrorKind(str, Enum):
    """Classification of a failed conversion."""

    READ = "read"
    WRITE = "write"
    FORMAT = "format"
    CONVERSION_FAILED = "conversion_failed"
    EMPTY_FILE = "empty_file"


class AudioConversionError(SpeechWavError):
    """Base class for all conversion failures. None of them are retryable."""

    kind: ConversionErrorKind = ConversionErrorKind.CONVERSION_FAILED
    default_message = "Audio conversion failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ReadError(AudioConversionError):
    """Raised when the source file cannot be opened, parsed or read as audio."""

    kind = ConversionErrorKind.READ
    default_message = "Unable to read the source audio file"


class WriteError(AudioConversionError):
    """Raised when the output file cannot be created, written or re-opened."""

    kind = ConversionErrorKind.WRITE
    default_message = "Unable to write the converted audio file"


class FormatError(AudioConversionError):
    """Raised when the target format or the converter cannot be set up.

    This covers an unrealizable target descriptor, a source format the
    converter refuses to bind to, and buffers that cannot be sized.
    """

    kind = ConversionErrorKind.FORMAT
    default_message = "Audio format setup failed"


class ConversionFailedError(AudioConversionError):
    """Raised when the converter fails, or for any otherwise unclassified failure.

    Attributes:
        cause: The underlying exception kept for diagnostics
    """

    kind = ConversionErrorKind.CONVERSION_FAILED

    def __init__(self, cause: BaseException, message: str | None = None) -> None:
        super().__init__(message or f"Conversion failed: {cause}")
        self.cause = cause


class EmptyFileError(AudioConversionError):
    """Raised when the finished output contains zero frames."""

    kind = ConversionErrorKind.EMPTY_FILE
    default_message = "The converted file is empty"
