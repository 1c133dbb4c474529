"""Base exception classes for Speech WAV."""


class SpeechWavError(Exception):
    """Base class for user-facing errors.

    Conversion and configuration exceptions inherit from this class so the
    CLI can report any of them the same way.
    """
