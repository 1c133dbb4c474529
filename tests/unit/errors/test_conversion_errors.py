"""Unit tests for the conversion error taxonomy."""

from __future__ import annotations

import pytest

from speechwav.exceptions import (
    AudioConversionError,
    ConfigError,
    ConfigValidationError,
    ConversionErrorKind,
    ConversionFailedError,
    EmptyFileError,
    FormatError,
    ReadError,
    SpeechWavError,
    WriteError,
    YAMLConfigError,
)


class TestConversionErrors:
    """Tests for the flat conversion error kinds."""

    @pytest.mark.parametrize("error_class,kind", [
        (ReadError, ConversionErrorKind.READ),
        (WriteError, ConversionErrorKind.WRITE),
        (FormatError, ConversionErrorKind.FORMAT),
        (EmptyFileError, ConversionErrorKind.EMPTY_FILE),
    ])
    def test_kind_and_default_message(self, error_class: type[AudioConversionError], kind) -> None:
        error = error_class()
        assert error.kind is kind
        assert str(error) == error_class.default_message
        assert isinstance(error, AudioConversionError)
        assert isinstance(error, SpeechWavError)

    def test_custom_message(self) -> None:
        assert str(ReadError("cannot open x.m4a")) == "cannot open x.m4a"

    def test_conversion_failed_keeps_cause(self) -> None:
        cause = OSError("device gone")
        error = ConversionFailedError(cause)
        assert error.cause is cause
        assert error.kind is ConversionErrorKind.CONVERSION_FAILED
        assert "device gone" in str(error)

    def test_config_errors_are_not_conversion_errors(self) -> None:
        assert issubclass(ConfigValidationError, ConfigError)
        assert issubclass(YAMLConfigError, ConfigError)
        assert not issubclass(ConfigError, AudioConversionError)
        assert issubclass(ConfigError, SpeechWavError)
