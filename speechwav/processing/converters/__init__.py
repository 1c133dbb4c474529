"""Resampling and sample encoding strategies."""
from speechwav.processing.converters.protocols import Converter, ConverterStatus, SampleEncoder
from speechwav.processing.converters.factory import create_converter, is_supported_source
from speechwav.processing.converters.resampler import StreamingResampler
from speechwav.processing.converters.int16 import Int16Encoder

__all__ = [
    "Converter",
    "ConverterStatus",
    "SampleEncoder",
    "create_converter",
    "is_supported_source",
    "StreamingResampler",
    "Int16Encoder",
]
