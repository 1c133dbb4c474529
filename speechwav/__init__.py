"""Speech WAV: normalize arbitrary audio files to 16 kHz mono PCM_16 WAV."""
from speechwav.constants import VERSION
from speechwav.formats import TARGET_FORMAT, TargetFormat, SourceFormat
from speechwav.pipeline import TranscodingPipeline, convert_to_target_format
from speechwav.janitor import TempFileJanitor, CleanupReport, cleanup_temp_files
from speechwav.exceptions import (
    SpeechWavError,
    AudioConversionError,
    ReadError,
    WriteError,
    FormatError,
    ConversionFailedError,
    EmptyFileError,
)

__version__ = VERSION

__all__ = [
    "TARGET_FORMAT",
    "TargetFormat",
    "SourceFormat",
    "TranscodingPipeline",
    "convert_to_target_format",
    "TempFileJanitor",
    "CleanupReport",
    "cleanup_temp_files",
    "SpeechWavError",
    "AudioConversionError",
    "ReadError",
    "WriteError",
    "FormatError",
    "ConversionFailedError",
    "EmptyFileError",
]
