"""Factory functions for converters."""

import logging

from speechwav.formats import SourceFormat, TargetFormat
from speechwav.processing.converters.protocols import Converter
from speechwav.processing.converters.resampler import StreamingResampler

logger = logging.getLogger(__name__)

MAX_SOURCE_CHANNELS = 64

# libsndfile subtypes that decode losslessly (or as designed) to float.
# ADPCM, GSM and G72x telephony codecs are refused.
SUPPORTED_SOURCE_SUBTYPES = frozenset({
    "PCM_S8",
    "PCM_U8",
    "PCM_16",
    "PCM_24",
    "PCM_32",
    "FLOAT",
    "DOUBLE",
    "ULAW",
    "ALAW",
    "VORBIS",
    "OPUS",
    "MPEG_LAYER_I",
    "MPEG_LAYER_II",
    "MPEG_LAYER_III",
    "ALAC_16",
    "ALAC_20",
    "ALAC_24",
    "ALAC_32",
})


def is_supported_source(source: SourceFormat) -> bool:
    """Return True when a converter can be bound to ``source``."""
    return (
        source.samplerate > 0
        and 0 < source.channels <= MAX_SOURCE_CHANNELS
        and source.subtype.upper() in SUPPORTED_SOURCE_SUBTYPES
    )


def create_converter(source: SourceFormat, target: TargetFormat) -> Converter | None:
    """Factory function to bind a converter to a source/target pair.

    Args:
        source: Native format of the source file
        target: The target profile

    Returns:
        Converter: A fresh converter, or None if the formats are incompatible
    """
    if not is_supported_source(source):
        logger.debug(
            "No converter for %s/%s, %d ch @ %d Hz",
            source.format, source.subtype, source.channels, source.samplerate,
        )
        return None
    try:
        return StreamingResampler(source, target)
    except ValueError as e:
        logger.debug("Converter refused %s -> %s: %s", source, target, e)
        return None
