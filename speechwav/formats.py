"""Target and source audio format descriptors for Speech WAV."""

from enum import Enum
from typing import Literal, NamedTuple

import soundfile as sf
from pydantic import BaseModel, ConfigDict, Field

from speechwav.exceptions import FormatError


class SampleEncoding(str, Enum):
    """Sample encodings a PCM profile can use."""

    SIGNED_INT = "signed_int"
    FLOAT = "float"


class ByteOrder(str, Enum):
    """Byte order of multi-byte samples."""

    LITTLE = "little"
    BIG = "big"


class TargetFormat(BaseModel):
    """The fixed PCM profile every conversion produces.

    The defaults are the only profile the pipeline writes: 16 kHz, mono,
    16-bit signed little-endian interleaved PCM in a WAV container. The model
    is frozen so one instance can be shared freely.
    """

    model_config = ConfigDict(frozen=True)

    sample_rate: Literal[16000] = 16000
    channels: Literal[1] = 1
    bit_depth: Literal[16] = 16
    encoding: SampleEncoding = SampleEncoding.SIGNED_INT
    byte_order: ByteOrder = ByteOrder.LITTLE
    interleaved: bool = True
    container: str = Field("WAV", description="libsndfile major format")

    @property
    def soundfile_format(self) -> str:
        return self.container

    @property
    def soundfile_subtype(self) -> str:
        if self.encoding is SampleEncoding.FLOAT:
            return "FLOAT"
        return f"PCM_{self.bit_depth}"

    @property
    def soundfile_endian(self) -> str:
        return "LITTLE" if self.byte_order is ByteOrder.LITTLE else "BIG"


TARGET_FORMAT = TargetFormat()


def realize_target_format(target: TargetFormat) -> TargetFormat:
    """Check that the audio backend can actually write ``target``.

    Args:
        target: The target descriptor to check

    Returns:
        The same descriptor, for chaining

    Raises:
        FormatError: If libsndfile cannot write the profile, or the profile is
            not the supported interleaved signed-integer one
    """
    if target.encoding is not SampleEncoding.SIGNED_INT or not target.interleaved:
        raise FormatError(
            f"Unsupported target profile: {target.encoding.value}, interleaved={target.interleaved}"
        )
    try:
        supported = sf.check_format(
            target.soundfile_format, target.soundfile_subtype, target.soundfile_endian
        )
    except (TypeError, ValueError) as e:
        raise FormatError(f"Invalid target format descriptor: {e}") from e
    if not supported:
        raise FormatError(
            f"Audio backend cannot write {target.soundfile_format}/"
            f"{target.soundfile_subtype}/{target.soundfile_endian}"
        )
    return target


class SourceFormat(NamedTuple):
    """Native format of an opened source file."""
    samplerate: int
    channels: int
    subtype: str
    format: str
    frames: int

    @property
    def duration(self) -> float:
        """Length of the source in seconds."""
        if self.samplerate <= 0:
            return 0.0
        return self.frames / self.samplerate

    @classmethod
    def from_soundfile(cls, source: sf.SoundFile) -> "SourceFormat":
        """Build a descriptor from an open ``SoundFile``."""
        return cls(
            samplerate=source.samplerate,
            channels=source.channels,
            subtype=source.subtype,
            format=source.format,
            frames=source.frames,
        )
