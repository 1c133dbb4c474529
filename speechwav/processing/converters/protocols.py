"""Converter protocols for Speech WAV."""

from enum import Enum, auto
from typing import Protocol, runtime_checkable

import numpy as np

from speechwav.processing.buffers import InputBuffer, OutputBuffer


class ConverterStatus(Enum):
    """Result of a single converter call."""

    INPUT_NEEDED = auto()  # all input consumed, nothing to emit yet
    HAVE_DATA = auto()
    END_OF_STREAM = auto()  # flush finished, nothing left
    ERROR = auto()


@runtime_checkable
class Converter(Protocol):
    """A resampling and channel-mixing engine bound to one source/target pair.

    Implementations are stateful and must only be fed frames from the one
    source they were created for.
    """

    @property
    def last_error(self) -> str | None:
        """Description of the failure behind the last ``ERROR`` status."""
        ...

    def convert(self, input_buffer: InputBuffer, output_buffer: OutputBuffer) -> ConverterStatus:
        """Consume exactly the frames held by ``input_buffer``.

        Converted frames are appended to ``output_buffer`` up to its capacity;
        anything that does not fit is kept for the next call.
        """
        ...

    def flush(self, output_buffer: OutputBuffer) -> ConverterStatus:
        """Emit remaining frames after the last input chunk.

        Returns ``END_OF_STREAM`` once everything has been emitted and
        ``HAVE_DATA`` while frames are still pending.
        """
        ...


class SampleEncoder(Protocol):
    """Protocol for float to integer sample encoding."""

    @property
    def soundfile_subtype(self) -> str:
        """Return the SoundFile subtype string for this encoding."""
        ...

    @property
    def numpy_dtype(self) -> np.dtype:
        """Return the NumPy dtype for this encoding."""
        ...

    def convert(self, data: np.ndarray) -> np.ndarray:
        """Convert floating-point audio data to this encoding."""
        ...
