"""Streaming polyphase resampler for Speech WAV.

The filter is the one ``scipy.signal.resample_poly`` designs by default
(Kaiser-windowed FIR, beta 5.0, half length ``10 * max(up, down)``), but it is
evaluated incrementally: every output sample is computed from absolute input
positions, so the result does not depend on how the input was chunked.
"""

from math import gcd

import numpy as np
from scipy import signal

from speechwav.formats import SourceFormat, TargetFormat
from speechwav.processing.buffers import InputBuffer, OutputBuffer
from speechwav.processing.converters.int16 import Int16Encoder
from speechwav.processing.converters.protocols import ConverterStatus, SampleEncoder

KAISER_BETA = 5.0
HALF_LEN_FACTOR = 10


def design_polyphase_filter(up: int, down: int) -> tuple[np.ndarray, int]:
    """Design the anti-aliasing filter and split it into ``up`` phases.

    Args:
        up: Upsampling factor (already reduced by the gcd)
        down: Downsampling factor (already reduced by the gcd)

    Returns:
        Tuple of (phases, half_len) where ``phases[p, j] == taps[p + j * up]``
        (zero padded) and ``half_len`` is the filter delay in upsampled samples
    """
    if up == 1 and down == 1:
        return np.ones((1, 1)), 0

    max_rate = max(up, down)
    half_len = HALF_LEN_FACTOR * max_rate
    taps = signal.firwin(2 * half_len + 1, 1.0 / max_rate, window=("kaiser", KAISER_BETA))
    taps *= up

    per_phase = -(-taps.size // up)
    padded = np.zeros(per_phase * up)
    padded[: taps.size] = taps
    return np.ascontiguousarray(padded.reshape(per_phase, up).T), half_len


class StreamingResampler:
    """Mix a source down to mono and resample it to the target rate, chunk by chunk.

    Output sample ``n`` is ``sum_i x[i] * taps[n * down + half_len - i * up]``,
    which lines up exactly with ``resample_poly``. Samples are produced as
    soon as every input they depend on has arrived; ``flush`` treats the
    input past the end as silence and emits the tail, for a total of
    ``ceil(input_frames * up / down)`` frames.
    """

    def __init__(
        self,
        source: SourceFormat,
        target: TargetFormat,
        *,
        encoder: SampleEncoder | None = None,
    ) -> None:
        """Bind the resampler to one source/target pair.

        Args:
            source: Native format of the source being converted
            target: Target profile (must be mono)
            encoder: Float to integer encoder (defaults to Int16Encoder)

        Raises:
            ValueError: If either format cannot be resampled
        """
        if source.samplerate <= 0 or target.sample_rate <= 0:
            raise ValueError(
                f"Sample rates must be positive: {source.samplerate} -> {target.sample_rate}"
            )
        if source.channels <= 0:
            raise ValueError(f"Source channel count must be positive, got {source.channels}")
        if target.channels != 1:
            raise ValueError(f"Only mono targets are supported, got {target.channels} channels")

        divisor = gcd(target.sample_rate, source.samplerate)
        self._up = target.sample_rate // divisor
        self._down = source.samplerate // divisor
        self._channels = source.channels
        self._encoder = encoder or Int16Encoder()

        self._phases, self._half_len = design_polyphase_filter(self._up, self._down)
        self._taps_per_phase = self._phases.shape[1]
        self._tap_offsets = np.arange(self._taps_per_phase)

        # Zero history stands in for the silence before the first input frame
        self._history = np.zeros(self._taps_per_phase - 1)
        self._history_start = -(self._taps_per_phase - 1)
        self._received = 0
        self._next_output = 0
        self._pending = np.zeros(0)
        self._flushed = False
        self._last_error: str | None = None

    @property
    def ratio(self) -> tuple[int, int]:
        """The reduced (up, down) resampling factors."""
        return self._up, self._down

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def frames_received(self) -> int:
        return self._received

    @property
    def frames_produced(self) -> int:
        return self._next_output

    def convert(self, input_buffer: InputBuffer, output_buffer: OutputBuffer) -> ConverterStatus:
        """Consume the frames held by ``input_buffer`` and emit what is ready."""
        if self._flushed:
            return self._fail("convert() called after flush()")
        if input_buffer.channels != self._channels:
            return self._fail(
                f"Input has {input_buffer.channels} channels, converter is bound to {self._channels}"
            )

        frames = input_buffer.frames
        if len(frames):
            mono = frames.mean(axis=1, dtype=np.float64)
            if not np.all(np.isfinite(mono)):
                return self._fail("Input chunk contains non-finite samples")
            self._history = np.concatenate((self._history, mono))
            self._received += len(mono)

            numerator = self._received * self._up - self._half_len - 1
            ready = numerator // self._down + 1 if numerator >= 0 else 0
            self._queue(ready)

        emitted = self._emit(output_buffer)
        return ConverterStatus.HAVE_DATA if emitted else ConverterStatus.INPUT_NEEDED

    def flush(self, output_buffer: OutputBuffer) -> ConverterStatus:
        """Emit the filter tail once the source is exhausted."""
        if not self._flushed:
            self._flushed = True
            total = -(-self._received * self._up // self._down)
            if total > self._next_output:
                newest = ((total - 1) * self._down + self._half_len) // self._up
                missing = newest - self._history_start + 1 - len(self._history)
                if missing > 0:
                    self._history = np.concatenate((self._history, np.zeros(missing)))
                self._queue(total)

        self._emit(output_buffer)
        if len(self._pending):
            return ConverterStatus.HAVE_DATA
        return ConverterStatus.END_OF_STREAM

    def _queue(self, end: int) -> None:
        """Compute outputs up to (not including) ``end`` and queue them."""
        if end <= self._next_output:
            return
        outputs = np.arange(self._next_output, end, dtype=np.int64)
        centers = outputs * self._down + self._half_len
        newest = centers // self._up
        windows = self._history[
            (newest - self._history_start)[:, np.newaxis] - self._tap_offsets[np.newaxis, :]
        ]
        samples = np.einsum("nt,nt->n", self._phases[centers % self._up], windows)

        self._pending = np.concatenate((self._pending, samples))
        self._next_output = end
        self._trim_history()

    def _trim_history(self) -> None:
        """Drop input no future output depends on."""
        oldest_needed = (
            (self._next_output * self._down + self._half_len) // self._up
            - (self._taps_per_phase - 1)
        )
        drop = min(oldest_needed - self._history_start, len(self._history))
        if drop > 0:
            self._history = self._history[drop:]
            self._history_start += drop

    def _emit(self, output_buffer: OutputBuffer) -> int:
        take = min(len(self._pending), output_buffer.remaining_capacity)
        if take == 0:
            return 0
        output_buffer.append(self._encoder.convert(self._pending[:take]))
        self._pending = self._pending[take:]
        return take

    def _fail(self, message: str) -> ConverterStatus:
        self._last_error = message
        return ConverterStatus.ERROR
