"""Fixed-capacity frame buffers reused across pipeline iterations."""

import numpy as np
import soundfile as sf


def output_capacity(chunk_size: int, source_rate: int, target_rate: int) -> int:
    """Return the output frames needed to hold one converted input chunk.

    This is ``ceil(chunk_size * target_rate / source_rate)``, computed with
    integers so no float rounding can under-size the buffer.

    Args:
        chunk_size: Input frames per chunk
        source_rate: Source sample rate in Hz
        target_rate: Target sample rate in Hz

    Raises:
        ValueError: If any argument is not positive
    """
    if chunk_size <= 0 or source_rate <= 0 or target_rate <= 0:
        raise ValueError(
            f"Cannot size output buffer for chunk={chunk_size}, "
            f"source_rate={source_rate}, target_rate={target_rate}"
        )
    return -(-chunk_size * target_rate // source_rate)


class _FrameBuffer:
    """Preallocated (frames, channels) array with a logical length."""

    def __init__(self, frame_capacity: int, channels: int, dtype: np.dtype) -> None:
        if frame_capacity <= 0:
            raise ValueError(f"Buffer capacity must be positive, got {frame_capacity}")
        if channels <= 0:
            raise ValueError(f"Buffer channel count must be positive, got {channels}")
        self._data = np.zeros((frame_capacity, channels), dtype=dtype)
        self.frame_length = 0

    @property
    def frame_capacity(self) -> int:
        return self._data.shape[0]

    @property
    def channels(self) -> int:
        return self._data.shape[1]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def frames(self) -> np.ndarray:
        """View of the frames currently held."""
        return self._data[: self.frame_length]

    def reset(self) -> None:
        """Drop the held frames, keeping the allocation."""
        self.frame_length = 0


class InputBuffer(_FrameBuffer):
    """Source-format float32 frames read from a ``SoundFile``."""

    def __init__(self, frame_capacity: int, channels: int) -> None:
        super().__init__(frame_capacity, channels, np.dtype(np.float32))

    def fill_from(self, source: sf.SoundFile) -> int:
        """Read up to ``frame_capacity`` frames from ``source`` into the buffer.

        A short read is expected on the last chunk of a file.

        Returns:
            Number of frames now held
        """
        read = source.read(out=self._data)
        self.frame_length = len(read)
        return self.frame_length

    def load(self, samples: np.ndarray) -> int:
        """Replace the held frames with up to ``frame_capacity`` in-memory frames.

        Args:
            samples: Array of shape (frames,) for mono or (frames, channels)

        Returns:
            Number of frames now held
        """
        if samples.ndim == 1:
            samples = samples[:, np.newaxis]
        count = min(len(samples), self.frame_capacity)
        self._data[:count] = samples[:count]
        self.frame_length = count
        return count


class OutputBuffer(_FrameBuffer):
    """Target-format int16 frames waiting to be written."""

    def __init__(self, frame_capacity: int, channels: int = 1) -> None:
        super().__init__(frame_capacity, channels, np.dtype(np.int16))

    @property
    def remaining_capacity(self) -> int:
        return self.frame_capacity - self.frame_length

    def append(self, samples: np.ndarray) -> int:
        """Copy as many ``samples`` as fit after the held frames.

        Args:
            samples: Array of shape (frames,) or (frames, channels)

        Returns:
            Number of frames copied
        """
        if samples.ndim == 1:
            samples = samples[:, np.newaxis]
        count = min(len(samples), self.remaining_capacity)
        end = self.frame_length + count
        self._data[self.frame_length:end] = samples[:count]
        self.frame_length = end
        return count
