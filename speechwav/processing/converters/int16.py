"""16-bit integer sample encoder for Speech WAV."""

import numpy as np


class Int16Encoder:
    """Encode normalized float samples as 16-bit signed integers."""

    @property
    def soundfile_subtype(self) -> str:
        return "PCM_16"

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(np.int16)

    def convert(self, data: np.ndarray) -> np.ndarray:
        """Convert to 16-bit integer range."""
        float_data = data.astype(np.float64, copy=False)
        # Scale to 16-bit signed integer range: [-2^15, 2^15-1] = [-32768, 32767]
        scaled = np.clip(np.rint(float_data * 32767.0), -32768, 32767)
        return scaled.astype(np.int16)
