"""Audio processing components for Speech WAV."""
from speechwav.processing.buffers import InputBuffer, OutputBuffer, output_capacity

__all__ = ["InputBuffer", "OutputBuffer", "output_capacity"]
