"""Audio file inspection for Speech WAV."""
from speechwav.audio.info import AudioInfoRetriever

__all__ = ["AudioInfoRetriever"]
