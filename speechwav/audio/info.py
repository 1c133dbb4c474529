"""Audio information retrieval for Speech WAV."""

from pathlib import Path

import soundfile as sf

from speechwav.exceptions import ReadError
from speechwav.formats import SourceFormat


class AudioInfoRetriever:
    """Retrieve the native format of an audio file using soundfile.

    Format detection is whatever libsndfile provides; no container sniffing
    is attempted beyond it.
    """

    def get_info(self, path: Path) -> SourceFormat:
        """Get the native format of a file.

        Args:
            path: Path to the audio file

        Returns:
            SourceFormat with sample rate, channel count, subtype, container and length

        Raises:
            ReadError: If the file does not exist or cannot be parsed as audio
        """
        try:
            info = sf.info(str(path))
        except (RuntimeError, OSError) as e:
            raise ReadError(f"Failed to read audio file {path}: {e}") from e
        return SourceFormat(
            samplerate=info.samplerate,
            channels=info.channels,
            subtype=info.subtype,
            format=info.format,
            frames=info.frames,
        )
