"""Output handling package for Speech WAV."""
from speechwav.output.protocols import OutputHandler
from speechwav.output.console import ConsoleOutputHandler
from speechwav.output.naming import build_output_path, matches_output_name

__all__ = [
    "OutputHandler",
    "ConsoleOutputHandler",
    "build_output_path",
    "matches_output_name",
]
