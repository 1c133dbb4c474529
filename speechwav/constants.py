"""Project-wide constants for Speech WAV."""

VERSION = "0.1.0"

# Frames read from the source per pipeline iteration
DEFAULT_CHUNK_SIZE = 4096

DEFAULT_OUTPUT_PREFIX = "converted_"
DEFAULT_OUTPUT_EXTENSION = "wav"

# Name of the subdirectory of the system temp dir used when no output_dir is configured
DEFAULT_OUTPUT_SUBDIR = "speechwav"
