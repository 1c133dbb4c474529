"""Command-line interface for Speech WAV."""
