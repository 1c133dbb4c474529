"""CLI command implementations for Speech WAV."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from speechwav.audio.info import AudioInfoRetriever
from speechwav.cli.utils import _configure_logging, _resolve_settings, _sanitize_path
from speechwav.constants import VERSION
from speechwav.exceptions import SpeechWavError
from speechwav.janitor import TempFileJanitor
from speechwav.output import ConsoleOutputHandler, OutputHandler
from speechwav.pipeline import TranscodingPipeline

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def _output_handler(stderr: bool = False) -> OutputHandler:
    """Create the user-facing output handler for a command."""
    return ConsoleOutputHandler(Console(stderr=stderr))


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"Speech WAV v{VERSION}")
        raise typer.Exit()


def main_callback(
        version: bool = typer.Option(
            None, "--version", "-V",
            callback=version_callback,
            is_eager=True,
            is_flag=True,
            help="Show version and exit."
        ),
) -> None:
    """Convert audio files to 16 kHz mono 16-bit WAV for speech services."""


def convert(
        source: Path = typer.Argument(
            ..., file_okay=True, dir_okay=False, resolve_path=True,
            help="Audio file to convert"
        ),
        output_dir: Path | None = typer.Option(
            None, "--output-dir", "-o", file_okay=False, dir_okay=True,
            help="Directory for converted files"
        ),
        config: Path | None = typer.Option(
            None, "--config", "-c", dir_okay=False,
            help="YAML settings file"
        ),
        chunk_size: int | None = typer.Option(
            None, "--chunk-size", min=1,
            help="Source frames processed per iteration"
        ),
        progress: bool = typer.Option(False, "--progress", help="Show a progress bar"),
        verbose: bool = typer.Option(False, "--verbose", help="Enable verbose debug output"),
) -> None:
    """Convert SOURCE and print the path of the converted file."""
    _configure_logging(verbose)
    handler = _output_handler(stderr=True)

    try:
        settings = _resolve_settings(
            config, output_dir, chunk_size=chunk_size, show_progress=progress or None
        )
        output_path = TranscodingPipeline(settings).convert(_sanitize_path(source))
    except SpeechWavError as e:
        handler.error(str(e))
        raise typer.Exit(code=1)

    handler.success(f"Converted {source.name}")
    typer.echo(str(output_path))


def cleanup(
        output_dir: Path | None = typer.Option(
            None, "--output-dir", "-o", file_okay=False, dir_okay=True,
            help="Directory holding converted files"
        ),
        config: Path | None = typer.Option(
            None, "--config", "-c", dir_okay=False,
            help="YAML settings file"
        ),
        verbose: bool = typer.Option(False, "--verbose", help="Enable verbose debug output"),
) -> None:
    """Remove converted files from the output directory."""
    _configure_logging(verbose)
    handler = _output_handler()

    try:
        settings = _resolve_settings(config, output_dir)
    except SpeechWavError as e:
        handler.error(str(e))
        raise typer.Exit(code=1)

    report = TempFileJanitor.from_settings(settings).cleanup()
    handler.info(f"Removed {report.removed_count} file(s) from {settings.output_dir}")
    for path, reason in report.failed:
        handler.warning(f"Could not remove {path}: {reason}")


def info(
        source: Path = typer.Argument(..., dir_okay=False, resolve_path=True, help="Audio file to inspect"),
) -> None:
    """Print the native format of SOURCE."""
    handler = _output_handler()
    try:
        source_format = AudioInfoRetriever().get_info(source)
    except SpeechWavError as e:
        handler.error(str(e))
        raise typer.Exit(code=1)

    handler.print(
        f"{source.name}: {source_format.format}/{source_format.subtype}, "
        f"{source_format.channels} ch @ {source_format.samplerate} Hz, "
        f"{source_format.frames} frames ({source_format.duration:.2f}s)"
    )
