"""CLI application definition for Speech WAV."""

import typer

from speechwav.cli.commands import convert, cleanup, info, main_callback

app = typer.Typer(
    add_completion=False,
    help="Convert audio files to 16 kHz mono 16-bit WAV for speech services.",
    no_args_is_help=True,
)

app.callback()(main_callback)

# Register commands
app.command(name="convert", help="Convert an audio file to the speech WAV profile")(convert)
app.command(name="cleanup", help="Remove previously converted files")(cleanup)
app.command(name="info", help="Show the native format of an audio file")(info)
