"""Entry point for ``python -m speechwav``."""

from speechwav.cli.app import app


if __name__ == "__main__":
    app()
