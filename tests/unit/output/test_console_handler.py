"""Unit tests for ConsoleOutputHandler."""

from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

from speechwav.output import ConsoleOutputHandler, OutputHandler


class TestConsoleOutputHandler:
    """Tests for ConsoleOutputHandler."""

    @pytest.fixture
    def console(self, mocker: MockerFixture):
        return mocker.MagicMock(spec_set=["print", "log", "status"])

    def test_implements_protocol(self, console) -> None:
        assert isinstance(ConsoleOutputHandler(console), OutputHandler)

    @pytest.mark.parametrize("method,expected", [
        ("info", "done"),
        ("success", "[green]done[/green]"),
        ("warning", "[yellow]Warning:[/yellow] done"),
        ("error", "[red]Error:[/red] done"),
    ])
    def test_formats_messages(self, console, method: str, expected: str) -> None:
        getattr(ConsoleOutputHandler(console), method)("done")
        console.print.assert_called_once_with(expected)
