"""Integration test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def output_files(tmp_output_dir: Path):
    """Callable listing every file currently in the output directory."""
    def _list() -> list[Path]:
        return sorted(p for p in tmp_output_dir.iterdir() if p.is_file())

    return _list
