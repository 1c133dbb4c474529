"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
"""

from __future__ import annotations

import numpy as np
import pytest

from speechwav.formats import SourceFormat


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def source_format_factory():
    """Factory fixture for SourceFormat descriptors with sensible defaults."""
    def _create(
        samplerate: int = 44100,
        channels: int = 2,
        subtype: str = "PCM_16",
        format: str = "WAV",
        frames: int = 44100,
    ) -> SourceFormat:
        return SourceFormat(
            samplerate=samplerate,
            channels=channels,
            subtype=subtype,
            format=format,
            frames=frames,
        )

    return _create


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator so signal-based tests are reproducible."""
    return np.random.default_rng(1234)
