"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or function-scoped
- Generic enough for reuse across different test categories
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import soundfile as sf

from speechwav.config import ConverterSettings


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def tmp_input_dir(tmp_path: Path) -> Path:
    """Create a temporary input directory for source audio files."""
    input_dir = tmp_path / "input"
    input_dir.mkdir(parents=True, exist_ok=True)
    return input_dir


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Create a temporary output directory for converted files."""
    output_dir = tmp_path / "output"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


@pytest.fixture
def settings(tmp_output_dir: Path) -> ConverterSettings:
    """Default settings writing into the temporary output directory."""
    return ConverterSettings(output_dir=tmp_output_dir)


# =============================================================================
# Audio File Factories
# =============================================================================

@pytest.fixture
def write_tone(tmp_input_dir: Path):
    """Factory fixture writing a sine tone to a sound file.

    Returns:
        Callable that writes the file and returns its path.

    Example:
        >>> path = write_tone("stereo.wav", samplerate=44100, channels=2, duration=5.0)
    """
    def _create(
        filename: str = "tone.wav",
        *,
        samplerate: int = 44100,
        channels: int = 2,
        duration: float = 1.0,
        frequency: float = 440.0,
        amplitude: float = 0.5,
        subtype: str = "PCM_16",
        format: str | None = None,
    ) -> Path:
        frames = int(round(samplerate * duration))
        t = np.arange(frames) / samplerate
        tone = amplitude * np.sin(2 * np.pi * frequency * t)
        data = np.column_stack([tone] * channels) if channels > 1 else tone
        path = tmp_input_dir / filename
        sf.write(str(path), data, samplerate, subtype=subtype, format=format)
        return path

    return _create


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
