"""Pydantic models for Speech WAV configuration."""

import tempfile
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from speechwav.constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_OUTPUT_EXTENSION,
    DEFAULT_OUTPUT_PREFIX,
    DEFAULT_OUTPUT_SUBDIR,
)


def default_output_dir() -> Path:
    """Return the per-user temp location used when no output_dir is configured."""
    return Path(tempfile.gettempdir()) / DEFAULT_OUTPUT_SUBDIR


class ConverterSettings(BaseModel):
    """Settings shared by the transcoding pipeline and the temp-file janitor."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_dir: Path = Field(default_factory=default_output_dir, description="Directory for converted files")
    chunk_size: int = Field(DEFAULT_CHUNK_SIZE, ge=1, description="Source frames read per iteration")
    file_prefix: str = Field(DEFAULT_OUTPUT_PREFIX, min_length=1, description="Name prefix of converted files")
    extension: str = Field(DEFAULT_OUTPUT_EXTENSION, min_length=1, description="Extension of converted files")
    show_progress: bool = False

    @field_validator("output_dir", mode="before")
    @classmethod
    def expand_output_dir(cls, value):
        if isinstance(value, str):
            value = Path(value)
        if isinstance(value, Path):
            return value.expanduser()
        return value

    @field_validator("file_prefix")
    @classmethod
    def validate_prefix(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError(f"file_prefix must not contain path separators: {value!r}")
        return value

    @field_validator("extension")
    @classmethod
    def clean_extension(cls, value: str) -> str:
        """Strip a leading dot and require an alphanumeric extension."""
        value = value.strip().lstrip(".")
        if not value.isalnum():
            raise ValueError(f"extension must be alphanumeric, got {value!r}")
        return value.lower()
