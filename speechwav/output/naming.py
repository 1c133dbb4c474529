"""Output file naming for Speech WAV.

Converted files are named ``<prefix><uuid4 hex>.<extension>``. The janitor
only removes names that match this pattern exactly.
"""

import re
import uuid
from pathlib import Path

UNIQUE_ID_PATTERN = r"[0-9a-f]{32}"


def build_output_path(output_dir: Path, prefix: str, extension: str) -> Path:
    """Build a fresh, collision-resistant output path.

    Args:
        output_dir: Directory the file will live in
        prefix: Fixed name prefix
        extension: File extension without the dot

    Returns:
        ``output_dir / f"{prefix}{uuid4().hex}.{extension}"``
    """
    return output_dir / f"{prefix}{uuid.uuid4().hex}.{extension}"


def output_name_pattern(prefix: str, extension: str) -> re.Pattern[str]:
    """Compile the pattern matching names produced by :func:`build_output_path`."""
    return re.compile(rf"{re.escape(prefix)}{UNIQUE_ID_PATTERN}\.{re.escape(extension)}")


def matches_output_name(name: str, prefix: str, extension: str) -> bool:
    """Return True if ``name`` follows the converted-file naming convention."""
    return output_name_pattern(prefix, extension).fullmatch(name) is not None
