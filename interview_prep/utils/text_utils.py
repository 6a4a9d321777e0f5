"""
Text helpers shared by the chunker and the model output parsers.
"""
import re
from pathlib import Path

from .logger import setup_logger

logger = setup_logger("text_utils")

_CODE_FENCE = re.compile(r"```(?:json)?\n?")


def strip_code_fences(text: str) -> str:
    """
    Remove markdown code fences that models wrap around JSON.

    Args:
        text: Raw model output

    Returns:
        Text without ``` / ```json markers, stripped
    """
    if not text:
        return ""
    return _CODE_FENCE.sub("", text).strip()


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def cleanup_file(file_path: Path) -> None:
    """Delete a local file if it exists. Failures are logged, not raised."""
    try:
        Path(file_path).unlink(missing_ok=True)
    except OSError as e:
        logger.error(f"Error cleaning up file {file_path}: {e}")
