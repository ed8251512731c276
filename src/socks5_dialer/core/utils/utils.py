"""Common utility functions."""

from typing import Final

# Size constants
BYTES_PER_KB: Final = 1024
BYTES_PER_MB: Final = BYTES_PER_KB * 1024
BYTES_PER_GB: Final = BYTES_PER_MB * 1024

# Size units
SIZE_UNITS: Final = [
    ("B", 1),
    ("KB", BYTES_PER_KB),
    ("MB", BYTES_PER_MB),
]

PREVIEW_LENGTH: Final = 64


def format_bytes(bytes_: float) -> str:
    """Format bytes into human readable format.

    Args:
        bytes_: Number of bytes to format

    Returns:
        str: Formatted string with appropriate unit
    """
    for unit, divisor in SIZE_UNITS:
        if bytes_ < divisor * BYTES_PER_KB:
            return f"{bytes_ / divisor:.1f} {unit}"
    return f"{bytes_ / BYTES_PER_GB:.1f} GB"


def preview_bytes(data: bytes, limit: int = PREVIEW_LENGTH) -> str:
    """Render the start of ``data`` as printable text, escaping the rest."""
    text = data[:limit].decode("ascii", errors="backslashreplace")
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    if len(data) > limit:
        text += "..."
    return text
