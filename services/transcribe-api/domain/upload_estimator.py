"""Size-based estimates shown to users before they upload."""

import os

from config import SIZE_CEILING_BYTES

# Typical encoding bitrates in kbps.
AVERAGE_BITRATES = {
    "mp3": 128,
    "m4a": 256,
}
DEFAULT_BITRATE = 128


def estimate_duration_minutes(size_bytes: int, file_name: str) -> int:
    """Rough duration from file size, assuming an average bitrate per format."""
    extension = os.path.splitext(file_name)[1].lstrip(".").lower()
    bitrate = AVERAGE_BITRATES.get(extension, DEFAULT_BITRATE)
    return round((size_bytes * 8) / (bitrate * 1000 * 60))


def format_file_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def is_over_limit(size_bytes: int, limit_bytes: int = SIZE_CEILING_BYTES) -> bool:
    return size_bytes > limit_bytes
