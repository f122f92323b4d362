"""Image classifier (UNO: single function)."""

from pathlib import Path

from ._constants import IMAGE_EXTENSIONS


def is_image(path: str | Path) -> bool:
    """Return True if ``path`` ends with an image extension (case-insensitive)."""
    return str(path).lower().endswith(IMAGE_EXTENSIONS)
