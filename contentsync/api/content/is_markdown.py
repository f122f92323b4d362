"""Markdown classifier (UNO: single function)."""

from pathlib import Path

from ._constants import MARKDOWN_EXTENSIONS


def is_markdown(path: str | Path) -> bool:
    """Return True if ``path`` ends with a Markdown extension (case-insensitive)."""
    return str(path).lower().endswith(MARKDOWN_EXTENSIONS)
