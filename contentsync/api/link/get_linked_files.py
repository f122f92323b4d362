"""Linked file discovery for a Markdown document."""

from pathlib import Path

from .extract_links import extract_links
from .FileReadError import FileReadError


def get_linked_files(source: str | Path) -> list[str]:
    """Read ``source`` and return the relative link targets it references.

    Raises:
        FileReadError: If the file cannot be read or decoded
    """
    try:
        contents = Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(source, str(e)) from e
    return extract_links(contents)
