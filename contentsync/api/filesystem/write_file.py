"""Text write into a possibly missing directory."""

from pathlib import Path

from .create_directory_if_not_exists import create_directory_if_not_exists


def write_file(destination: str | Path, content: str) -> Path:
    """Write ``content`` as UTF-8 to ``destination``, creating the parent directory first."""
    destination = Path(destination)
    create_directory_if_not_exists(destination.parent)
    destination.write_text(content, encoding="utf-8")
    return destination
