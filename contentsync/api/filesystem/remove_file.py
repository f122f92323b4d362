"""Delete a single file."""

from pathlib import Path


def remove_file(path: str | Path) -> None:
    """Delete ``path``.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    Path(path).unlink()
