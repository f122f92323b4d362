"""Create a directory (and parents) unless it already exists."""

from pathlib import Path


def create_directory_if_not_exists(destination: str | Path) -> Path:
    """Create ``destination`` recursively and return it.

    Raises:
        ValueError: If ``destination`` is empty
    """
    if not destination:
        raise ValueError("Target path is missing or invalid")

    path = Path(destination)
    if not path.is_dir():
        path.mkdir(parents=True, exist_ok=True)
    return path
