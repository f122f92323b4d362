"""Recursive file listing with a predicate."""

from collections.abc import Callable
from pathlib import Path


def get_files_in_directory(root: str | Path, predicate: Callable[[Path], bool] | None = None) -> list[Path]:
    """Return every file under ``root`` (recursively) accepted by ``predicate``.

    Args:
        root: Directory to walk
        predicate: Optional filter; all files are returned when None

    Returns:
        Sorted list of file paths
    """
    root = Path(root)
    if not root.is_dir():
        return []
    return sorted(child for child in root.rglob("*") if child.is_file() and (predicate is None or predicate(child)))
