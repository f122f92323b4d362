"""Resolve a candidate path to an existing regular file."""

from pathlib import Path


def resolve_file_path(file_name: str | Path) -> Path | None:
    """Return the canonical absolute path of ``file_name`` if it is a regular file.

    Relative names are taken against the current working directory. Directories,
    missing paths and unreadable entries all yield None.
    """
    try:
        candidate = Path(file_name).expanduser()
        if not candidate.is_file():
            return None
        return candidate.resolve()
    except (OSError, ValueError, RuntimeError):
        # OSError: permission denied, file system issues
        # ValueError: invalid path (embedded NUL)
        # RuntimeError: symlink loop
        return None
