"""Resolve a relative link target to a file on disk."""

from pathlib import Path

from ..content._constants import IMAGE_DIRS
from ..content.is_image import is_image
from ..filesystem.resolve_file_path import resolve_file_path


def _candidate(raw_target: str, base_dir: Path) -> Path | None:
    target = Path(raw_target)
    return resolve_file_path(target if target.is_absolute() else base_dir / target)


def resolve_link_path(raw_target: str, base_dir: str | Path) -> Path | None:
    """Resolve ``raw_target`` against ``base_dir``.

    Images that are not found directly are looked up again under each
    attachment folder (``images/``, ``Images/``) of ``base_dir``.

    Returns:
        Canonical absolute path of the regular file, or None if not found
    """
    base_dir = Path(base_dir)

    resolved = _candidate(raw_target, base_dir)
    if resolved is not None:
        return resolved

    if not is_image(raw_target):
        return None

    for image_dir in IMAGE_DIRS:
        resolved = _candidate(raw_target, base_dir / image_dir)
        if resolved is not None:
            return resolved
    return None
