"""Ignore predicate for watched paths."""

from collections.abc import Iterable
from pathlib import Path

from ._matches_pattern import _matches_pattern
from .SyncMapping import SyncMapping


def is_ignored(path: str | Path, mappings: Iterable[SyncMapping]) -> bool:
    """Return True if ``path`` lies under a mapping source and matches one of its patterns."""
    path = Path(path)
    for mapping in mappings:
        relative = mapping.relative_path(path)
        if relative is None or relative == Path("."):
            continue
        if _matches_pattern(mapping.ignored, path, relative):
            return True
    return False
