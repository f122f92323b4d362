"""Ownership lookup (UNO: single function)."""

from collections.abc import Iterable
from pathlib import Path

from .SyncMapping import SyncMapping


def find_owning_mapping(path: str | Path, mappings: Iterable[SyncMapping]) -> SyncMapping | None:
    """Return the first mapping whose source contains ``path``.

    Mappings from the registry are ordered most specific first, so nested
    roots resolve to the innermost one.
    """
    for mapping in mappings:
        if mapping.contains(path):
            return mapping
    return None
