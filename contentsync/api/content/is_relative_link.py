"""Relative link predicate (UNO: single function)."""

from ._constants import EXTERNAL_LINK_PREFIX


def is_relative_link(target: str) -> bool:
    """Return True unless ``target`` starts with ``http`` (covers http:// and https://)."""
    return not target.startswith(EXTERNAL_LINK_PREFIX)
