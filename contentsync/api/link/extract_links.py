"""Relative link extraction (UNO: single function)."""

from ..content.is_relative_link import is_relative_link
from ._parsers import iter_links


def extract_links(text: str) -> list[str]:
    """Return the distinct relative link targets referenced by ``text``.

    Inline links/images, Obsidian embeds and HTML resource attributes are all
    collected; external (``http``) and empty targets are dropped. Order is first
    occurrence per parser, which callers must not rely on.
    """
    links: dict[str, None] = {}
    for ref in iter_links(text):
        if ref.raw_target and is_relative_link(ref.raw_target):
            links.setdefault(ref.raw_target, None)
    return list(links)
