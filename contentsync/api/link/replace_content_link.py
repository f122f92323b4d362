"""Rewrite one link in Markdown content (UNO: single function)."""

import re

from .ContentLink import ContentLink

# The target must stand alone: bounded by link delimiters, quotes or whitespace
_TARGET_START = r"""(?<![^\s(\[<"'=])"""
_TARGET_END = r"""(?![^\s)\]>"'])"""
# A title that closes an inline link: ./a.png "Title")
_TITLE_FRAGMENT = r"""(?:\s+(?:"[^"\n]*"|'[^'\n]*')(?=\s*\)))?"""


def replace_content_link(content: str, link: ContentLink) -> str:
    """Replace every occurrence of ``link.raw_target`` (case-insensitive) with ``link.url``.

    Only whole targets are replaced, so ``img.png`` never matches inside
    ``sub/img.png`` or inside a URL written by an earlier rewrite. A quoted
    title trailing the target inside an inline link is replaced along with it.
    """
    pattern = re.compile(
        _TARGET_START + re.escape(link.raw_target) + _TARGET_END + _TITLE_FRAGMENT,
        re.IGNORECASE,
    )
    return pattern.sub(lambda _match: link.url, content)
