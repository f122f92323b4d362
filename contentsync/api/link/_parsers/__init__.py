"""Link parsers package.

Every pattern class used to find links in a document lives behind
``BaseParser``; callers only see ``iter_links``.
"""

from collections.abc import Iterator

from ._BaseParser import BaseParser
from ._HTMLParser import HTMLParser
from ._MarkdownParser import MarkdownParser
from .LinkRef import LinkRef

_PARSERS: tuple[type[BaseParser], ...] = (
    MarkdownParser,
    HTMLParser,
)


def iter_links(text: str) -> Iterator[LinkRef]:
    """Yield every link found by every registered parser (no short-circuit)."""
    for parser_cls in _PARSERS:
        yield from parser_cls().parse(text)


__all__ = ["BaseParser", "HTMLParser", "LinkRef", "MarkdownParser", "iter_links"]
