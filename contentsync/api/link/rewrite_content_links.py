"""Apply a sequence of link rewrites."""

from collections.abc import Iterable
from functools import reduce

from .ContentLink import ContentLink
from .replace_content_link import replace_content_link


def rewrite_content_links(content: str, links: Iterable[ContentLink]) -> str:
    """Fold ``replace_content_link`` over ``links`` in order, each on the previous result."""
    return reduce(replace_content_link, links, content)
