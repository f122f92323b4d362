"""Link domain: extraction, resolution and rewriting of relative links."""

from .ContentLink import ContentLink
from .extract_links import extract_links
from .FileReadError import FileReadError
from .get_linked_files import get_linked_files
from .replace_content_link import replace_content_link
from .resolve_link_path import resolve_link_path
from .rewrite_content_links import rewrite_content_links

__all__ = [
    "ContentLink",
    "FileReadError",
    "extract_links",
    "get_linked_files",
    "replace_content_link",
    "resolve_link_path",
    "rewrite_content_links",
]
