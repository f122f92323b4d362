"""Content classification (pure, no I/O)."""

from .is_image import is_image
from .is_markdown import is_markdown
from .is_relative_link import is_relative_link

__all__ = ["is_image", "is_markdown", "is_relative_link"]
