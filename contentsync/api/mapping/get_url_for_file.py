"""Served URL for a mirrored file."""

from pathlib import Path, PurePosixPath

from ..config.SiteOptions import SiteOptions
from ..content.is_markdown import is_markdown
from .get_target_path import get_target_path
from .SyncMapping import SyncMapping


def get_url_for_file(path: str | Path, mapping: SyncMapping, site: SiteOptions) -> str:
    """Return the site-relative URL ``path`` is served at once mirrored.

    Non-Markdown files keep their path relative to the source. Markdown pages
    are addressed by their path under the content directory without extension.

    Raises:
        ValueError: If ``path`` is not under the mapping's source
    """
    relative = mapping.relative_path(path)
    if relative is None:
        raise ValueError(f"{path} is not under {mapping.source}")

    if not is_markdown(path):
        return f"/{PurePosixPath(*relative.parts)}"

    target = get_target_path(path, mapping, site)
    try:
        page = target.relative_to(site.content_dir)
    except ValueError:
        # Custom target outside src/content: address relative to the target itself
        page = target.relative_to(mapping.target)
    return f"/{PurePosixPath(*page.with_suffix('').parts)}"
