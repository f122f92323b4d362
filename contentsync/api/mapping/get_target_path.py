"""Source-to-target path mapping."""

from pathlib import Path

from ..config.SiteOptions import SiteOptions
from ..content.is_markdown import is_markdown
from .SyncMapping import SyncMapping


def get_target_path(path: str | Path, mapping: SyncMapping, site: SiteOptions) -> Path:
    """Return where ``path`` is mirrored.

    Markdown goes under the mapping's target (the site content directory when
    unset); every other file goes under the site's public directory.

    Raises:
        ValueError: If ``path`` is not under the mapping's source
    """
    relative = mapping.relative_path(path)
    if relative is None:
        raise ValueError(f"{path} is not under {mapping.source}")

    if is_markdown(path):
        return (mapping.target or site.content_dir) / relative
    return site.public_dir / relative
