"""A source file paired with its mirrored target."""

import logging
from collections.abc import Iterable
from pathlib import Path

from ..config.SiteOptions import SiteOptions
from ..filesystem.copy_file import copy_file
from ..filesystem.remove_file import remove_file
from ..filesystem.write_file import write_file
from ..link.ContentLink import ContentLink
from ..link.rewrite_content_links import rewrite_content_links
from .get_target_path import get_target_path
from .SyncMapping import SyncMapping


class SyncableFile:
    """One unit of sync work: copy ``source_file`` to ``target_file`` or delete the target."""

    def __init__(self, source_file: str | Path, target_file: str | Path, logger: logging.Logger):
        self.source_file = Path(source_file)
        self.target_file = Path(target_file)
        self.logger = logger

    @classmethod
    def from_mapping(
        cls,
        path: str | Path,
        mapping: SyncMapping,
        site: SiteOptions,
        logger: logging.Logger,
    ) -> "SyncableFile":
        """Pair ``path`` with its target under ``mapping``.

        Raises:
            ValueError: If ``path`` is not under the mapping's source
        """
        return cls(path, get_target_path(path, mapping, site), logger)

    def copy(self, links: Iterable[ContentLink] | None = None) -> Path:
        """Mirror the source file.

        With ``links``, the source is read as text and written with every link
        rewritten; otherwise the bytes are copied unchanged.

        Raises:
            OSError: If reading, copying or writing fails
        """
        if links is None:
            copy_file(self.source_file, self.target_file)
        else:
            content = self.source_file.read_text(encoding="utf-8")
            write_file(self.target_file, rewrite_content_links(content, links))
        self.logger.info("Copied %s into %s", self.source_file, self.target_file.parent)
        return self.target_file

    def delete(self) -> None:
        """Remove the mirrored target.

        Raises:
            OSError: If the target cannot be removed (including when it is missing)
        """
        remove_file(self.target_file)
        self.logger.info("Deleted %s", self.target_file)

    def __repr__(self) -> str:
        return f"SyncableFile({str(self.source_file)!r} -> {str(self.target_file)!r})"
