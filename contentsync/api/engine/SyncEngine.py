"""Sync engine public API (watchdog-based)."""

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from watchdog.observers.api import BaseObserver

from ..config.SiteOptions import SiteOptions
from ..content.is_markdown import is_markdown
from ..filesystem.get_files_in_directory import get_files_in_directory
from ..link.ContentLink import ContentLink
from ..link.FileReadError import FileReadError
from ..link.get_linked_files import get_linked_files
from ..link.resolve_link_path import resolve_link_path
from ..mapping.find_owning_mapping import find_owning_mapping
from ..mapping.get_url_for_file import get_url_for_file
from ..mapping.is_ignored import is_ignored
from ..mapping.SyncableFile import SyncableFile
from ..mapping.SyncMapping import SyncMapping
from ._EventHandler import _EventHandler
from .start_watching import start_watching
from .SyncEvent import SyncEvent


class SyncEngine:
    """Mirrors the mapped source directories into the site, one event at a time.

    Handlers never raise: resolution problems are warnings, I/O problems are
    errors naming the paths involved, and processing continues with the next
    file or event.
    """

    def __init__(
        self,
        mappings: Sequence[SyncMapping],
        site: SiteOptions,
        logger: logging.Logger,
        delete_on_unlink_dir: bool = False,
    ) -> None:
        self.mappings: tuple[SyncMapping, ...] = tuple(mappings)
        self.site = site
        self.logger = logger
        self.delete_on_unlink_dir = delete_on_unlink_dir
        self._observer: BaseObserver | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_watching(self) -> bool:
        return self._observer is not None

    def start(self, initial_sync: bool = True, polling: bool = False) -> None:
        """Start watching every mapping's source directory.

        Calling ``start`` on an engine that is already watching is a no-op.
        """
        if self.is_watching:
            self.logger.info("ContentSync is already watching")
            return

        if initial_sync:
            self.sync_all()

        handler = _EventHandler(dispatch=self.handle, ignored=self.is_ignored)
        self._observer = start_watching((m.source for m in self.mappings), handler, polling=polling)
        for mapping in self.mappings:
            self.logger.info("Watching %s -> %s", mapping.source, mapping.target)

    def stop(self) -> None:
        """Stop the observer and wait for its thread to finish."""
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        self._observer = None
        self.logger.info("ContentSync stopped watching")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def is_ignored(self, path: str | Path) -> bool:
        return is_ignored(path, self.mappings)

    def handle(self, event: SyncEvent | str, path: str | Path) -> None:
        """Dispatch one change-notification event."""
        event = SyncEvent(event)
        path = Path(path)
        self.logger.debug("%s %s", event.value, path)
        if event in (SyncEvent.ADD, SyncEvent.CHANGE):
            self.on_add(path)
        elif event == SyncEvent.UNLINK:
            self.on_unlink(path)
        elif event == SyncEvent.ADD_DIR:
            self.on_add_dir(path)
        elif event == SyncEvent.UNLINK_DIR:
            self.on_unlink_dir(path)

    def on_add(self, path: Path) -> None:
        """Mirror an added or changed file."""
        mapping = self._owning_mapping(path)
        if mapping is None:
            return
        if is_markdown(path):
            self._sync_markdown(path, mapping, visited=set())
        else:
            self._copy(path, mapping)

    on_change = on_add

    def on_unlink(self, path: Path) -> None:
        """Delete the mirrored target of a removed file. Linked assets are left in place."""
        mapping = self._owning_mapping(path)
        if mapping is None:
            return
        try:
            syncable = SyncableFile.from_mapping(path, mapping, self.site, self.logger)
        except ValueError as e:
            self.logger.warning("Skipping %s: %s", path, e)
            return
        try:
            syncable.delete()
        except OSError as e:
            self.logger.error("Failed to delete %s (source %s): %s", syncable.target_file, path, e)

    def on_add_dir(self, path: Path) -> None:
        """Mirror every Markdown file under a newly added directory."""
        mapping = self._owning_mapping(path)
        if mapping is None:
            return
        for markdown_file in get_files_in_directory(path, is_markdown):
            if self.is_ignored(markdown_file):
                continue
            self._sync_markdown(markdown_file, mapping, visited=set())

    def on_unlink_dir(self, path: Path) -> None:
        """Handle a removed directory; only cascades when ``delete_on_unlink_dir`` is set."""
        mapping = self._owning_mapping(path)
        if mapping is None:
            return
        relative = mapping.relative_path(path)
        if relative is None or relative == Path("."):
            return

        target_dir = mapping.target / relative
        if not self.delete_on_unlink_dir:
            self.logger.info("Directory %s removed; leaving %s in place", path, target_dir)
            return
        if not target_dir.is_dir():
            self.logger.info("Directory %s removed; nothing mirrored at %s", path, target_dir)
            return
        try:
            shutil.rmtree(target_dir)
            self.logger.info("Deleted %s", target_dir)
        except OSError as e:
            self.logger.error("Failed to delete %s (source %s): %s", target_dir, path, e)

    def sync_all(self) -> int:
        """Mirror every non-ignored file of every mapping. Returns the number of files visited."""
        count = 0
        for mapping in self.mappings:
            for path in get_files_in_directory(mapping.source, lambda p: not self.is_ignored(p)):
                # Nested mappings own their own files
                if find_owning_mapping(path, self.mappings) is not mapping:
                    continue
                self.on_add(path)
                count += 1
        return count

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _owning_mapping(self, path: Path) -> SyncMapping | None:
        mapping = find_owning_mapping(path, self.mappings)
        if mapping is None:
            self.logger.info("No sync mapping owns %s; skipping", path)
        return mapping

    def _copy(self, path: Path, mapping: SyncMapping, links: list[ContentLink] | None = None) -> bool:
        try:
            syncable = SyncableFile.from_mapping(path, mapping, self.site, self.logger)
        except ValueError as e:
            self.logger.warning("Skipping %s: %s", path, e)
            return False
        try:
            syncable.copy(links)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error("Failed to copy %s to %s: %s", syncable.source_file, syncable.target_file, e)
            return False
        return True

    def _resolve(self, raw_target: str, document: Path, mapping: SyncMapping) -> Path | None:
        # Relative to the document first, then vault-relative
        for base_dir in dict.fromkeys((document.parent, mapping.source)):
            resolved = resolve_link_path(raw_target, base_dir)
            if resolved is not None:
                return resolved
        return None

    def _sync_markdown(self, path: Path, mapping: SyncMapping, visited: set[Path]) -> bool:
        """Copy the files ``path`` links to, then ``path`` itself with its links rewritten."""
        key = path.resolve()
        if key in visited:
            return True
        visited.add(key)

        try:
            raw_targets = get_linked_files(path)
        except FileReadError as e:
            self.logger.error("Failed to read %s: %s", path, e.reason)
            return False

        links: list[ContentLink] = []
        for raw_target in raw_targets:
            linked = self._resolve(raw_target, path, mapping)
            if linked is None:
                self.logger.warning("Could not resolve %s linked from %s", raw_target, path)
                continue
            if not mapping.contains(linked):
                self.logger.warning("Skipping %s linked from %s: outside %s", raw_target, path, mapping.source)
                continue
            if self.is_ignored(linked):
                self.logger.info("Skipping %s linked from %s: ignored", raw_target, path)
                continue

            url = get_url_for_file(linked, mapping, self.site)
            copied = self._sync_markdown(linked, mapping, visited) if is_markdown(linked) else self._copy(linked, mapping)
            if copied:
                links.append(ContentLink(raw_target=raw_target, url=url))

        return self._copy(path, mapping, links)
