"""Watchdog event handler for the sync engine."""

from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from .SyncEvent import SyncEvent


def _as_str(path: str | bytes) -> str:
    return path.decode() if isinstance(path, bytes) else path


class _EventHandler(FileSystemEventHandler):
    """Translates watchdog events into engine events.

    The ignore predicate is consulted before anything reaches the engine.
    Moves are reported as a removal of the old path followed by an addition
    of the new one.
    """

    def __init__(
        self,
        dispatch: Callable[[SyncEvent, Path], None],
        ignored: Callable[[Path], bool],
    ) -> None:
        super().__init__()
        self._dispatch = dispatch
        self._ignored = ignored

    def _emit(self, event: SyncEvent, path: str | bytes) -> None:
        path_obj = Path(_as_str(path))
        if self._ignored(path_obj):
            return
        self._dispatch(event, path_obj)

    def on_created(self, event: FileSystemEvent) -> None:
        self._emit(SyncEvent.ADD_DIR if event.is_directory else SyncEvent.ADD, event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._emit(SyncEvent.CHANGE, event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._emit(SyncEvent.UNLINK_DIR if event.is_directory else SyncEvent.UNLINK, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            self._emit(SyncEvent.UNLINK_DIR, event.src_path)
            self._emit(SyncEvent.ADD_DIR, event.dest_path)
        else:
            self._emit(SyncEvent.UNLINK, event.src_path)
            self._emit(SyncEvent.ADD, event.dest_path)
