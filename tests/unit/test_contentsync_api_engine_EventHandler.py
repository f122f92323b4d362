"""Unit tests for contentsync.api.engine._EventHandler."""

from pathlib import Path

from watchdog.events import (
    DirCreatedEvent,
    DirDeletedEvent,
    DirModifiedEvent,
    DirMovedEvent,
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from contentsync.api.engine._EventHandler import _EventHandler
from contentsync.api.engine.SyncEvent import SyncEvent


def _handler(ignored=lambda _path: False):
    events: list[tuple[SyncEvent, Path]] = []
    handler = _EventHandler(dispatch=lambda event, path: events.append((event, path)), ignored=ignored)
    return handler, events


def test_file_events_are_translated():
    handler, events = _handler()

    handler.dispatch(FileCreatedEvent("/v/a.md"))
    handler.dispatch(FileModifiedEvent("/v/a.md"))
    handler.dispatch(FileDeletedEvent("/v/a.md"))

    assert events == [
        (SyncEvent.ADD, Path("/v/a.md")),
        (SyncEvent.CHANGE, Path("/v/a.md")),
        (SyncEvent.UNLINK, Path("/v/a.md")),
    ]


def test_directory_events_are_translated():
    handler, events = _handler()

    handler.dispatch(DirCreatedEvent("/v/sub"))
    handler.dispatch(DirModifiedEvent("/v/sub"))
    handler.dispatch(DirDeletedEvent("/v/sub"))

    assert events == [(SyncEvent.ADD_DIR, Path("/v/sub")), (SyncEvent.UNLINK_DIR, Path("/v/sub"))]


def test_moves_become_unlink_then_add():
    handler, events = _handler()

    handler.dispatch(FileMovedEvent("/v/old.md", "/v/new.md"))
    handler.dispatch(DirMovedEvent("/v/old", "/v/new"))

    assert events == [
        (SyncEvent.UNLINK, Path("/v/old.md")),
        (SyncEvent.ADD, Path("/v/new.md")),
        (SyncEvent.UNLINK_DIR, Path("/v/old")),
        (SyncEvent.ADD_DIR, Path("/v/new")),
    ]


def test_ignored_paths_never_reach_dispatch():
    handler, events = _handler(ignored=lambda path: path.suffix == ".tmp")

    handler.dispatch(FileCreatedEvent("/v/scratch.tmp"))
    handler.dispatch(FileMovedEvent("/v/scratch.tmp", "/v/final.md"))

    assert events == [(SyncEvent.ADD, Path("/v/final.md"))]


def test_bytes_paths_are_decoded():
    handler, events = _handler()
    handler.dispatch(FileCreatedEvent(b"/v/a.md"))
    assert events == [(SyncEvent.ADD, Path("/v/a.md"))]
