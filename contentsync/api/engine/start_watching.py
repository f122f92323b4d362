"""Start a watchdog observer on a set of directories."""

import contextlib
from collections.abc import Iterable
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver
from watchdog.observers.polling import PollingObserver


def start_watching(
    directories: Iterable[Path],
    event_handler: FileSystemEventHandler,
    polling: bool = False,
) -> BaseObserver:
    """Schedule ``event_handler`` recursively on every directory and start observing.

    The platform's native observer is tried first; the polling observer is the
    fallback (and the only choice when ``polling`` is set).

    Returns:
        Running observer (call .stop() and .join() to stop monitoring)

    Raises:
        RuntimeError: If no observer could be started
    """
    directories = list(directories)
    candidates: list[type[BaseObserver]] = [PollingObserver] if polling else [Observer, PollingObserver]

    last_error: Exception | None = None
    for observer_class in candidates:
        observer = observer_class()
        try:
            for directory in directories:
                observer.schedule(event_handler, str(directory), recursive=True)
            observer.start()
            return observer
        except OSError as e:
            # inotify watch limits and the like
            last_error = e
            with contextlib.suppress(RuntimeError):
                observer.stop()
            continue
    raise RuntimeError(f"Failed to start file observer: {last_error}")
