"""File read error."""

from pathlib import Path


class FileReadError(Exception):
    """Raised when a document cannot be read for link extraction."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")
