"""Validated sync mapping (UNO: single model)."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class SyncMapping(BaseModel):
    """One synchronization unit: a watched source directory and its Markdown target.

    Immutable once built by the registry.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: Path = Field(..., description="Absolute directory being watched")
    target: Path = Field(..., description="Absolute directory Markdown files are copied into")
    ignored: list[str] = Field(default_factory=list, description="Patterns excluded from sync")

    def contains(self, path: str | Path) -> bool:
        """Return True if ``path`` is the source directory or lies beneath it."""
        return self.relative_path(path) is not None

    def relative_path(self, path: str | Path) -> Path | None:
        """Return ``path`` relative to the source directory, or None if outside it.

        Canonical (symlink-resolved) paths are accepted too, since resolved link
        targets come back in that form.
        """
        path = Path(path)
        for root in (self.source, self.source.resolve()):
            try:
                return path.relative_to(root)
            except ValueError:
                continue
        return None
