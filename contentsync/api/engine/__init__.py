"""Sync engine: reacts to filesystem events and keeps the mirror consistent."""

from .SyncEngine import SyncEngine
from .SyncEvent import SyncEvent

__all__ = ["SyncEngine", "SyncEvent"]
