"""Locate the contentsync configuration file."""

import os
from pathlib import Path

from ...utils.normalize_path import normalize_path


def get_config_path(explicit: str | Path | None = None) -> Path:
    """Return ``explicit``, else ``$CONTENTSYNC_CONFIG``, else ``./contentsync.json``."""
    if explicit:
        return normalize_path(explicit)
    env_path = os.environ.get("CONTENTSYNC_CONFIG")
    if env_path:
        return normalize_path(env_path)
    return normalize_path("contentsync.json")
