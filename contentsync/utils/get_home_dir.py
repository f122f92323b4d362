"""Get the contentsync home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get home directory based on CONTENTSYNC_HOME or default to ~/.contentsync."""
    home_env = os.environ.get("CONTENTSYNC_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".contentsync"
