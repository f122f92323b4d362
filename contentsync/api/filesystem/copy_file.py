"""Binary file copy into a possibly missing directory."""

import shutil
from pathlib import Path

from .create_directory_if_not_exists import create_directory_if_not_exists


def copy_file(source: str | Path, destination: str | Path) -> Path:
    """Copy ``source`` to ``destination``, creating the parent directory first."""
    destination = Path(destination)
    create_directory_if_not_exists(destination.parent)
    shutil.copyfile(source, destination)
    return destination
