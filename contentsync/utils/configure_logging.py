"""Configure unified contentsync logging."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home_dir: Path | None = None, level: str = "INFO", console: bool = True) -> None:
    """Configure unified contentsync logging.

    Args:
        home_dir: Directory holding ``contentsync.log``. If None, derived from environment.
        level: Logging level name for the ``contentsync`` logger.
        console: Also log to stderr through rich.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home_dir is None:
        home_dir = get_home_dir()

    home_dir.mkdir(parents=True, exist_ok=True)
    log_file = home_dir / "contentsync.log"

    root_logger = logging.getLogger("contentsync")
    root_logger.setLevel(logging.getLevelName(level.upper()))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if console:
        rich_handler = RichHandler(console=Console(file=sys.stderr), show_path=False, markup=False)
        rich_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(rich_handler)

    _CONFIGURED = True
