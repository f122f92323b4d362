"""Load configuration and build mappings for a CLI session."""

from pathlib import Path

from ...utils.get_logger import get_logger
from ..mapping.get_mappings_from_inputs import get_mappings_from_inputs
from ..mapping.SyncMapping import SyncMapping
from .ContentSyncConfig import ContentSyncConfig


def load_site_session(config_path: str | Path | None = None) -> tuple[ContentSyncConfig, list[SyncMapping]]:
    """Load the config file and return it with its validated mappings.

    Raises:
        ConfigError: If the config file is missing or invalid
    """
    config = ContentSyncConfig.load(config_path)
    mappings = get_mappings_from_inputs(config.sync, config.site, get_logger("registry"))
    return config, mappings
