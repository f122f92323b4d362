"""Configuration domain."""

from .ConfigError import ConfigError
from .ContentSyncConfig import ContentSyncConfig
from .LogConfig import LogConfig
from .SiteOptions import SiteOptions
from .WatchConfig import WatchConfig

__all__ = [
    "ConfigError",
    "ContentSyncConfig",
    "LogConfig",
    "SiteOptions",
    "WatchConfig",
]
