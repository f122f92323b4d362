"""Top-level contentsync configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..mapping.SyncMappingInput import SyncMappingInput
from .ConfigError import ConfigError
from .get_config_path import get_config_path
from .LogConfig import LogConfig
from .SiteOptions import SiteOptions
from .WatchConfig import WatchConfig


class ContentSyncConfig(BaseModel):
    """Top-level configuration for a sync session."""

    model_config = ConfigDict(extra="forbid")

    site: SiteOptions
    sync: list[SyncMappingInput | str] = Field(default_factory=list)
    watch: WatchConfig = Field(default_factory=WatchConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "ContentSyncConfig":
        """Load and validate config from a JSON file.

        Raises:
            ConfigError: If config file not found, invalid JSON, or validation error
        """
        config_path = get_config_path(path)

        if not config_path.exists():
            raise ConfigError(f"Configuration file not found at {config_path}")

        try:
            with config_path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {config_path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            first = e.errors()[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc)
            msg = first.get("msg", str(e))
            detail = f"{field}: {msg}" if field else msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")
