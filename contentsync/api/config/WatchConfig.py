"""Watch session configuration."""

from pydantic import BaseModel, ConfigDict, Field


class WatchConfig(BaseModel):
    """Behaviour of the watch session."""

    model_config = ConfigDict(extra="forbid")

    initial_sync: bool = Field(True, description="Mirror every existing file when watching starts")
    polling: bool = Field(False, description="Use the polling observer instead of native notifications")
    delete_on_unlink_dir: bool = Field(False, description="Remove the mirrored directory when a source directory is removed")
