"""Structured sync mapping input (UNO: single model)."""

from pydantic import BaseModel, ConfigDict, Field


class SyncMappingInput(BaseModel):
    """A mapping as configured by the user, before validation against disk."""

    model_config = ConfigDict(extra="forbid")

    source: str = Field("", description="Directory to watch")
    target: str | None = Field(None, description="Directory Markdown files are copied into")
    ignored: list[str] | None = Field(None, description="Glob patterns (or 're:' regexes) to skip")
