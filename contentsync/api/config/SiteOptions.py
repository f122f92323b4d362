"""Site generator directory layout."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...utils.normalize_path import normalize_path


class SiteOptions(BaseModel):
    """Directories of the site that consumes the mirrored files.

    Only ``root_dir`` is required; ``src_dir`` and ``public_dir`` follow the
    usual ``<root>/src`` and ``<root>/public`` layout when omitted.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root_dir: Path = Field(..., description="Site project root")
    src_dir: Path = Field(..., description="Site source directory (holds content/)")
    public_dir: Path = Field(..., description="Directory served verbatim at /")

    @model_validator(mode="before")
    @classmethod
    def fill_defaults(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            raise ValueError(f"site config must be a dict, got {type(values).__name__}")
        values = dict(values)
        root = values.get("root_dir")
        if not root:
            raise ValueError("root_dir is required")
        root_path = normalize_path(root)
        values["root_dir"] = root_path
        values["src_dir"] = normalize_path(values.get("src_dir") or root_path / "src")
        values["public_dir"] = normalize_path(values.get("public_dir") or root_path / "public")
        return values

    @property
    def content_dir(self) -> Path:
        """Default target for Markdown files."""
        return self.src_dir / "content"
