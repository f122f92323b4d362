"""Link reference dataclass (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkRef:
    """A reference to a link found in a document."""

    line_number: int
    column_number: int
    raw_target: str
    link_type: str  # "markdown", "embed", "html"
    is_embed: bool = False
