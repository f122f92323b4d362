"""ContentLink model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContentLink:
    """A resolved link: the target as written and the URL it is served at."""

    raw_target: str
    url: str
