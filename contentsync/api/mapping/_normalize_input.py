"""Normalize one configured input into a SyncMapping."""

import os
from typing import Any

from ..config.ConfigError import ConfigError
from ..config.SiteOptions import SiteOptions
from ...utils.normalize_path import normalize_path
from ._constants import SOURCE_PATH_EMPTY_MESSAGE
from .SyncMapping import SyncMapping
from .SyncMappingInput import SyncMappingInput


def _parse_shorthand(text: str) -> SyncMappingInput:
    source, _, target = text.partition(os.pathsep)
    return SyncMappingInput(source=source.strip(), target=target.strip() or None)


def _normalize_input(raw: SyncMappingInput | dict[str, Any] | str, site: SiteOptions) -> SyncMapping:
    """Turn a shorthand string, dict or SyncMappingInput into a SyncMapping.

    Raises:
        ConfigError: If the source path is empty
    """
    if isinstance(raw, str):
        entry = _parse_shorthand(raw)
    elif isinstance(raw, dict):
        entry = SyncMappingInput(**raw)
    else:
        entry = raw

    if not entry.source or not entry.source.strip():
        raise ConfigError(SOURCE_PATH_EMPTY_MESSAGE)

    return SyncMapping(
        source=normalize_path(entry.source.strip()),
        target=normalize_path(entry.target) if entry.target else site.content_dir,
        ignored=list(entry.ignored or []),
    )
