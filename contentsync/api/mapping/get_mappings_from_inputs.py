"""Build validated sync mappings from configuration input."""

import logging
import os
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from ..config.ConfigError import ConfigError
from ..config.SiteOptions import SiteOptions
from ._constants import DIRECTORY_NOT_FOUND_ERROR, IGNORED_ENV_VAR, SYNC_ENV_VAR
from ._normalize_input import _normalize_input
from .SyncMapping import SyncMapping
from .SyncMappingInput import SyncMappingInput


def _inputs_from_environment(environ: Mapping[str, str]) -> list[SyncMappingInput | str]:
    raw = environ.get(SYNC_ENV_VAR, "")
    if not raw.strip():
        return []

    entries = [entry.strip() for entry in raw.split(",")]
    ignored = [p.strip() for p in environ.get(IGNORED_ENV_VAR, "").split(",") if p.strip()]
    if not ignored:
        return list(entries)

    inputs: list[SyncMappingInput | str] = []
    for entry in entries:
        source, _, target = entry.partition(os.pathsep)
        inputs.append(SyncMappingInput(source=source.strip(), target=target.strip() or None, ignored=ignored))
    return inputs


def get_mappings_from_inputs(
    inputs: Sequence[SyncMappingInput | dict[str, Any] | str],
    site: SiteOptions,
    logger: logging.Logger,
    environ: Mapping[str, str] | None = None,
) -> list[SyncMapping]:
    """Normalize ``inputs`` into mappings whose source directories exist.

    Falls back to the ``CONTENT_SYNC`` environment variable when ``inputs`` is
    empty. Invalid entries are logged and dropped; the rest are still processed.

    Returns:
        Mappings ordered longest source first (stable for equal lengths)
    """
    if not inputs:
        inputs = _inputs_from_environment(os.environ if environ is None else environ)

    mappings: list[SyncMapping] = []
    for raw in inputs:
        try:
            mapping = _normalize_input(raw, site)
        except ConfigError as e:
            logger.error(str(e))
            continue
        except ValidationError as e:
            logger.error("Invalid sync configuration %r: %s", raw, e.errors()[0].get("msg", str(e)))
            continue

        if not mapping.source.is_dir():
            logger.error(DIRECTORY_NOT_FOUND_ERROR, mapping.source)
            continue

        mappings.append(mapping)

    return sorted(mappings, key=lambda m: len(m.source.parts), reverse=True)
