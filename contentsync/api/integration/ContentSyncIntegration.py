"""Lifecycle integration for site tools."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from ..config.SiteOptions import SiteOptions
from ..config.WatchConfig import WatchConfig
from ..engine.SyncEngine import SyncEngine
from ..mapping._constants import NO_SYNC_CONFIGURATION_MESSAGE
from ..mapping.get_mappings_from_inputs import get_mappings_from_inputs
from ..mapping.SyncMappingInput import SyncMappingInput

DEV_COMMAND = "dev"
DEV_ONLY_MESSAGE = "ContentSync is only available in dev mode"
SETUP_HOOK = "config:setup"


class ContentSyncIntegration:
    """Owns the sync engine for one dev session.

    The host invokes ``hooks["config:setup"]`` (or ``setup`` directly) with the
    command being run, a logger and the site's directory layout. The engine is
    created at most once; later calls return the running engine.
    """

    name = "content-sync"

    def __init__(
        self,
        *inputs: SyncMappingInput | dict[str, Any] | str,
        watch: WatchConfig | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.inputs = list(inputs)
        self.watch = watch or WatchConfig()
        self.environ = environ
        self.engine: SyncEngine | None = None

    @property
    def hooks(self) -> dict[str, Callable[..., SyncEngine | None]]:
        return {SETUP_HOOK: self.setup}

    def setup(
        self,
        command: str,
        logger: logging.Logger,
        config: SiteOptions | Mapping[str, Any],
    ) -> SyncEngine | None:
        """Start watching if running in dev mode with at least one valid mapping.

        Returns:
            The watching engine, or None when the session was not started
        """
        if command != DEV_COMMAND:
            logger.warning(DEV_ONLY_MESSAGE)
            return None

        if self.engine is not None and self.engine.is_watching:
            logger.info("ContentSync is already watching")
            return self.engine

        try:
            site = config if isinstance(config, SiteOptions) else SiteOptions(**config)
        except ValidationError as e:
            logger.error("Invalid site configuration: %s", e.errors()[0].get("msg", str(e)))
            return None

        mappings = get_mappings_from_inputs(self.inputs, site, logger, environ=self.environ)
        if not mappings:
            logger.error(NO_SYNC_CONFIGURATION_MESSAGE)
            return None

        engine = SyncEngine(mappings, site, logger, delete_on_unlink_dir=self.watch.delete_on_unlink_dir)
        try:
            engine.start(initial_sync=self.watch.initial_sync, polling=self.watch.polling)
        except RuntimeError as e:
            logger.error("ContentSync could not start watching: %s", e)
            return None

        self.engine = engine
        return engine

    def teardown(self) -> None:
        """Stop the engine if it is running."""
        if self.engine is not None:
            self.engine.stop()
            self.engine = None


def create_content_sync_integration(
    *inputs: SyncMappingInput | dict[str, Any] | str,
    watch: WatchConfig | None = None,
) -> ContentSyncIntegration:
    """Factory mirroring how site tools register integrations."""
    return ContentSyncIntegration(*inputs, watch=watch)
