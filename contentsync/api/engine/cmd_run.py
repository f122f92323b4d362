"""Run the watch session in the foreground."""

import time
from pathlib import Path

from ...utils.configure_logging import configure_logging
from ...utils.get_logger import get_logger
from ..config.ConfigError import ConfigError
from ..config.ContentSyncConfig import ContentSyncConfig
from ..integration.ContentSyncIntegration import DEV_COMMAND, ContentSyncIntegration


def cmd_run(config_path: str | Path | None = None, initial_sync: bool | None = None) -> int:
    """Watch the configured sources until interrupted (Ctrl+C).

    Returns:
        Process exit code
    """
    logger = get_logger("engine")
    try:
        config = ContentSyncConfig.load(config_path)
    except ConfigError as e:
        configure_logging()
        logger.error(str(e))
        return 2

    configure_logging(level=config.log.level)

    watch = config.watch
    if initial_sync is not None:
        watch = watch.model_copy(update={"initial_sync": initial_sync})

    integration = ContentSyncIntegration(*config.sync, watch=watch)
    engine = integration.setup(DEV_COMMAND, logger, config.site)
    if engine is None:
        return 1

    try:
        while engine.is_watching:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        integration.teardown()
    return 0
