"""One-shot sync API command."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.ConfigError import ConfigError
from ..config.load_site_session import load_site_session
from ..mapping._constants import NO_SYNC_CONFIGURATION_MESSAGE
from ..StageResult import StageResult
from .SyncEngine import SyncEngine


def cmd_sync(config_path: str | Path | None = None) -> StageResult:
    """Mirror every mapped file once without watching."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config, mappings = load_site_session(config_path)
        except ConfigError as e:
            result_obj.output = {"files": 0, "mappings": 0, "errors": [str(e)]}
            result_obj.result = str(e)
            result_obj.success = False
            return

        if not mappings:
            result_obj.output = {"files": 0, "mappings": 0, "errors": [NO_SYNC_CONFIGURATION_MESSAGE]}
            result_obj.result = NO_SYNC_CONFIGURATION_MESSAGE
            result_obj.success = False
            return

        yield (0.3, f"Syncing {len(mappings)} mappings...")
        engine = SyncEngine(
            mappings,
            config.site,
            get_logger("engine"),
            delete_on_unlink_dir=config.watch.delete_on_unlink_dir,
        )
        count = engine.sync_all()

        result_obj.output = {"files": count, "mappings": len(mappings), "errors": []}
        result_obj.result = f"Synced {count} file{'' if count == 1 else 's'}"
        result_obj.success = True

    return StageResult(announce="Syncing content...", progress_callback=do_work)
