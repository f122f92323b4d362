"""Mappings API command."""

from collections.abc import Iterator
from pathlib import Path

from ..config.ConfigError import ConfigError
from ..config.load_site_session import load_site_session
from ..StageResult import StageResult
from ._constants import NO_SYNC_CONFIGURATION_MESSAGE


def cmd_mappings(config_path: str | Path | None = None) -> StageResult:
    """Show the validated sync mappings for a configuration."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config, mappings = load_site_session(config_path)
        except ConfigError as e:
            result_obj.output = {"mappings": [], "errors": [str(e)]}
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (0.8, "Validating mappings...")
        result_obj.output = {
            "site": config.site.model_dump(mode="json"),
            "mappings": [m.model_dump(mode="json") for m in mappings],
            "errors": [] if mappings else [NO_SYNC_CONFIGURATION_MESSAGE],
        }
        count = len(mappings)
        result_obj.result = f"{count} valid mapping{'' if count == 1 else 's'}"
        result_obj.success = bool(mappings)

    return StageResult(announce="Reading sync mappings...", progress_callback=do_work)
