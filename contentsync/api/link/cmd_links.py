"""Links API command."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .FileReadError import FileReadError
from .get_linked_files import get_linked_files
from .resolve_link_path import resolve_link_path


def cmd_links(path: str, base_dir: str | None = None) -> StageResult:
    """List the relative links of a Markdown file and where they resolve on disk."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        document = Path(path).expanduser().absolute()
        base = Path(base_dir).expanduser().absolute() if base_dir else document.parent

        yield (0.3, f"Reading {document.name}...")
        try:
            raw_targets = get_linked_files(document)
        except FileReadError as e:
            result_obj.output = {"path": str(document), "links": [], "errors": [str(e)]}
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (0.6, f"Resolving {len(raw_targets)} links...")
        links = []
        unresolved = 0
        for raw_target in raw_targets:
            resolved = resolve_link_path(raw_target, base)
            if resolved is None:
                unresolved += 1
            links.append({"raw_target": raw_target, "resolved": str(resolved) if resolved else None})

        result_obj.output = {"path": str(document), "links": links, "errors": []}
        result_obj.result = f"Found {len(links)} relative links ({unresolved} unresolved)"
        result_obj.success = True

    return StageResult(announce=f"Extracting links from {path}...", progress_callback=do_work)
