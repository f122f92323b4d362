"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import click
import typer

from contentsync.cli.display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format() -> str:
    """Walk the click context chain for the --display value (default yaml)."""
    current: click.Context | None = click.get_current_context(silent=True)
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F) -> F:
    """Wrap a command function to run the 4-stage pattern for the CLI.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, JSON or YAML)

    Exits with 0 on success, 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        result = func(*args, **kwargs)

        display.status(result.announce)
        for progress_percent, message in result.progress_callback(result):
            display.info(f"[dim]{display._timestamp()}[/dim] Progress: {message} ({progress_percent:.1%})")

        if not result.result:
            raise ValueError("progress_callback must set result.result to a non-empty string")

        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)

        display.json_output(result.output, format=_extract_display_format())
        raise typer.Exit(0 if result.success else 1)

    return wrapper  # type: ignore[return-value]
