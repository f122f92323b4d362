"""Create the main Typer CLI app."""

import typer

from contentsync.api.engine.cmd_run import cmd_run
from contentsync.api.engine.cmd_sync import cmd_sync
from contentsync.api.link.cmd_links import cmd_links
from contentsync.api.mapping.cmd_mappings import cmd_mappings
from contentsync.cli._handle_stage_result import _handle_stage_result

_CONFIG_HELP = "Path to contentsync.json (default: $CONTENTSYNC_CONFIG or ./contentsync.json)"


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Mirror an authoring directory into a site's content and public directories",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
        no_args_is_help=False,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="run")
    def run_cmd(
        config: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
        initial_sync: bool | None = typer.Option(
            None, "--initial-sync/--no-initial-sync", help="Mirror existing files before watching"
        ),
    ) -> None:
        """Watch the configured sources and mirror changes until Ctrl+C."""
        raise typer.Exit(cmd_run(config_path=config, initial_sync=initial_sync))

    @app.command(name="sync")
    def sync_cmd(
        config: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    ) -> None:
        """Mirror every mapped file once, then exit."""
        _handle_stage_result(cmd_sync)(config_path=config)

    @app.command(name="links")
    def links_cmd(
        path: str = typer.Argument(..., help="Markdown file to inspect"),
        base_dir: str | None = typer.Option(None, "--base-dir", help="Directory links are relative to"),
    ) -> None:
        """List the relative links of a Markdown file and where they resolve."""
        _handle_stage_result(cmd_links)(path=path, base_dir=base_dir)

    @app.command(name="mappings")
    def mappings_cmd(
        config: str | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    ) -> None:
        """Show the validated sync mappings."""
        _handle_stage_result(cmd_mappings)(config_path=config)

    return app
