"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from contentsync.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from contentsync.utils.get_package_version import get_package_version

        print(f"contentsync {get_package_version()}")
        return 0

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except click.exceptions.Abort:
        return 130
    return exit_code if isinstance(exit_code, int) else 0
