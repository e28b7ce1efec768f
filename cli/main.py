#!/usr/bin/env python3
"""
combinekit CLI - reducer composition checks

Main entrypoint for the combinekit command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from combinekit.logging_config import setup_logging

from cli.commands import check, replay

app = typer.Typer(
    name="combinekit",
    help="Compose and check slice reducers",
    add_completion=False,
)

console = Console()


@app.callback()
def configure():
    """Configure logging for every command."""
    setup_logging()


app.command(name="check")(check.check_command)
app.command(name="replay")(replay.replay_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from combinekit import __version__ as lib_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]combinekit CLI[/bold]", f"v{__version__}")
    table.add_row("Library", f"v{lib_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
