"""
Main CLI entry point for tubetally.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel

from tubetally import __version__
from tubetally.cli.commands.likes import likes_app

console = Console()

app = typer.Typer(
    name="tubetally",
    help="Per-channel like tallies from YouTube video pages",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Add subcommands
app.add_typer(likes_app, name="likes", help="Like-count analysis commands")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]tubetally[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
) -> None:
    """
    tubetally - Per-channel like tallies from YouTube video pages.

    Save a watch page, run ``likes analyze`` on it with the page URL, and
    keep the ``--json`` output as the channel record. Later pages are
    folded in with ``--existing`` (plus ``--channel-id`` for watch URLs),
    and two saved records combine with ``likes merge``.
    """
    if version:
        console.print(f"tubetally v{__version__}")
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        console.print(
            "[yellow]Use 'tubetally --help' for available commands[/yellow]"
        )
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
