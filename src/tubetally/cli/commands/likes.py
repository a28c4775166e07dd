"""
CLI commands for analyzing saved video pages and merging channel aggregates.

This module provides:

- ``tubetally likes analyze``: run the page analyzer over a saved watch
  page, optionally merging the result into a stored aggregate
- ``tubetally likes merge``: merge two stored aggregates

The commands only read files. Keeping aggregates between runs is left to
the user (redirect the ``--json`` output wherever it should live).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from tubetally.config.settings import settings
from tubetally.exceptions import (
    EXIT_CODE_GENERAL_ERROR,
    EXIT_CODE_INVALID_ARGS,
    PageSnapshotError,
)
from tubetally.models.engagement import ChannelAggregate, ExtractionOutcome
from tubetally.services.aggregator import merge
from tubetally.services.extraction import PageSnapshot, analyze

console = Console()

likes_app = typer.Typer(
    name="likes",
    help="Analyze saved video pages and merge channel like totals",
    no_args_is_help=True,
)


def _setup_logging(verbose: bool = False) -> None:
    """
    Attach a stderr handler to the ``tubetally`` logger.

    Parameters
    ----------
    verbose : bool, optional
        If True, log at DEBUG; otherwise at the configured log level
        (default False).
    """
    log_level = logging.DEBUG if verbose else getattr(logging, settings.log_level)

    root_logger = logging.getLogger("tubetally")
    root_logger.setLevel(log_level)
    for existing_handler in list(root_logger.handlers):
        if getattr(existing_handler, "_tubetally_cli", False):
            root_logger.removeHandler(existing_handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    setattr(handler, "_tubetally_cli", True)
    root_logger.addHandler(handler)


def _load_page(page_file: Path) -> PageSnapshot:
    """Read saved page source into a snapshot."""
    try:
        html = page_file.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise PageSnapshotError(
            f"Cannot read page source: {e}", source=str(page_file)
        ) from e
    return PageSnapshot.from_html(html)


def _load_aggregate(path: Path) -> ChannelAggregate:
    """Load a stored aggregate, exiting with a usage error if it is invalid."""
    try:
        return ChannelAggregate.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        console.print(f"[red]Error: cannot read {path}: {e}[/red]")
        raise typer.Exit(code=EXIT_CODE_INVALID_ARGS)
    except ValidationError as e:
        console.print(
            f"[red]Error: {path} is not a valid channel aggregate[/red]\n{e}"
        )
        raise typer.Exit(code=EXIT_CODE_INVALID_ARGS)


def _aggregate_table(aggregate: ChannelAggregate) -> Table:
    table = Table(
        title=f"{aggregate.channel_name} ({aggregate.channel_id})",
        show_header=True,
        header_style="bold blue",
    )
    table.add_column("Video ID", style="cyan")
    table.add_column("Title")
    table.add_column("Likes", justify="right", style="green")

    for video in aggregate.videos:
        likes = f"{video.like_count:,}" if video.like_count else "[dim]not found[/dim]"
        table.add_row(video.id, video.title or "-", likes)

    table.caption = (
        f"{aggregate.video_count} video(s), {aggregate.total_likes:,} total likes, "
        f"updated {aggregate.last_updated:%Y-%m-%d %H:%M:%S %Z}"
    )
    return table


@likes_app.command(name="analyze")
def analyze_command(
    page_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Saved HTML of the video page",
    ),
    url: str = typer.Option(
        ...,
        "--url",
        "-u",
        help="Address the page was loaded from",
    ),
    existing: Optional[Path] = typer.Option(
        None,
        "--existing",
        "-e",
        exists=True,
        dir_okay=False,
        help="Stored channel aggregate (JSON) to merge the result into",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the outcome as JSON instead of a table",
    ),
    channel_id: Optional[str] = typer.Option(
        None,
        "--channel-id",
        "-c",
        help=(
            "Channel id to record the video under. Watch URLs carry no "
            "channel, so without this the video id is used"
        ),
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log every extraction strategy to stderr",
    ),
) -> None:
    """
    Analyze a saved video page and report its like count.

    The channel id comes from a channel-scoped URL (/channel/, /c/, /@).
    A plain watch URL has none and falls back to the video id, so use
    --channel-id to merge a new video into an existing channel record.

    Examples:
        tubetally likes analyze watch.html --url "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
        tubetally likes analyze watch.html -u "https://youtu.be/dQw4w9WgXcQ" -c UCuAXFkgsw1L7xaCfnd5JJOw --existing channel.json --json
    """
    _setup_logging(verbose)

    stored = _load_aggregate(existing) if existing is not None else None

    try:
        page = _load_page(page_file)
    except PageSnapshotError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(code=EXIT_CODE_GENERAL_ERROR)

    outcome = analyze(page, url)

    if outcome.success and outcome.data is not None and channel_id:
        outcome = ExtractionOutcome.succeeded(
            outcome.data.model_copy(update={"channel_id": channel_id})
        )

    if outcome.success and outcome.data is not None and stored is not None:
        if stored.channel_id != outcome.data.channel_id:
            console.print(
                f"[red]Error: page belongs to channel {outcome.data.channel_id}, "
                f"but {existing} holds channel {stored.channel_id}. "
                "Pass --channel-id to file a watch page under a channel.[/red]"
            )
            raise typer.Exit(code=EXIT_CODE_INVALID_ARGS)
        outcome = ExtractionOutcome.succeeded(merge(stored, outcome.data))

    if as_json:
        typer.echo(outcome.model_dump_json(by_alias=True, exclude_none=True))
    elif outcome.success and outcome.data is not None:
        console.print(_aggregate_table(outcome.data))
    else:
        console.print(f"[yellow]Nothing to show: {outcome.error}[/yellow]")

    if not outcome.success:
        raise typer.Exit(code=EXIT_CODE_GENERAL_ERROR)


@likes_app.command(name="merge")
def merge_command(
    existing: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Stored channel aggregate (JSON)",
    ),
    incoming: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Newer aggregate (JSON) to fold into the stored one",
    ),
) -> None:
    """
    Merge two stored channel aggregates and print the result as JSON.

    The channel id of EXISTING is kept; videos from INCOMING replace
    stored videos with the same id.

    Examples:
        tubetally likes merge channel.json latest.json > merged.json
    """
    stored = _load_aggregate(existing)
    fresh = _load_aggregate(incoming)
    merged = merge(stored, fresh)
    typer.echo(merged.model_dump_json(by_alias=True))
