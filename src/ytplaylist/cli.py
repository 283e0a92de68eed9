#!/usr/bin/env python3
"""Command-line interface for ytplaylist.

This CLI is primarily for debugging and development.
For production use, import ytplaylist as a library.
"""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ytplaylist.config import ScraperConfig
from ytplaylist.exceptions import PlaylistError
from ytplaylist.models.domain import Playlist
from ytplaylist.models.request import PlaylistOptions, RequestOptions
from ytplaylist.services import PlaylistScraper
from ytplaylist.utils.cookies import load_cookie_header
from ytplaylist.utils.url import validate_id

logger = logging.getLogger("ytplaylist")


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers first, so it can be called again to
    reconfigure logging.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def print_playlist(console: Console, playlist: Playlist) -> None:
    """Print playlist metadata followed by a table of its items."""
    console.print()
    console.rule(style="dim")
    console.print(f"  [bold]{playlist.title}[/bold]  [dim]│[/dim]  {playlist.id}")
    console.rule(style="dim")
    if playlist.description:
        console.print(f"[dim]{playlist.description}[/dim]")
    console.print(
        f"{playlist.total_items} items, {playlist.views} views, "
        f"{len(playlist.items)} fetched"
    )

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title")
    table.add_column("Channel", style="cyan")
    table.add_column("Duration", justify="right")
    table.add_column("ID", style="dim")

    for index, item in enumerate(playlist.items, 1):
        duration = "[red]LIVE[/red]" if item.is_live else (item.duration or "-")
        table.add_row(str(index), item.title, item.author.name, duration, item.id)

    console.print(table)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Fetch YouTube playlists, albums and channel uploads."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose=verbose)


@main.command(name="fetch")
@click.argument("ref", metavar="REF")
@click.option("-n", "--limit", type=int, default=None, help="Maximum number of items.")
@click.option("--gl", default=None, help="Content region, e.g. US.")
@click.option("--hl", default=None, help="Interface language, e.g. en.")
@click.option("--utc-offset", type=int, default=None, help="Timezone offset in minutes.")
@click.option("--retries", type=int, default=3, show_default=True, help="Retry attempts.")
@click.option(
    "--cookies",
    type=click.Path(exists=True, path_type=Path),
    help="Path to cookies.txt sent along with every request.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def fetch_cmd(
    ref: str,
    limit: int | None,
    gl: str | None,
    hl: str | None,
    utc_offset: int | None,
    retries: int,
    cookies: Path | None,
    as_json: bool,
) -> None:
    """Fetch a playlist and its items.

    REF can be a playlist, album or channel ID, or any playlist,
    watch, channel, user or custom channel URL.

    \b
    Examples:
      ytplaylist fetch PLRBp0Fe2GpgmsW5VYz6CbJ_l1a8Yv53q3
      ytplaylist fetch "https://www.youtube.com/playlist?list=PLxxx" -n 20
      ytplaylist fetch "https://www.youtube.com/c/somechannel" --json
    """
    # Keep stdout clean for JSON output
    console = Console(stderr=as_json)

    headers: dict[str, str] = {}
    if cookies and (cookie_header := load_cookie_header(cookies)):
        headers["cookie"] = cookie_header

    options = PlaylistOptions(
        limit=limit,
        gl=gl,
        hl=hl,
        utc_offset_minutes=utc_offset,
        request_options=RequestOptions(headers=headers),
    )

    try:
        scraper = PlaylistScraper(config=ScraperConfig.from_env())
        with console.status("Fetching playlist"):
            playlist = scraper.fetch_playlist(ref, options, retries=retries)
    except PlaylistError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error")
        raise click.ClickException(f"Unexpected error: {e}") from e

    if as_json:
        data = playlist.model_dump(by_alias=True)
        json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        print_playlist(console, playlist)


@main.command(name="resolve")
@click.argument("ref", metavar="REF")
def resolve_cmd(ref: str) -> None:
    """Print the canonical playlist ID for REF."""
    try:
        playlist_id = PlaylistScraper(config=ScraperConfig.from_env()).resolve_id(ref)
    except PlaylistError as e:
        raise click.ClickException(str(e)) from e
    click.echo(playlist_id)


@main.command(name="validate")
@click.argument("ref", metavar="REF")
def validate_cmd(ref: str) -> None:
    """Check REF offline; exit status 1 if it cannot be a playlist."""
    valid = validate_id(ref)
    click.echo("valid" if valid else "invalid")
    if not valid:
        sys.exit(1)


if __name__ == "__main__":
    main()
