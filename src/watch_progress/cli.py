"""Main CLI entry point for Watch Progress."""

import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from watch_progress import __version__
from watch_progress.core.lookup import MetadataLookup
from watch_progress.core.models import TrackerError
from watch_progress.core.session import TrackerSession
from watch_progress.core.stats import ProgressStats
from watch_progress.core.storage import JsonFileStorage
from watch_progress.core.store import EntryStore
from watch_progress.ui.prompts import (
    UserCancelledError,
    confirm_delete,
    format_percent,
    prompt_completed,
)
from watch_progress.utils.config import Config

# Configure logging
logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)

console = Console()


def setup_config(config_path: Optional[Path] = None) -> Config:
    """Setup and return configuration instance.

    Args:
        config_path: Optional path to config file

    Returns:
        Configuration instance
    """
    return Config(config_path)


def build_session(config: Config, data_file: Optional[Path] = None) -> TrackerSession:
    """Create a session backed by the configured data file.

    Args:
        config: Configuration instance
        data_file: Data file overriding the configured one

    Returns:
        TrackerSession instance
    """
    storage = JsonFileStorage(data_file or config.data_file)
    return TrackerSession(EntryStore(storage, media_hosts=config.media_hosts))


def render_stats(stats: ProgressStats) -> Panel:
    """Build the statistics panel."""
    stats_content = f"""
[bold cyan]Total Entries:[/bold cyan] {stats.count}
[bold cyan]Average Progress:[/bold cyan] {format_percent(stats.average_percent)}
[bold cyan]Completed:[/bold cyan] [green]{stats.completed_count}[/green]
    """.strip()

    return Panel(stats_content, title="Statistics", border_style="green")


def _session(ctx: click.Context) -> TrackerSession:
    return build_session(ctx.obj["config"], ctx.obj["data_file"])


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="Configuration file")
@click.option("--data-file", type=click.Path(path_type=Path), help="Entry data file")
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    config_path: Optional[Path],
    data_file: Optional[Path]
) -> None:
    """Watch Progress - Track how far you are through YouTube videos and playlists."""
    if verbose:
        console.print(f"[bold green]Watch Progress v{__version__}[/bold green]")
        logging.getLogger().setLevel(logging.INFO)

    ctx.ensure_object(dict)
    ctx.obj["config"] = setup_config(config_path)
    ctx.obj["data_file"] = data_file


@main.command("list")
@click.pass_context
def list_command(ctx: click.Context) -> None:
    """List tracked entries with their progress."""
    try:
        session = _session(ctx)
        rows = session.rows()

        if not rows:
            console.print("[yellow]No entries yet. Add one with 'watch-progress add'.[/yellow]")
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right")
        table.add_column("Title", style="cyan", no_wrap=False, max_width=40)
        table.add_column("Link", no_wrap=False, max_width=30)
        table.add_column("Total", justify="right")
        table.add_column("Completed", justify="right")
        table.add_column("Done", justify="right", style="green")
        table.add_column("Left", justify="right", style="red")

        for row in rows:
            link_label = f"[link={row.link}]{row.media_type or 'open'}[/link]"
            table.add_row(
                str(row.index + 1),
                row.title,
                link_label,
                row.total,
                row.completed_display,
                format_percent(row.completed_percent),
                format_percent(row.remaining_percent)
            )

        console.print(table)
        console.print(render_stats(session.stats()))

    except Exception as e:
        console.print(f"[red]Error reading entries: {str(e)}[/red]")
        sys.exit(1)


@main.command("add")
@click.argument("link")
@click.argument("title")
@click.argument("total", required=False)
@click.option("--lookup", is_flag=True, help="Fill a missing TOTAL from YouTube metadata")
@click.pass_context
def add_command(
    ctx: click.Context,
    link: str,
    title: str,
    total: Optional[str],
    lookup: bool
) -> None:
    """Track a new video or playlist.

    TOTAL is either a number of videos (e.g. 40) or a duration
    (e.g. 1:30:00, 1.30.00, 90/00). Progress starts at 0.

    Examples:

        watch-progress add "https://youtube.com/playlist?list=PL123" "Python Course" 40

        watch-progress add "https://youtu.be/abc123" "Conference Talk" --lookup
    """
    try:
        if not total and lookup:
            config = ctx.obj["config"]
            if not config.youtube_api_key:
                console.print("[red]Error: YouTube API key not found.[/red]")
                console.print("Set YOUTUBE_API_KEY environment variable or configure in settings.")
                sys.exit(1)

            total = MetadataLookup(api_key=config.youtube_api_key).suggest_total(link)
            console.print(f"[blue]Looked up total: {total}[/blue]")

        session = _session(ctx)
        entry = session.add(link, title, total or "")
        position = len(session.store.entries())

        console.print(f"[green]✓ Added #{position}: {entry.title} (total {entry.total})[/green]")

    except TrackerError as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)


@main.command("edit")
@click.argument("index", type=int)
@click.argument("value", required=False)
@click.pass_context
def edit_command(ctx: click.Context, index: int, value: Optional[str]) -> None:
    """Update how much of entry INDEX is completed.

    Prompts with the current value when VALUE is omitted; a blank answer
    cancels the edit.
    """
    session = _session(ctx)
    try:
        prefill = session.begin_edit(index - 1)

        if value is None:
            entry = session.store.entries()[index - 1]
            value = prompt_completed(entry, prefill)
            if not value.strip():
                session.cancel_edit()
                console.print("[yellow]Edit cancelled.[/yellow]")
                return

        if session.confirm_edit(value):
            console.print(f"[green]✓ Entry #{index} completed set to {value.strip()}[/green]")
        else:
            console.print(f"[yellow]Entry #{index} no longer exists.[/yellow]")

    except UserCancelledError:
        session.cancel_edit()
        console.print("\n[yellow]Edit cancelled.[/yellow]")
    except TrackerError as e:
        session.cancel_edit()
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)


@main.command("delete")
@click.argument("index", type=int)
@click.option("--yes", "-y", is_flag=True, help="Delete without asking")
@click.pass_context
def delete_command(ctx: click.Context, index: int, yes: bool) -> None:
    """Stop tracking entry INDEX."""
    session = _session(ctx)
    try:
        entry = session.begin_delete(index - 1)

        if not yes and not confirm_delete(entry):
            session.cancel_delete()
            console.print("[yellow]Delete cancelled.[/yellow]")
            return

        if session.confirm_delete():
            console.print(f"[green]✓ Deleted: {entry.title}[/green]")
        else:
            console.print(f"[yellow]Entry #{index} no longer exists.[/yellow]")

    except UserCancelledError:
        session.cancel_delete()
        console.print("\n[yellow]Delete cancelled.[/yellow]")
    except TrackerError as e:
        session.cancel_delete()
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)


@main.command("stats")
@click.pass_context
def stats_command(ctx: click.Context) -> None:
    """Show completion statistics."""
    try:
        session = _session(ctx)
        console.print(render_stats(session.stats()))

    except Exception as e:
        console.print(f"[red]Error reading entries: {str(e)}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
