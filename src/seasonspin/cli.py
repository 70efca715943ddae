"""CLI interface for seasonspin."""

from __future__ import annotations

import json
from datetime import date, datetime

import click
from pydantic import ValidationError
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from seasonspin import __version__
from seasonspin.config import CONFIG_FILE, SeasonspinConfig
from seasonspin.seasons import DEFAULT_SEASON_NAME, SEASONS

console = Console()

date_option = click.option(
    "--date",
    "-d",
    "when",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Date to check (YYYY-MM-DD), defaults to today",
)


def _as_date(when: datetime | None) -> date | None:
    return when.date() if when is not None else None


def _format_day(month: int, day: int) -> str:
    return date(2000, month, 1).strftime("%b") + f" {day}"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="seasonspin")
@click.pass_context
def main(ctx: click.Context) -> None:
    """seasonspin - Seasonal frames for the thinking spinner.

    \b
    Examples:
      seasonspin season               # Which season is it today?
      seasonspin frames -d 2024-10-31 # Frames for Halloween
      seasonspin list                 # Show every season
    """
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = SeasonspinConfig.load()
    except (json.JSONDecodeError, ValidationError) as e:
        console.print(f"[red]Invalid config in {CONFIG_FILE}:[/red] {e}")
        ctx.exit(1)

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command("season")
@date_option
@click.pass_context
def season_command(ctx: click.Context, when: datetime | None) -> None:
    """Show the season name for a date."""
    config: SeasonspinConfig = ctx.obj["config"]
    season = config.resolve_season(_as_date(when))
    console.print(season.name if season else DEFAULT_SEASON_NAME)


@main.command("frames")
@date_option
@click.pass_context
def frames_command(ctx: click.Context, when: datetime | None) -> None:
    """Show every spinner frame for a date."""
    config: SeasonspinConfig = ctx.obj["config"]
    day = _as_date(when)
    season = config.resolve_season(day)
    frames = config.resolve_frames(day)

    name = season.name if season else DEFAULT_SEASON_NAME
    lines = [Text(frame) for frame in frames]
    console.print(
        Panel(
            Group(*lines),
            title=f"[bold]{name}[/bold]",
            subtitle=f"[dim]{len(frames)} frames[/dim]",
            border_style="cyan",
            expand=False,
        )
    )


@main.command("frame")
@click.argument("index", type=int)
@date_option
@click.pass_context
def frame_command(ctx: click.Context, index: int, when: datetime | None) -> None:
    """Show a single spinner frame (INDEX wraps around)."""
    config: SeasonspinConfig = ctx.obj["config"]
    frames = config.resolve_frames(_as_date(when))
    console.print(Text(frames[index % len(frames)]))


@main.command("list")
def list_command() -> None:
    """List every seasonal period."""
    table = Table(title="Seasons")
    table.add_column("Name", style="bold")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Frames", justify="right")
    table.add_column("Sample")

    for season in SEASONS:
        table.add_row(
            season.name,
            _format_day(season.start_month, season.start_day),
            _format_day(season.end_month, season.end_day),
            str(len(season.frames)),
            Text(season.frames[0]),
        )

    console.print(table)


if __name__ == "__main__":
    main()
