"""Seasonal spinner frames for the thinking animation.

Picks a frame sequence based on the calendar date, so the spinner shows
bunnies around Easter, pumpkins in October and trees in December.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

DEFAULT_SEASON_NAME = "Default"


@dataclass(frozen=True)
class Season:
    """A named calendar range with its own spinner frames.

    Months are 1-12. Days are not checked against month length, so a day
    past the end of its month simply never matches a real date.
    """

    name: str
    start_month: int
    start_day: int
    end_month: int
    end_day: int
    frames: tuple[str, ...]


# Catalog order is the tie-break when ranges overlap.
# Easter moves every year; a fixed window covers most of them.
SEASONS: tuple[Season, ...] = (
    Season(
        name="Easter",
        start_month=3,
        start_day=15,
        end_month=4,
        end_day=25,
        frames=(
            "🐰    ",
            " 🐰   ",
            "  🐰  ",
            "   🐰 ",
            "    🐰",
            "   🐰 ",
            "  🐰  ",
            " 🐰   ",
            "🐰    ",
            "🥚    ",
        ),
    ),
    Season(
        name="Halloween",
        start_month=10,
        start_day=1,
        end_month=10,
        end_day=31,
        frames=(
            "🎃    ",
            " 🎃   ",
            "  🎃  ",
            "   🎃 ",
            "    🎃",
            "   🎃 ",
            "  🎃  ",
            " 🎃   ",
            "🎃    ",
            "👻    ",
        ),
    ),
    Season(
        name="Christmas",
        start_month=12,
        start_day=1,
        end_month=12,
        end_day=31,
        frames=(
            "🎄    ",
            " 🎄   ",
            "  🎄  ",
            "   🎄 ",
            "    🎄",
            "   🎄 ",
            "  🎄  ",
            " 🎄   ",
            "🎄    ",
            "🎅    ",
        ),
    ),
)

# Bouncing ball used outside every season
DEFAULT_FRAMES: tuple[str, ...] = (
    "( ●    )",
    "(  ●   )",
    "(   ●  )",
    "(    ● )",
    "(     ●)",
    "(    ● )",
    "(   ●  )",
    "(  ●   )",
    "( ●    )",
    "(●     )",
)


def is_date_in_season(when: date, season: Season) -> bool:
    """Check whether a date falls inside a season's range.

    A season whose start month is after its end month wraps around the
    new year, so the date only has to be past the start or before the end.

    Args:
        when: Date (or datetime) to check, in local calendar time.
        season: Season to check against.

    Returns:
        True if the date is within the season, inclusive at both ends.
    """
    month, day = when.month, when.day

    after_start = month > season.start_month or (
        month == season.start_month and day >= season.start_day
    )
    before_end = month < season.end_month or (
        month == season.end_month and day <= season.end_day
    )

    if season.start_month > season.end_month:
        return after_start or before_end
    return after_start and before_end


def get_current_season(
    when: date | None = None, seasons: Sequence[Season] = SEASONS
) -> Season | None:
    """Get the first season that contains the given date.

    Args:
        when: Date to check, defaults to today.
        seasons: Catalog to search, in priority order.

    Returns:
        The matching season, or None outside every season.
    """
    if when is None:
        when = date.today()

    for season in seasons:
        if is_date_in_season(when, season):
            return season
    return None


def get_seasonal_frames(when: date | None = None) -> tuple[str, ...]:
    """Get the spinner frames for a date, falling back to the defaults."""
    season = get_current_season(when)
    return season.frames if season else DEFAULT_FRAMES


def get_season_name(when: date | None = None) -> str:
    """Get the season name for a date, or "Default" outside every season."""
    season = get_current_season(when)
    return season.name if season else DEFAULT_SEASON_NAME


def get_seasonal_frame(index: int, when: date | None = None) -> str:
    """Get a single seasonal frame by index.

    The index wraps around the frame sequence, so you can increment
    indefinitely and the frames will cycle.

    Args:
        index: Frame index, will wrap around frame count.
        when: Date to pick the season for, defaults to today.

    Returns:
        The frame at the given index.
    """
    frames = get_seasonal_frames(when)
    return frames[index % len(frames)]


def get_season_by_name(name: str) -> Season | None:
    """Look up a catalog season by name, ignoring case."""
    wanted = name.strip().lower()
    for season in SEASONS:
        if season.name.lower() == wanted:
            return season
    return None
