"""Configuration models for seasonspin."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

from pydantic import BaseModel

from seasonspin.seasons import (
    DEFAULT_FRAMES,
    Season,
    get_current_season,
    get_season_by_name,
)


class SeasonspinConfig(BaseModel):
    """Main configuration for seasonspin."""

    seasonal: bool = True
    # Catalog season to use regardless of date
    force_season: str | None = None

    @classmethod
    def load(cls, path: Path | None = None) -> SeasonspinConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2)

    def resolve_season(self, when: date | None = None) -> Season | None:
        """Get the season to display, applying the configured overrides.

        Unknown forced season names are ignored and the date decides.
        """
        if not self.seasonal:
            return None

        if self.force_season:
            forced = get_season_by_name(self.force_season)
            if forced is not None:
                return forced

        return get_current_season(when)

    def resolve_frames(self, when: date | None = None) -> tuple[str, ...]:
        """Get the spinner frames to display, applying the configured overrides."""
        season = self.resolve_season(when)
        return season.frames if season else DEFAULT_FRAMES


# Default config directory
SEASONSPIN_DIR = Path(".seasonspin")
CONFIG_FILE = SEASONSPIN_DIR / "config.json"
