"""seasonspin - Seasonal frames for the thinking spinner."""

__version__ = "0.1.0"
