"""Data types and pure helpers for occupancy thresholds and location search."""

import math
from dataclasses import dataclass, field
from typing import Any

from .config import (
    PROGRESS_BAR_WIDTH, THRESHOLD_BUSY, THRESHOLD_FULL, THRESHOLD_MODERATE,
)
from .exceptions import FormatError


@dataclass(frozen=True)
class Location:
    """A gym location as returned by the locations endpoint."""
    id: str
    name: str
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> "Location":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name") or ""),
            raw=data,
        )


@dataclass(frozen=True)
class OccupancyReading:
    """A snapshot of the current visitor count at a location."""
    current: int
    percentage_used: float
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> "OccupancyReading":
        # The API omits or nulls these when a location is closed
        try:
            current = int(data.get("current") or 0)
            percentage_used = float(data.get("percentageUsed") or 0)
            if not math.isfinite(percentage_used):
                raise ValueError(f"percentageUsed is {percentage_used}")
        except (TypeError, ValueError) as e:
            raise FormatError(f"Invalid occupancy values: {e}") from e
        return cls(current=current, percentage_used=percentage_used, raw=data)


def filter_locations(locations: list[Location], search_term: str) -> list[Location]:
    """Case-insensitive substring match on location name, keeping list order."""
    term = search_term.lower()
    return [loc for loc in locations if term in loc.name.lower()]


def find_exact_match(locations: list[Location], search_term: str) -> Location | None:
    """Return the single location whose name equals the search term, ignoring case."""
    if not search_term:
        return None
    term = search_term.lower()
    matches = [loc for loc in locations if loc.name.lower() == term]
    return matches[0] if len(matches) == 1 else None


def filled_cells(percentage: float, width: int = PROGRESS_BAR_WIDTH) -> int:
    """Number of filled progress bar cells, clamped to the bar width."""
    filled = int(width * percentage // 100)
    return max(0, min(width, filled))


def bar_color(percentage: float) -> str:
    if percentage >= THRESHOLD_FULL:
        return "red"
    elif percentage >= THRESHOLD_BUSY:
        return "yellow"
    return "green"


def status_emoji(percentage: float) -> str:
    """Get the status marker for an occupancy percentage."""
    if percentage >= THRESHOLD_FULL:
        return "🔴"
    elif percentage >= THRESHOLD_BUSY:
        return "🟡"
    elif percentage >= THRESHOLD_MODERATE:
        return "🟠"
    return "🟢"


def status_text(percentage: float) -> str:
    """Get the status description for an occupancy percentage."""
    if percentage >= THRESHOLD_FULL:
        return "FULL - Very Busy"
    elif percentage >= THRESHOLD_BUSY:
        return "BUSY - Limited Space"
    elif percentage >= THRESHOLD_MODERATE:
        return "MODERATE - Some Space"
    return "AVAILABLE - Plenty of Space"


def format_percentage(percentage: float) -> str:
    """Format a percentage without a trailing .0 for whole numbers."""
    if float(percentage).is_integer():
        return f"{int(percentage)}%"
    return f"{percentage}%"
