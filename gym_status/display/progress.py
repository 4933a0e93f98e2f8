"""Occupancy progress bar display."""

from rich.text import Text

from ..config import PROGRESS_BAR_WIDTH
from ..models import bar_color, filled_cells


def build_progress_bar(percentage: float, width: int = PROGRESS_BAR_WIDTH) -> Text:
    """Build a fixed-width bar coloured by how full the location is."""
    filled = filled_cells(percentage, width)
    empty = width - filled

    bar = Text()
    bar.append("█" * filled, style=bar_color(percentage))
    bar.append("░" * empty, style="dim")
    return bar
