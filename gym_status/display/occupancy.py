"""Full-screen occupancy frame for the monitor view."""

from rich.console import Group
from rich.padding import Padding
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from ..models import (
    Location, OccupancyReading,
    format_percentage, status_emoji, status_text,
)
from .header import build_header
from .progress import build_progress_bar

COMMAND_HINT = "[R]efresh  [S]witch Location  [Q]uit"


def build_occupancy_frame(location: Location, reading: OccupancyReading) -> Group:
    """Build the occupancy view for one location.

    The caller clears the screen before printing the frame.
    """
    percentage = reading.percentage_used

    stats = Table.grid(padding=(0, 2))
    stats.add_column(justify="left", style="bold")
    stats.add_column(justify="left")
    stats.add_row("People Now:", Text(str(reading.current), style="white"))
    stats.add_row("Capacity:", Text(format_percentage(percentage), style="white"))

    bar = Text("  [")
    bar.append_text(build_progress_bar(percentage))
    bar.append("]")

    return Group(
        build_header(),
        Text(""),
        Text.assemble(("  Location: ", "bold"), (location.name, "bold cyan")),
        Text(""),
        Padding(stats, (0, 0, 0, 2)),
        Text(""),
        bar,
        Text(""),
        Text(f"  Status: {status_emoji(percentage)} {status_text(percentage)}", style="bold"),
        Text(""),
        Rule(style="dim"),
        Text(""),
        Text(f"  {COMMAND_HINT}", style="dim"),
    )
