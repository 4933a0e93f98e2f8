"""Title banner shared by the picker and the occupancy view."""

from rich.align import Align
from rich.panel import Panel
from rich.text import Text

TITLE = "🏋️  EVO FITNESS GYM CHECKER 🏋️"


def build_header() -> Panel:
    """Build the title banner."""
    return Panel(
        Align.center(Text(TITLE, style="bold")),
        border_style="bold cyan",
        width=52,
    )
