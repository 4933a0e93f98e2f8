"""Numbered location list for the picker."""

from rich.console import Group
from rich.text import Text

from ..models import Location, filter_locations
from .header import build_header


def build_location_list(
    locations: list[Location], search_term: str = "",
) -> tuple[Group, list[Location]]:
    """
    Build the picker screen for the current search term.

    Returns the renderable together with the filtered locations, so the
    picker can map digit and Enter keys onto the same numbering the user sees.
    """
    filtered = filter_locations(locations, search_term)

    lines = [
        build_header(),
        Text(""),
        Text("  Select a location:", style="bold"),
        Text(""),
    ]

    if not filtered:
        lines.append(Text(f'  No locations found matching "{search_term}"', style="yellow"))
    else:
        for idx, loc in enumerate(filtered, 1):
            lines.append(Text.assemble("  ", (f"{idx}.", "cyan"), f" {loc.name}"))
    lines.append(Text(""))

    if search_term:
        lines.append(Text(f'  Searching for: "{search_term}"', style="dim"))

    return Group(*lines), filtered
