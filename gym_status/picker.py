"""Incremental-search location picker."""

import logging
from enum import Enum
from typing import Iterable

from rich.console import Console

from .display import build_location_list
from .keyboard import KEY_BACKSPACE, KEY_ENTER, KEY_INTERRUPT
from .models import Location, find_exact_match

logger = logging.getLogger(__name__)


class PickerState(Enum):
    TYPING = "typing"
    SELECTED = "selected"
    CANCELLED = "cancelled"


class LocationPicker:
    """
    Narrow a location list by typing, then pick by number or Enter.

    - Letters and spaces extend the search term.
    - A digit selects that entry of the current list when it is in range,
      otherwise it extends the search term.
    - Enter selects when exactly one location is left, or when exactly one
      location name equals the search term.
    - Backspace removes the last character.
    - Ctrl+C cancels.
    """

    def __init__(self, locations: list[Location], console: Console):
        self.locations = locations
        self.console = console
        self.search_term = ""
        self.filtered: list[Location] = list(locations)
        self.state = PickerState.TYPING
        self.selected: Location | None = None

    def render(self) -> None:
        frame, self.filtered = build_location_list(self.locations, self.search_term)
        self.console.clear()
        self.console.print(frame)

    def _select(self, location: Location) -> None:
        logger.debug("Selected location %s (%s)", location.name, location.id)
        self.selected = location
        self.state = PickerState.SELECTED

    def _set_search_term(self, term: str) -> None:
        self.search_term = term
        self.render()

    def handle_key(self, key: str) -> PickerState:
        """Apply one keystroke and return the resulting state."""
        if self.state is not PickerState.TYPING:
            return self.state

        if key == KEY_INTERRUPT:
            self.state = PickerState.CANCELLED
        elif key in KEY_ENTER:
            if len(self.filtered) == 1:
                self._select(self.filtered[0])
            else:
                exact = find_exact_match(self.filtered, self.search_term)
                if exact is not None:
                    self._select(exact)
        elif key in KEY_BACKSPACE:
            if self.search_term:
                self._set_search_term(self.search_term[:-1])
        elif key.isdigit() and key.isascii():
            num = int(key)
            if 0 < num <= len(self.filtered):
                self._select(self.filtered[num - 1])
            else:
                self._set_search_term(self.search_term + key)
        elif key.isalpha() or key == " ":
            self._set_search_term(self.search_term + key)

        return self.state

    def run(self, keys: Iterable[str]) -> Location | None:
        """Render the list and consume keys until a location is picked.

        Returns None when cancelled or when the keys run out.
        """
        self.render()
        for key in keys:
            if self.handle_key(key) is not PickerState.TYPING:
                break
        else:
            self.state = PickerState.CANCELLED

        return self.selected
