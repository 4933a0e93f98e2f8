"""Occupancy monitor loop for a single location."""

import logging
from enum import Enum
from typing import Iterable

from rich.console import Console

from .api import fetch_occupancy
from .config import Config
from .display import build_error_line, build_occupancy_frame
from .exceptions import GymStatusError
from .keyboard import KEY_INTERRUPT
from .models import Location

logger = logging.getLogger(__name__)


class MonitorOutcome(Enum):
    SWITCH = "switch"
    QUIT = "quit"


class Monitor:
    """Show occupancy for one location and react to R/S/Q keys."""

    def __init__(self, location: Location, config: Config, console: Console):
        self.location = location
        self.config = config
        self.console = console

    def refresh(self) -> bool:
        """Fetch and draw one frame. Returns False if the fetch failed."""
        try:
            reading = fetch_occupancy(self.location.id, self.config)
        except GymStatusError as e:
            # Keep the last frame on screen and report below it
            logger.debug("Refresh failed for %s: %s", self.location.id, e)
            self.console.print(build_error_line(str(e)))
            return False

        self.console.clear()
        self.console.print(build_occupancy_frame(self.location, reading))
        return True

    def handle_key(self, key: str) -> MonitorOutcome | None:
        """Apply one keystroke. Returns an outcome when the loop should end."""
        if key == KEY_INTERRUPT:
            return MonitorOutcome.QUIT

        command = key.lower()
        if command == "q":
            return MonitorOutcome.QUIT
        elif command == "s":
            return MonitorOutcome.SWITCH
        elif command == "r":
            self.refresh()
        return None

    def run(self, keys: Iterable[str]) -> MonitorOutcome:
        """Draw the first frame, then process keys until switch or quit.

        Running out of keys counts as quit.
        """
        self.refresh()
        for key in keys:
            outcome = self.handle_key(key)
            if outcome is not None:
                return outcome
        return MonitorOutcome.QUIT
