#!/usr/bin/env python3
"""
gym-status - Gym Occupancy Checker TUI

A terminal user interface showing how busy an EVO Fitness gym is right now.
Uses the visits API (https://visits.evofitness.no).

Usage:
    gym-status                              # Search for a gym, then watch it
    gym-status --location-id <id>           # Skip the picker
    gym-status --location-id <id> --once    # Print one reading and exit
    gym-status --operator-id <id>           # Another operator's gyms
    gym-status --base-url http://localhost  # Another API host
"""

import argparse
import logging
import sys
from typing import Callable, ContextManager, Iterable

from rich.console import Console
from rich.logging import RichHandler

from .api import fetch_locations, fetch_occupancy
from .config import Config, default_base_url, default_operator_id
from .display import build_occupancy_frame, build_troubleshooting
from .exceptions import GymStatusError, LocationNotFoundError, NoLocationsError
from .keyboard import KeyReader
from .models import Location
from .monitor import Monitor, MonitorOutcome
from .picker import LocationPicker

logger = logging.getLogger(__name__)

KeySource = Callable[[], ContextManager[Iterable[str]]]


class App:
    """Runs the picker and monitor phases until the user quits."""

    def __init__(
        self,
        config: Config,
        console: Console | None = None,
        key_source: KeySource = KeyReader,
        err_console: Console | None = None,
    ):
        self.config = config
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.key_source = key_source

    def load_locations(self) -> list[Location]:
        self.console.print("[dim]Loading locations...[/]")
        locations = fetch_locations(self.config)
        logger.debug("Loaded %d locations", len(locations))
        if not locations:
            raise NoLocationsError(f"No locations found for operator {self.config.operator_id}")
        return locations

    def choose_location(self, locations: list[Location], location_id: str | None) -> Location | None:
        """Resolve the location to monitor, by id if given, else via the picker."""
        if location_id:
            for location in locations:
                if location.id == location_id:
                    return location
            raise LocationNotFoundError(f"Unknown location id: {location_id}")

        with self.key_source() as keys:
            return LocationPicker(locations, self.console).run(keys)

    def monitor(self, location: Location) -> MonitorOutcome:
        with self.key_source() as keys:
            return Monitor(location, self.config, self.console).run(keys)

    def show_once(self, location: Location) -> None:
        reading = fetch_occupancy(location.id, self.config)
        self.console.print(build_occupancy_frame(location, reading))

    def fail(self, error: GymStatusError) -> int:
        logger.debug("Fatal error", exc_info=error)
        self.err_console.print(build_troubleshooting(str(error), self.config))
        return 1

    def run(self) -> int:
        """Run until quit. Returns the process exit code."""
        location_id = self.config.location_id
        try:
            while True:
                try:
                    locations = self.load_locations()
                    location = self.choose_location(locations, location_id)
                    if location is not None and self.config.once:
                        self.show_once(location)
                        return 0
                except GymStatusError as e:
                    return self.fail(e)

                if location is None:
                    return 0

                if self.monitor(location) is MonitorOutcome.QUIT:
                    return 0

                # Switching always goes back through the picker
                location_id = None
        except KeyboardInterrupt:
            self.console.print("\n[dim]Stopped.[/]")
            return 0


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Check how busy your gym is in real-time",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s                              # Search for a gym, then watch it
    %(prog)s --location-id <id>           # Watch a gym without the picker
    %(prog)s --location-id <id> --once    # Print one reading and exit

In the picker, type to search, press a number to pick that gym, or press
Enter once a single gym is left. While watching, press R to refresh,
S to switch gym and Q to quit.

Environment:
    GYM_STATUS_BASE_URL       default for --base-url
    GYM_STATUS_OPERATOR_ID    default for --operator-id
        """
    )
    parser.add_argument(
        "--base-url",
        metavar="URL",
        default=default_base_url(),
        help="API host (default: %(default)s)"
    )
    parser.add_argument(
        "--operator-id",
        metavar="ID",
        default=default_operator_id(),
        help="Operator whose locations are listed (default: %(default)s)"
    )
    parser.add_argument(
        "--location-id",
        metavar="ID",
        help="Monitor this location directly instead of picking one"
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Display once and exit (requires --location-id)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log API requests to stderr"
    )

    args = parser.parse_args(argv)

    if args.once and not args.location_id:
        parser.error("--once requires --location-id")

    configure_logging(args.debug)

    config = Config(
        base_url=args.base_url,
        operator_id=args.operator_id,
        location_id=args.location_id,
        once=args.once,
        debug=args.debug,
    )
    sys.exit(App(config).run())


if __name__ == "__main__":
    main()
