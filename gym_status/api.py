"""API communication for the gym visits API."""

import logging
from typing import Any

import httpx

from .config import Config
from .exceptions import FormatError, TransportError
from .models import Location, OccupancyReading

logger = logging.getLogger(__name__)

HEADERS = {"Accept": "application/json"}
HTML_PREFIXES = ("<!DOCTYPE", "<html")


def is_html(body: str) -> bool:
    """Detect an HTML error page served in place of JSON."""
    return body.strip().startswith(HTML_PREFIXES)


def fetch_json(url: str) -> Any:
    """
    GET a URL and decode its JSON body.

    The HTML check runs before the status check: the API's error pages are
    HTML, and those are reported as FormatError whatever the status code.
    """
    logger.debug("GET %s", url)
    try:
        with httpx.Client() as client:
            response = client.get(url, headers=HEADERS)
    except httpx.HTTPError as e:
        raise TransportError(str(e) or type(e).__name__) from e

    logger.debug("%s -> HTTP %s", url, response.status_code)

    if is_html(response.text):
        raise FormatError("API returned HTML instead of JSON. Check if the URL is correct.")

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise TransportError(f"HTTP {e.response.status_code}") from e

    try:
        return response.json()
    except ValueError as e:
        raise FormatError(f"Invalid JSON in API response: {e}") from e


def fetch_locations(config: Config) -> list[Location]:
    """Fetch all locations belonging to the configured operator."""
    try:
        data = fetch_json(config.locations_url)
        if not isinstance(data, list):
            raise FormatError(f"Expected a list of locations, got {type(data).__name__}")
        return [Location.from_dict(item) for item in data if isinstance(item, dict)]
    except (TransportError, FormatError) as e:
        raise type(e)(f"Failed to fetch locations: {e}") from e


def fetch_occupancy(location_id: str, config: Config) -> OccupancyReading:
    """Fetch the current occupancy reading for one location."""
    try:
        data = fetch_json(config.occupancy_url(location_id))
        if not isinstance(data, dict):
            raise FormatError(f"Expected an occupancy object, got {type(data).__name__}")
        return OccupancyReading.from_dict(data)
    except (TransportError, FormatError) as e:
        raise type(e)(f"Failed to fetch occupancy: {e}") from e
