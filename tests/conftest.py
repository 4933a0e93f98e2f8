"""Shared test fixtures and helpers for gym-status tests."""

import json
from contextlib import nullcontext
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from gym_status.config import Config
from gym_status.models import Location, OccupancyReading


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def config():
    """Config pointing at a fake API host."""
    return Config(base_url="https://gym.test", operator_id="op-1")


@pytest.fixture
def console():
    """A recording console so tests can inspect what was printed."""
    return Console(record=True, width=120, force_terminal=False)


@pytest.fixture
def err_console():
    """A recording console standing in for stderr."""
    return Console(record=True, width=120, force_terminal=False)


# =============================================================================
# Test data helpers
# =============================================================================


def make_location(id="a", name="Oslo", **extra):
    """Build a Location from a dict matching the API shape."""
    return Location.from_dict({"id": id, "name": name, **extra})


def make_reading(current=40, percentage_used=80, **extra):
    """Build an OccupancyReading from a dict matching the API shape."""
    return OccupancyReading.from_dict(
        {"current": current, "percentageUsed": percentage_used, **extra}
    )


def sample_locations():
    """Three locations, two of them in Oslo."""
    return [
        make_location(id="osl-1", name="Oslo Majorstuen"),
        make_location(id="osl-2", name="Oslo Storo"),
        make_location(id="bgo-1", name="Bergen Sentrum"),
    ]


def keys_from(*keys):
    """
    Build a key source that hands out one shared key iterator.

    Each phase (picker, monitor) opens the source again and carries on
    from where the previous phase stopped, like a real keyboard.
    """
    remaining = iter(keys)
    return lambda: nullcontext(remaining)


def render_to_text(renderable, width=120) -> str:
    """Capture a Rich renderable as plain text for assertion."""
    console = Console(record=True, width=width, force_terminal=False)
    console.print(renderable)
    return console.export_text()


def load_fixture(name: str):
    """Load a JSON fixture file from tests/fixtures/."""
    fixture_path = Path(__file__).parent / "fixtures" / name
    with open(fixture_path, encoding="utf-8") as f:
        return json.load(f)


def load_text_fixture(name: str) -> str:
    """Load a raw text fixture file from tests/fixtures/."""
    return (Path(__file__).parent / "fixtures" / name).read_text(encoding="utf-8")


def make_mock_response(json_response=None, text=None, status_code=200):
    """Create a mock httpx.Response with the given body."""
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.text = text if text is not None else json.dumps(json_response)
    if text is None:
        mock_response.json.return_value = json_response
    else:
        mock_response.json.side_effect = json.JSONDecodeError("Expecting value", text, 0)
    mock_response.raise_for_status.return_value = None
    return mock_response


def make_mock_httpx_client(json_response=None, text=None, status_code=200):
    """Create a mock httpx.Client whose .get() returns the given body."""
    mock_client = MagicMock()
    mock_client.__enter__ = MagicMock(return_value=mock_client)
    mock_client.__exit__ = MagicMock(return_value=False)
    mock_client.get.return_value = make_mock_response(json_response, text, status_code)
    return mock_client
