"""Configuration constants and dataclass for gym-status."""

import os
from dataclasses import dataclass

# API constants
BASE_URL = "https://visits.evofitness.no"
OPERATOR_ID = "5336003e-0105-4402-809f-93bf6498af34"

# Environment overrides for the API constants
BASE_URL_ENV = "GYM_STATUS_BASE_URL"
OPERATOR_ID_ENV = "GYM_STATUS_OPERATOR_ID"

# Display
PROGRESS_BAR_WIDTH = 30  # cells

# Occupancy thresholds (percent of capacity)
THRESHOLD_FULL = 100      # red
THRESHOLD_BUSY = 75       # yellow
THRESHOLD_MODERATE = 50   # orange marker, green bar


def default_base_url() -> str:
    return os.environ.get(BASE_URL_ENV) or BASE_URL


def default_operator_id() -> str:
    return os.environ.get(OPERATOR_ID_ENV) or OPERATOR_ID


@dataclass
class Config:
    """Runtime configuration built from CLI arguments."""
    base_url: str = BASE_URL
    operator_id: str = OPERATOR_ID
    location_id: str | None = None
    once: bool = False
    debug: bool = False

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")

    @property
    def locations_url(self) -> str:
        return f"{self.base_url}/api/v1/locations?operator={self.operator_id}"

    def occupancy_url(self, location_id: str) -> str:
        return f"{self.base_url}/api/v1/locations/{location_id}/current"
