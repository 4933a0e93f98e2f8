"""Display rendering components for gym-status."""

from .header import build_header
from .progress import build_progress_bar
from .occupancy import build_occupancy_frame
from .locations import build_location_list
from .errors import build_error_line, build_troubleshooting

__all__ = [
    "build_header",
    "build_progress_bar",
    "build_occupancy_frame",
    "build_location_list",
    "build_error_line",
    "build_troubleshooting",
]
