"""Terminal occupancy checker for EVO Fitness gyms."""

__version__ = "0.1.0"
