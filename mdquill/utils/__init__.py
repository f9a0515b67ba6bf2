"""Shared helpers (logging, units)."""

from .logger import configure_logging, get_logger
from .units import cm_to_points, mm_to_points, points_to_mm

__all__ = [
    "configure_logging",
    "get_logger",
    "cm_to_points",
    "mm_to_points",
    "points_to_mm",
]
