"""Unit conversion helpers for page geometry."""

from __future__ import annotations

POINTS_PER_INCH = 72.0
MM_PER_INCH = 25.4
MM_PER_POINT = MM_PER_INCH / POINTS_PER_INCH  # 0.352778


def mm_to_points(value: float) -> float:
    """Convert millimetres to typographic points."""
    return float(value) / MM_PER_POINT


def points_to_mm(value: float) -> float:
    """Convert typographic points to millimetres."""
    return float(value) * MM_PER_POINT


def cm_to_points(value: float) -> float:
    """Convert centimetres to typographic points."""
    return mm_to_points(float(value) * 10.0)
