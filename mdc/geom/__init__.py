"""Geometry helpers.

This package is intentionally small and dependency-free: pure functions over
`mdc.core.models.Point`, no Qt, no state.
"""

from __future__ import annotations

from .measure import (
    angle_label_position,
    distance,
    distance_label_position,
    format_angle,
    format_distance,
    interior_angle_degrees,
    midpoint,
)

__all__ = [
    "angle_label_position",
    "distance",
    "distance_label_position",
    "format_angle",
    "format_distance",
    "interior_angle_degrees",
    "midpoint",
]
