"""Measurements along a point chain (distance, interior angle) + label helpers.

Conventions
- Inputs are logical coordinates (`Point`), never screen pixels.
- Non-finite inputs are not guarded: they propagate as NaN so the canvas can
  still render a (degraded) label. Nothing here raises on NaN/inf.
"""

from __future__ import annotations

import math

from mdc.core.models import Point
from mdc.core.version import ANGLE_LABEL_OFFSET_Y, DEFAULT_DISTANCE_DECIMALS, DEFAULT_DISTANCE_UNIT, DISTANCE_LABEL_OFFSET_Y


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between a and b."""
    return math.hypot(b.x - a.x, b.y - a.y)


def _round_half_up(x: float) -> int:
    """Round to the nearest integer, ties upward (0.5 -> 1, 2.5 -> 3)."""
    return int(math.floor(x + 0.5))


def interior_angle_degrees(a: Point, b: Point, c: Point) -> int | float:
    """Non-reflex angle at vertex b, in whole degrees (0..180).

    Measured between the rays b->a and b->c, so a straight pass through b
    gives 180 and folding back onto the incoming segment gives 0. Coincident
    points fall into one of those two. Returns NaN for non-finite input.

    Note: this is not the heading change between a->b and b->c that the old
    web canvas printed. Both read 90 on square corners; elsewhere they are
    supplementary (a 60 degree corner here was labelled 120 there).
    """
    theta1 = math.atan2(a.y - b.y, a.x - b.x)
    theta2 = math.atan2(c.y - b.y, c.x - b.x)
    raw = theta2 - theta1
    if raw < 0:
        raw += 2 * math.pi
    deg = raw * 180.0 / math.pi
    if not math.isfinite(deg):
        return math.nan
    deg_i = _round_half_up(deg)
    return 360 - deg_i if deg_i > 180 else deg_i


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


def distance_label_position(a: Point, b: Point, offset_y: float = DISTANCE_LABEL_OFFSET_Y) -> Point:
    """Top-left anchor for a segment's distance label (midpoint, shifted up)."""
    m = midpoint(a, b)
    return Point(m.x, m.y + offset_y)


def angle_label_position(b: Point, offset_y: float = ANGLE_LABEL_OFFSET_Y) -> Point:
    return Point(b.x, b.y + offset_y)


def format_distance(value: float, unit: str = DEFAULT_DISTANCE_UNIT, decimals: int = DEFAULT_DISTANCE_DECIMALS) -> str:
    """E.g. 800.0 -> "800 cm". NaN renders as "nan cm"."""
    d = max(0, int(decimals))
    txt = f"{float(value):.{d}f}"
    return f"{txt} {unit}" if unit else txt


def format_angle(value: int | float) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        return f"{value}°"
    return f"{int(value)}°"
