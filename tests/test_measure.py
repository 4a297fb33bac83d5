"""Tests for mdc/geom/measure.py pure functions."""
import math
import pytest

from mdc.core.models import Point
from mdc.geom.measure import (
    angle_label_position,
    distance,
    distance_label_position,
    format_angle,
    format_distance,
    interior_angle_degrees,
    midpoint,
)
from mdc.geom.measure import _round_half_up

SAMPLE_POINTS = [
    Point(0, 0), Point(3, 4), Point(-7.5, 2.25), Point(100, 900),
    Point(900, 100), Point(-1e3, -1e3), Point(0.1, -0.2),
]


# --- distance ---

def test_distance_3_4_5():
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)


@pytest.mark.parametrize("a", SAMPLE_POINTS)
@pytest.mark.parametrize("b", SAMPLE_POINTS)
def test_distance_symmetric(a, b):
    assert distance(a, b) == pytest.approx(distance(b, a))


@pytest.mark.parametrize("a", SAMPLE_POINTS)
def test_distance_to_self_is_zero(a):
    assert distance(a, a) == 0.0


def test_distance_nan_propagates():
    assert math.isnan(distance(Point(math.nan, 0), Point(1, 1)))


# --- interior_angle_degrees ---

def test_right_angle_square_corner():
    assert interior_angle_degrees(Point(100, 100), Point(100, 900), Point(900, 900)) == 90


def test_straight_line_is_180():
    assert interior_angle_degrees(Point(0, 0), Point(5, 0), Point(10, 0)) == 180
    assert interior_angle_degrees(Point(0, 0), Point(3, 3), Point(7, 7)) == 180


def test_fold_back_is_0():
    # c goes back over a: zero angle at b.
    assert interior_angle_degrees(Point(0, 0), Point(10, 0), Point(2, 0)) == 0


def test_reflex_reported_as_non_reflex():
    # Turning the other way around the corner still gives 90.
    assert interior_angle_degrees(Point(900, 900), Point(100, 900), Point(100, 100)) == 90


def test_sixty_degrees():
    a = Point(0, 0)
    b = Point(1, 0)
    c = Point(1 - math.cos(math.radians(60)), math.sin(math.radians(60)))
    assert interior_angle_degrees(a, b, c) == 60


@pytest.mark.parametrize("a", SAMPLE_POINTS)
@pytest.mark.parametrize("b", SAMPLE_POINTS[:4])
@pytest.mark.parametrize("c", SAMPLE_POINTS[3:])
def test_angle_in_range(a, b, c):
    deg = interior_angle_degrees(a, b, c)
    assert 0 <= deg <= 180
    assert isinstance(deg, int)


def test_angle_nan_input_returns_nan():
    assert math.isnan(interior_angle_degrees(Point(math.nan, 0), Point(1, 1), Point(2, 0)))


def test_angle_inf_input_does_not_raise():
    deg = interior_angle_degrees(Point(math.inf, 0), Point(1, 1), Point(2, 0))
    assert math.isnan(deg) or 0 <= deg <= 180


# --- labels ---

def test_midpoint():
    assert midpoint(Point(100, 100), Point(100, 900)) == Point(100, 500)


def test_distance_label_position_is_shifted_up():
    assert distance_label_position(Point(100, 100), Point(100, 900)) == Point(100, 480)


def test_angle_label_position_is_shifted_up():
    assert angle_label_position(Point(100, 900)) == Point(100, 860)


def test_format_distance():
    assert format_distance(800.0) == "800 cm"
    assert format_distance(565.685, "mm", 1) == "565.7 mm"
    assert format_distance(12.0, "") == "12"


def test_format_distance_nan():
    assert format_distance(math.nan) == "nan cm"


def test_format_angle():
    assert format_angle(90) == "90°"
    assert format_angle(math.nan) == "nan°"


# --- rounding ---

@pytest.mark.parametrize("x,expected", [(0.5, 1), (2.5, 3), (89.5, 90), (0.49, 0), (179.4, 179), (359.5, 360)])
def test_round_half_up(x, expected):
    assert _round_half_up(x) == expected


def test_round_half_up_differs_from_builtin_round():
    assert [_round_half_up(v) for v in (0.5, 2.5)] == [1, 3]
    assert [round(v) for v in (0.5, 2.5)] == [0, 2]
