"""Tests for mdc/core/scene.py (what a redraw pass draws)."""
import math
import pytest

from mdc.core.models import Point, PointChain, Selection, SessionSnapshot, ViewState
from mdc.core.scene import build_scene
from mdc.core.settings import CanvasConfig


@pytest.fixture
def snapshot(default_chain):
    return SessionSnapshot(default_chain, Selection.none(), ViewState(2.0, Point(5, 5)))


def test_segment_labels(snapshot):
    scene = build_scene(snapshot)
    assert len(scene.segments) == 3
    assert [s.text for s in scene.segments] == ["800 cm"] * 3
    assert scene.segments[0].label_pos == Point(100, 480)
    assert scene.segments[0].length == pytest.approx(800.0)


def test_angle_labels(snapshot):
    scene = build_scene(snapshot)
    assert [a.index for a in scene.angles] == [1, 2]
    assert [a.text for a in scene.angles] == ["90°", "90°"]
    assert scene.angles[0].label_pos == Point(100, 860)


def test_markers_unselected(snapshot):
    scene = build_scene(snapshot)
    assert len(scene.markers) == 4
    assert all(m.radius == 10 and m.fill == "red" and not m.selected for m in scene.markers)


def test_marker_selected(default_chain):
    scene = build_scene(SessionSnapshot(default_chain, Selection(2)))
    m = scene.markers[2]
    assert (m.radius, m.fill, m.selected) == (12, "green", True)
    assert sum(1 for x in scene.markers if x.selected) == 1


def test_transform_passthrough(snapshot):
    assert build_scene(snapshot).transform == snapshot.view


def test_distance_config(snapshot):
    scene = build_scene(snapshot, CanvasConfig(distance_unit="mm", distance_decimals=2))
    assert scene.segments[0].text == "800.00 mm"


def test_after_drag_first_segment(default_chain):
    chain = default_chain.update_point(1, Point(500, 500))
    scene = build_scene(SessionSnapshot(chain))
    assert scene.segments[0].text == "566 cm"


def test_nan_point_renders_degraded_labels(default_chain):
    chain = default_chain.update_point(1, Point(math.nan, math.nan))
    scene = build_scene(SessionSnapshot(chain))
    assert scene.segments[0].text == "nan cm"
    assert scene.angles[0].text == "nan°"


def test_single_point_chain():
    scene = build_scene(SessionSnapshot(PointChain.initialize([(1, 1)])))
    assert scene.segments == ()
    assert scene.angles == ()
    assert len(scene.markers) == 1
