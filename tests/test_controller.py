"""Tests for mdc/core/controller.py: gesture dispatch table + one redraw per change."""
import pytest

from mdc.core.controller import InteractionController
from mdc.core.gestures import (
    CanvasDragMove,
    CanvasDragStart,
    CanvasWheel,
    PointClick,
    PointDragMove,
    PointEnter,
    PointLeave,
)
from mdc.core.models import Point, PointChain, Selection, ViewState
from mdc.core.settings import CanvasConfig


def test_initial_state(controller, default_chain):
    assert controller.chain == default_chain
    assert controller.selection == Selection.none()
    assert controller.view == ViewState()


def test_default_chain_comes_from_config():
    cfg = CanvasConfig(initial_points=(Point(0, 0), Point(1, 0), Point(1, 1)))
    ctl = InteractionController(config=cfg)
    assert len(ctl.chain) == 3


def test_drag_updates_point_and_redraws_once(controller, redraws):
    snap = controller.dispatch(PointDragMove(1, Point(500, 500)))
    assert snap is not None
    assert controller.chain[1] == Point(500, 500)
    assert redraws == [snap]


def test_drag_repeated_is_idempotent(controller):
    a = controller.dispatch(PointDragMove(3, Point(1, 2)))
    b = controller.dispatch(PointDragMove(3, Point(1, 2)))
    assert a == b


@pytest.mark.parametrize("event", [PointClick(2), PointEnter(2)])
def test_click_and_enter_select(controller, event):
    controller.dispatch(event)
    assert controller.selection == Selection(2)


def test_select_then_leave(controller, default_chain, redraws):
    controller.dispatch(PointEnter(2))
    controller.dispatch(PointLeave(2))
    assert controller.selection == Selection.none()
    assert controller.chain == default_chain
    assert len(redraws) == 2


def test_out_of_range_drag_is_noop(controller, redraws):
    before = controller.snapshot
    assert controller.dispatch(PointDragMove(7, Point(0, 0))) is None
    assert controller.dispatch(PointDragMove(-1, Point(0, 0))) is None
    assert controller.snapshot == before
    assert redraws == []


def test_out_of_range_selection_is_noop(controller, redraws):
    controller.dispatch(PointClick(1))
    assert controller.dispatch(PointEnter(4)) is None
    assert controller.selection == Selection(1)
    assert len(redraws) == 1


def test_unknown_event_is_noop(controller, redraws):
    assert controller.dispatch(object()) is None
    assert redraws == []


def test_wheel(controller):
    controller.dispatch(CanvasWheel(Point(50, 50), 10))
    assert controller.view.scale == pytest.approx(1.02)
    assert controller.view.translation.x == pytest.approx(-1.0)
    assert controller.view.translation.y == pytest.approx(-1.0)


def test_wheel_inverted_by_config(default_chain):
    ctl = InteractionController(default_chain, config=CanvasConfig(invert_wheel=True))
    ctl.dispatch(CanvasWheel(Point(0, 0), 10))
    assert ctl.view.scale == pytest.approx(1 / 1.02)


def test_wheel_clamped_by_config(default_chain):
    ctl = InteractionController(default_chain, config=CanvasConfig(min_scale=0.5, max_scale=1.05))
    for _ in range(20):
        ctl.dispatch(CanvasWheel(Point(10, 10), 1))
    assert ctl.view.scale == pytest.approx(1.05)
    for _ in range(100):
        ctl.dispatch(CanvasWheel(Point(10, 10), -1))
    assert ctl.view.scale == pytest.approx(0.5)


def test_background_drag_pans(controller, redraws):
    controller.dispatch(CanvasDragStart(Point(0, 0)))
    controller.dispatch(CanvasDragMove(Point(15, -20)))
    assert controller.view.translation == Point(15, -20)
    assert controller.view.scale == 1.0
    assert len(redraws) == 2


def test_view_changes_leave_chain_alone(controller, default_chain):
    controller.dispatch(CanvasWheel(Point(3, 3), 1))
    controller.dispatch(CanvasDragMove(Point(1, 1)))
    assert controller.chain == default_chain


def test_request_redraw_does_not_change_state(controller, redraws):
    before = controller.snapshot
    controller.request_redraw()
    assert redraws == [before]
    assert controller.snapshot is before


def test_without_callback_dispatch_still_works():
    ctl = InteractionController(PointChain.initialize())
    assert ctl.dispatch(PointClick(0)) is not None


def test_set_redraw_callback(controller, redraws):
    seen = []
    controller.set_redraw_callback(seen.append)
    controller.dispatch(PointClick(0))
    assert len(seen) == 1
    assert redraws == []


def test_invalid_drag_position_is_noop(controller, redraws):
    before = controller.snapshot
    assert controller.dispatch(PointDragMove(1, "500,500")) is None
    assert controller.dispatch(PointDragMove(1, {"x": "a", "y": 1})) is None
    assert controller.snapshot == before
    assert redraws == []
