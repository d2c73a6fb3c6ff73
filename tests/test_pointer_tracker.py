"""Tests for pointer normalization."""
import pytest

from foil.pointer_tracker import (
    PointerEvent, PointerKind, PointerTracker, TrackerState,
    normalize_absolute, normalize_relative,
)
from foil.scalar import Scalar


def make_tracker(size=(200.0, 100.0), **kwargs):
    received = []
    tracker = PointerTracker(
        on_position_change=lambda x, y: received.append((x, y)),
        size_fn=lambda: size,
        **kwargs,
    )
    return tracker, received


class TestNormalize:
    def test_absolute_center_is_origin(self):
        v = normalize_absolute(100, 50, 200, 100)
        assert (v.x, v.y) == pytest.approx((0.0, 0.0))

    def test_absolute_clamps_outside_surface(self):
        v = normalize_absolute(-50, 500, 200, 100)
        assert (v.x, v.y) == pytest.approx((-1.0, 1.0))

    def test_relative_measures_against_half_size(self):
        v = normalize_relative(50, -25, 200, 100)
        assert (v.x, v.y) == pytest.approx((0.5, -0.5))

    def test_scalar_applies_after_clamp(self):
        v = normalize_relative(1000, 1000, 200, 100, Scalar(horizontal=2.0, vertical=-0.5))
        assert (v.x, v.y) == pytest.approx((2.0, -0.5))


class TestAbsoluteMode:
    def test_press_maps_position(self):
        tracker, received = make_tracker(use_relative_position=False)
        tracker.pointer_down(150, 75)
        assert received == [pytest.approx((0.5, 0.5))]

    def test_horizontal_scalar(self):
        tracker, received = make_tracker(use_relative_position=False,
                                         scalar=Scalar(horizontal=2.0, vertical=1.0))
        tracker.pointer_down(150, 75)
        assert received == [pytest.approx((1.0, 0.5))]


class TestRelativeMode:
    def test_move_is_measured_from_press(self):
        tracker, received = make_tracker(size=(100.0, 100.0))
        tracker.pointer_down(50, 50)
        tracker.pointer_move(50, 100)

        assert received[0] == pytest.approx((0.0, 0.0))
        assert received[-1] == pytest.approx((0.0, 1.0))
        assert tracker.state == TrackerState.TRACKING

    def test_move_saturates(self):
        tracker, received = make_tracker(size=(100.0, 100.0))
        tracker.pointer_down(0, 0)
        tracker.pointer_move(400, -400)
        assert received[-1] == pytest.approx((1.0, -1.0))

    def test_release_keeps_last_signal(self):
        tracker, received = make_tracker(size=(100.0, 100.0))
        tracker.pointer_down(50, 50)
        tracker.pointer_move(75, 50)
        tracker.pointer_up(75, 50)

        assert len(received) == 2
        assert tracker.state == TrackerState.IDLE
        assert (tracker.normalized.x, tracker.normalized.y) == pytest.approx((0.5, 0.0))


class TestGating:
    def test_move_without_press_is_ignored(self):
        tracker, received = make_tracker()
        tracker.pointer_move(10, 10)
        assert received == []
        assert tracker.state == TrackerState.IDLE

    def test_hover_ignored_while_pressed(self):
        tracker, received = make_tracker()
        tracker.pointer_down(100, 50)
        tracker.pointer_hover(0, 0)
        assert len(received) == 1

    def test_hover_without_press_maps_absolutely(self):
        tracker, received = make_tracker()
        tracker.pointer_hover(200, 0)
        assert received == [pytest.approx((1.0, -1.0))]

    def test_disabled_never_reports(self):
        tracker, received = make_tracker(disabled=True)
        tracker.pointer_down(10, 10)
        tracker.pointer_move(20, 20)
        tracker.pointer_hover(30, 30)
        tracker.pointer_up()
        assert received == []
        assert tracker.state == TrackerState.IDLE

    @pytest.mark.parametrize("size", [None, (0.0, 100.0), (200.0, -1.0)])
    def test_missing_size_is_silent(self, size):
        tracker, received = make_tracker(size=size)
        tracker.pointer_down(10, 10)
        tracker.pointer_move(20, 20)
        assert received == []
        assert tracker.is_pointer_down


def test_handle_dispatches_events():
    tracker, received = make_tracker(size=(100.0, 100.0))
    for event in (PointerEvent(PointerKind.DOWN, 50, 50),
                  PointerEvent(PointerKind.MOVE, 100, 50),
                  PointerEvent(PointerKind.UP, 100, 50),
                  PointerEvent(PointerKind.MOVE, 0, 0)):
        tracker.handle(event)

    assert received == [pytest.approx((0.0, 0.0)), pytest.approx((1.0, 0.0))]
    assert not tracker.is_pointer_down
