"""Tests for composing paint commands from foil inputs."""
import pytest

from foil.geometry import Rect, TextDirection
from foil.gradients import LinearGradient, rgba
from foil.transformation import RotateGradient, TranslateGradient
from visualization.blend import BlendMode
from visualization.compositor import (
    CompositionFrame, FoilCompositor, build_paint, mask_rect, positioned_gradient,
)


G = LinearGradient(colors=(rgba(1, 0, 0), rgba(0, 0, 1)))


def make_frame(**overrides):
    values = dict(
        gradient=G,
        rollout_x=(0.0, 0.5),
        rollout_y=(0.0, -0.25),
        blend_mode=BlendMode.SRC_ATOP,
        use_sensor=True,
        size=(200.0, 100.0),
    )
    values.update(overrides)
    return CompositionFrame(**values)


class RecordingSurface:
    def __init__(self, size=(200.0, 100.0)):
        self.size = size
        self.commands = []

    def paint(self, command):
        self.commands.append(command)


class TestMaskRect:
    def test_sensor_slides_rect(self):
        assert mask_rect(200, 100, 0.5, -0.25, True) == Rect(100.0, -25.0, 200.0, 100.0)

    def test_no_sensor_pins_rect(self):
        assert mask_rect(200, 100, 0.5, -0.25, False) == Rect(0.0, 0.0, 200.0, 100.0)


class TestPositionedGradient:
    def test_zero_roll_leaves_gradient(self):
        assert positioned_gradient(G, 0.0, 0.0) is G

    def test_default_is_percentage_translation(self):
        g = positioned_gradient(G, 0.3, -0.1)
        assert g.transform == TranslateGradient(0.3, -0.1)

    def test_custom_transform_fn(self):
        g = positioned_gradient(G, 0.5, 0.0, transform=lambda x, y: RotateGradient(x))
        assert g.transform == RotateGradient(0.5)


def test_build_paint():
    cmd = build_paint(make_frame(rollout_x=(0.2, 0.5)))

    assert cmd.gradient.transform == TranslateGradient(0.2, 0.0)
    assert cmd.mask_rect == Rect(100.0, -25.0, 200.0, 100.0)
    assert cmd.bounds == Rect(0.0, 0.0, 200.0, 100.0)
    assert cmd.blend_mode == BlendMode.SRC_ATOP
    assert cmd.direction == TextDirection.LTR


def test_direction_is_kept():
    cmd = build_paint(make_frame(direction=TextDirection.RTL))
    assert cmd.direction == TextDirection.RTL


class TestFoilCompositor:
    def test_identical_frames_compose_once(self):
        comp = FoilCompositor()
        assert comp.compose(make_frame()) is not None
        assert comp.compose(make_frame()) is None
        assert comp.compose(make_frame(use_sensor=False)) is not None

    def test_size_change_recomposes(self):
        comp = FoilCompositor()
        comp.compose(make_frame())
        assert comp.compose(make_frame(size=(201.0, 100.0))) is not None

    def test_paint_skips_unchanged_and_empty(self):
        comp = FoilCompositor()
        surface = RecordingSurface()

        assert comp.paint(make_frame(), surface)
        assert not comp.paint(make_frame(), surface)
        assert not comp.paint(make_frame(size=(0.0, 100.0)), surface)

        assert len(surface.commands) == 1
        assert comp.paint_count == 1

    def test_empty_frame_composes_nothing(self):
        comp = FoilCompositor()
        first = comp.compose(make_frame())

        assert comp.compose(make_frame(size=(0.0, 0.0))) is None
        assert comp.compose(make_frame(size=(200.0, -1.0))) is None
        assert comp.last_command is first
        assert comp.compose(make_frame()) is None

    def test_invalidate_forces_repaint(self):
        comp = FoilCompositor()
        surface = RecordingSurface()
        comp.paint(make_frame(), surface)
        comp.invalidate()
        assert comp.paint(make_frame(), surface)
        assert surface.commands[0] == surface.commands[1]
