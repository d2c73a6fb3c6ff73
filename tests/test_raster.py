"""Tests for blend modes and the numpy rasterizer."""
import numpy as np
import pytest

from foil.geometry import Rect, TextDirection
from foil.gradients import LinearGradient, TileMode, rgba
from foil.transformation import TranslateGradient
from visualization.blend import BlendMode, blend, premultiply, unpremultiply
from visualization.compositor import PaintCommand
from visualization.raster import (
    ImageSurface, apply_tile, blank_child, shade_gradient, to_image,
)


def px(*rgba_values):
    return np.array([rgba_values], dtype=np.float32)


class TestBlend:
    def test_enum_index_order(self):
        assert BlendMode.CLEAR.index == 0
        assert BlendMode.SRC_ATOP.index == 9
        assert BlendMode.MULTIPLY.index == len(BlendMode) - 1

    def test_src_over_opaque_source_wins(self):
        out = blend(px(1, 0, 0, 1), px(0, 0, 1, 1), BlendMode.SRC_OVER)
        assert out[0] == pytest.approx([1, 0, 0, 1])

    def test_src_atop_respects_destination_alpha(self):
        out = blend(px(1, 1, 1, 1), px(0, 0, 0, 0), BlendMode.SRC_ATOP)
        assert out[0] == pytest.approx([0, 0, 0, 0])

    def test_src_atop_half_source(self):
        src = premultiply(px(1, 1, 1, 0.5))
        out = blend(src, px(0, 0, 0, 1), BlendMode.SRC_ATOP)
        assert out[0] == pytest.approx([0.5, 0.5, 0.5, 1.0])

    def test_dst_keeps_destination(self):
        out = blend(px(1, 1, 1, 1), px(0.2, 0.3, 0.4, 1), BlendMode.DST)
        assert out[0] == pytest.approx([0.2, 0.3, 0.4, 1])

    def test_multiply_with_white_is_identity(self):
        out = blend(px(1, 1, 1, 1), px(0.2, 0.3, 0.4, 1), BlendMode.MULTIPLY)
        assert out[0] == pytest.approx([0.2, 0.3, 0.4, 1])

    def test_screen(self):
        out = blend(px(0.5, 0.5, 0.5, 1), px(0.5, 0.0, 1.0, 1), BlendMode.SCREEN)
        assert out[0] == pytest.approx([0.75, 0.5, 1.0, 1])

    def test_difference(self):
        out = blend(px(0.25, 1.0, 0.0, 1), px(1.0, 0.25, 0.0, 1), BlendMode.DIFFERENCE)
        assert out[0] == pytest.approx([0.75, 0.75, 0.0, 1])

    def test_unpremultiply_zero_alpha(self):
        assert unpremultiply(px(0.3, 0.3, 0.3, 0.0))[0] == pytest.approx([0, 0, 0, 0])


class TestTile:
    def test_clamp(self):
        t, visible = apply_tile(np.array([-0.5, 0.5, 1.5]), TileMode.CLAMP)
        assert t == pytest.approx([0.0, 0.5, 1.0])
        assert visible.all()

    def test_repeated(self):
        t, _ = apply_tile(np.array([1.25, -0.25]), TileMode.REPEATED)
        assert t == pytest.approx([0.25, 0.75])

    def test_mirror(self):
        t, _ = apply_tile(np.array([1.25, 2.5, -0.25]), TileMode.MIRROR)
        assert t == pytest.approx([0.75, 0.5, 0.25])

    def test_decal_hides_outside(self):
        _, visible = apply_tile(np.array([-0.1, 0.5, 1.1]), TileMode.DECAL)
        assert visible.tolist() == [False, True, False]


BLACK_TO_WHITE = LinearGradient(colors=(rgba(0, 0, 0), rgba(1, 1, 1)))


class TestShade:
    def test_linear_ramp_at_pixel_centers(self):
        out = shade_gradient(BLACK_TO_WHITE, Rect.from_ltwh(0, 0, 4, 1), 4, 1)
        assert out.shape == (1, 4, 4)
        assert out[0, :, 0] == pytest.approx([0.125, 0.375, 0.625, 0.875])
        assert out[0, :, 3] == pytest.approx([1, 1, 1, 1])

    def test_translation_shifts_ramp(self):
        g = BLACK_TO_WHITE.with_transform(TranslateGradient(0.5, 0.0))
        out = shade_gradient(g, Rect.from_ltwh(0, 0, 4, 1), 4, 1)
        assert out[0, :, 0] == pytest.approx([0.0, 0.0, 0.125, 0.375])

    def test_shifted_rect_moves_gradient(self):
        out = shade_gradient(BLACK_TO_WHITE, Rect.from_ltwh(2, 0, 4, 1), 4, 1)
        assert out[0, :, 0] == pytest.approx([0.0, 0.0, 0.125, 0.375])


class TestImageSurface:
    def test_rejects_bad_child(self):
        with pytest.raises(ValueError):
            ImageSurface(np.zeros((4, 4, 3)))

    def test_size_is_width_height(self):
        surface = ImageSurface(blank_child(5, 3))
        assert surface.size == (5, 3)

    def test_paint_composites_inside_bounds(self):
        surface = ImageSurface(blank_child(4, 2, color=(1.0, 0.0, 0.0, 1.0)))
        white = LinearGradient(colors=(rgba(1, 1, 1), rgba(1, 1, 1)))
        command = PaintCommand(
            gradient=white,
            mask_rect=Rect.from_ltwh(0, 0, 4, 2),
            bounds=Rect.from_ltwh(0, 0, 2, 2),
            blend_mode=BlendMode.SRC_ATOP,
            direction=TextDirection.LTR,
        )

        surface.paint(command)

        assert surface.pixels[0, 0] == pytest.approx([1, 1, 1, 1])
        assert surface.pixels[0, 3] == pytest.approx([1, 0, 0, 1])
        assert surface.paint_count == 1
        assert surface.last_command is command

    def test_to_image(self):
        surface = ImageSurface(blank_child(6, 4, color=(0.0, 0.0, 1.0, 0.5)))
        img = surface.to_image()
        assert img.mode == "RGBA"
        assert img.size == (6, 4)
        assert img.getpixel((0, 0)) == (0, 0, 255, 128)


def test_to_image_rounds():
    img = to_image(premultiply(np.full((1, 1, 4), 0.5, dtype=np.float32)))
    assert img.getpixel((0, 0)) == (128, 128, 128, 128)
