"""Tests for gradient interpolation policies."""
import pytest

from animation.gradient_tween import GradientTween, lerp_gradient
from foil.geometry import Alignment, CENTER_LEFT, CENTER_RIGHT, TOP_LEFT, BOTTOM_RIGHT
from foil.gradients import CrossFadeGradient, LinearGradient, RadialGradient, rgba
from foil.transformation import TranslateGradient


BLACK = rgba(0, 0, 0)
WHITE = rgba(1, 1, 1)
RED = rgba(1, 0, 0)

A = LinearGradient(colors=(BLACK, WHITE), begin=CENTER_LEFT, end=CENTER_RIGHT)
B = LinearGradient(colors=(WHITE, BLACK), begin=TOP_LEFT, end=BOTTOM_RIGHT)
C = RadialGradient(colors=(RED, WHITE, BLACK), radius=1.0)


def test_endpoints_return_inputs():
    assert lerp_gradient(A, B, 0.0) is A
    assert lerp_gradient(A, B, 1.0) is B


def test_same_shape_lerps_stopwise():
    mid = lerp_gradient(A, B, 0.5)

    assert isinstance(mid, LinearGradient)
    assert mid.colors[0] == pytest.approx((0.5, 0.5, 0.5, 1.0))
    assert mid.begin == Alignment(-1.0, -0.5)
    assert mid.end == Alignment(1.0, 0.5)


def test_same_shape_lerps_transform():
    a = A.with_transform(TranslateGradient(0.0, 0.0))
    b = A.with_transform(TranslateGradient(1.0, -1.0))
    mid = lerp_gradient(a, b, 0.25)
    assert mid.transform == TranslateGradient(0.25, -0.25)


def test_different_shape_crossfades():
    fade = lerp_gradient(A, C, 0.3)
    assert fade == CrossFadeGradient(A, C, 0.3)


def test_interrupted_crossfade_nests():
    first = lerp_gradient(A, C, 0.5)
    second = lerp_gradient(first, B, 0.2)

    assert isinstance(second, CrossFadeGradient)
    assert second.begin == first
    assert second.end is B


class TestAggressive:
    def test_kind_switches_half_way(self):
        early = lerp_gradient(A, C, 0.25, aggressive=True)
        late = lerp_gradient(A, C, 0.75, aggressive=True)

        assert isinstance(early, LinearGradient)
        assert isinstance(late, RadialGradient)

    def test_stops_pair_by_index(self):
        """The shorter list repeats its last stop."""
        g = lerp_gradient(A, C, 0.5, aggressive=True)
        assert g.stop_count == 3
        # A pads WHITE at index 2, C has BLACK there
        assert g.colors[2] == pytest.approx((0.5, 0.5, 0.5, 1.0))
        assert g.resolved_stops() == pytest.approx((0.0, 0.75, 1.0))

    def test_crossfade_input_settles(self):
        fade = CrossFadeGradient(A, C, 0.8)
        g = lerp_gradient(fade, B, 0.5, aggressive=True)
        assert not isinstance(g, CrossFadeGradient)


class TestMissingSide:
    def test_fade_in_from_nothing(self):
        g = lerp_gradient(None, A, 0.25)
        assert g.colors[0][3] == pytest.approx(0.25)

    def test_fade_out_to_nothing(self):
        g = lerp_gradient(A, None, 0.25)
        assert g.colors[0][3] == pytest.approx(0.75)

    def test_both_missing(self):
        assert lerp_gradient(None, None, 0.5) is None


def test_tween_binds_policy():
    tween = GradientTween(aggressive=True)
    assert isinstance(tween(A, C, 0.4), LinearGradient)
    tween.aggressive = False
    assert isinstance(tween(A, C, 0.4), CrossFadeGradient)
