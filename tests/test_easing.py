"""Tests for easing curves."""
import pytest

from animation.easing import (
    CURVES, cubic_bezier, ease, ease_in_quad, ease_out_quad, fast_out_slow_in, lerp, linear,
)


@pytest.mark.parametrize("name", sorted(CURVES))
def test_curves_hit_endpoints(name):
    """Every named curve starts at 0 and ends at 1."""
    curve = CURVES[name]
    assert curve(0.0) == pytest.approx(0.0, abs=1e-6)
    assert curve(1.0) == pytest.approx(1.0, abs=1e-6)


def test_linear_clamps_input():
    assert linear(-0.5) == 0.0
    assert linear(0.25) == 0.25
    assert linear(3.0) == 1.0


def test_quadratics():
    assert ease_in_quad(0.5) == pytest.approx(0.25)
    assert ease_out_quad(0.5) == pytest.approx(0.75)


def test_bezier_on_the_diagonal_is_linear():
    """Control points on y = x give the identity curve."""
    curve = cubic_bezier(0.0, 0.0, 1.0, 1.0)
    for t in (0.1, 0.33, 0.5, 0.9):
        assert curve(t) == pytest.approx(t, abs=1e-5)


def test_css_ease_midpoint():
    """CSS `ease` is roughly 0.802 half way through."""
    assert ease(0.5) == pytest.approx(0.8024, abs=2e-3)


def test_fast_out_slow_in_is_monotonic():
    values = [fast_out_slow_in(i / 20) for i in range(21)]
    assert values == sorted(values)
    assert values[10] > 0.5


def test_lerp_clamps_t():
    assert lerp(2.0, 4.0, 0.5) == pytest.approx(3.0)
    assert lerp(2.0, 4.0, 2.0) == pytest.approx(4.0)
