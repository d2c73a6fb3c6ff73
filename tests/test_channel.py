"""Tests for AnimationChannel tweens."""
import pytest

from animation.channel import AnimationChannel, ChannelError
from animation.easing import ease_in_quad


def test_fresh_channel_is_settled():
    ch = AnimationChannel(3.0, 1.0)
    assert not ch.is_animating
    assert ch.value == 3.0
    assert ch.progress == 1.0


def test_tween_reaches_target_exactly():
    ch = AnimationChannel(0.0, 1.0)
    assert ch.set_target(10.0)

    assert ch.value == 0.0
    assert ch.tick(0.5) == pytest.approx(5.0)
    assert ch.is_animating
    assert ch.tick(0.75) == 10.0
    assert not ch.is_animating


def test_retarget_starts_from_current_value():
    """Interrupting a tween continues from what is on screen."""
    ch = AnimationChannel(0.0, 1.0)
    ch.set_target(10.0)
    ch.tick(0.5)

    ch.set_target(0.0)

    assert ch.begin == pytest.approx(5.0)
    assert ch.value == pytest.approx(5.0)
    assert ch.tick(0.5) == pytest.approx(2.5)


def test_same_target_does_not_restart():
    ch = AnimationChannel(0.0, 1.0)
    ch.set_target(1.0)
    ch.tick(0.5)
    assert not ch.set_target(1.0)
    assert ch.elapsed == pytest.approx(0.5)


def test_curve_shapes_progress():
    ch = AnimationChannel(0.0, 1.0, curve=ease_in_quad)
    ch.set_target(10.0)
    assert ch.tick(0.5) == pytest.approx(2.5)


def test_zero_duration_jumps():
    ch = AnimationChannel(0.0, 0.0)
    ch.set_target(4.0)
    assert not ch.is_animating
    assert ch.value == 4.0


def test_jump_to_settles():
    ch = AnimationChannel(0.0, 1.0)
    ch.set_target(1.0)
    ch.jump_to(7.0)
    assert ch.value == 7.0
    assert not ch.is_animating


def test_custom_lerp():
    ch = AnimationChannel((0.0, 0.0), 1.0,
                          lerp=lambda a, b, t: tuple(x + (y - x) * t for x, y in zip(a, b)))
    ch.set_target((2.0, 4.0))
    assert ch.tick(0.5) == pytest.approx((1.0, 2.0))


def test_default_lerp_clamps_overshooting_curve():
    ch = AnimationChannel(0.0, 1.0, curve=lambda t: 1.5 * t)
    ch.set_target(2.0)
    assert ch.tick(0.4) == pytest.approx(1.2)
    assert ch.tick(0.4) == pytest.approx(2.0)


@pytest.mark.parametrize("duration", [-1.0, -0.001])
def test_negative_duration_rejected(duration):
    with pytest.raises(ChannelError):
        AnimationChannel(0.0, duration)
    ch = AnimationChannel(0.0, 1.0)
    with pytest.raises(ValueError):
        ch.retime(duration)
