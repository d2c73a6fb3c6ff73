"""
Two-stage interpolation for a foil.

Stage A (GradientAnimator) smooths changes of the gradient itself over
`duration`. Stage B (RolloutAnimator) smooths the four position inputs:

    ('roll', 'x')  ('roll', 'y')      from the Roll oscillator
    ('pointer', 'x')  ('pointer', 'y')  from the pointer tracker

over `speed`. Every channel retargets on its own; nothing is synchronized
between channels or between the two stages.
"""
from typing import Callable, Optional

from animation.channel import AnimationChannel
from animation.easing import Curve, linear
from animation.gradient_tween import GradientTween


ROLL = 'roll'
POINTER = 'pointer'
CHANNEL_KEYS = ((ROLL, 'x'), (ROLL, 'y'), (POINTER, 'x'), (POINTER, 'y'))


class GradientAnimator:
    def __init__(self, gradient, duration: float, curve: Curve = linear,
                 aggressive: bool = False, on_end: Optional[Callable[[], None]] = None):
        self._tween = GradientTween(aggressive)
        self.channel = AnimationChannel(gradient, duration, curve, lerp=self._tween)
        self.on_end = on_end

    @property
    def aggressive(self) -> bool:
        return self._tween.aggressive

    @aggressive.setter
    def aggressive(self, value: bool):
        self._tween.aggressive = value

    @property
    def value(self):
        return self.channel.value

    @property
    def target(self):
        return self.channel.end

    @property
    def is_animating(self) -> bool:
        return self.channel.is_animating

    def set_target(self, gradient) -> bool:
        return self.channel.set_target(gradient)

    def retime(self, duration: float, curve: Optional[Curve] = None):
        self.channel.retime(duration, curve)

    def tick(self, dt: float):
        was_animating = self.channel.is_animating
        value = self.channel.tick(dt)
        if was_animating and not self.channel.is_animating and self.on_end is not None:
            self.on_end()
        return value


class RolloutAnimator:
    def __init__(self, speed: float, curve: Curve = linear,
                 rollout_x: tuple[float, float] = (0.0, 0.0),
                 rollout_y: tuple[float, float] = (0.0, 0.0)):
        initial = {
            (ROLL, 'x'): rollout_x[0],
            (ROLL, 'y'): rollout_y[0],
            (POINTER, 'x'): rollout_x[1],
            (POINTER, 'y'): rollout_y[1],
        }
        self.channels = {key: AnimationChannel(float(initial[key]), speed, curve)
                         for key in CHANNEL_KEYS}

    def set_targets(self, rollout_x: tuple[float, float], rollout_y: tuple[float, float]) -> int:
        """Retarget all four channels; returns how many actually changed."""
        targets = {
            (ROLL, 'x'): rollout_x[0],
            (ROLL, 'y'): rollout_y[0],
            (POINTER, 'x'): rollout_x[1],
            (POINTER, 'y'): rollout_y[1],
        }
        return sum(self.channels[key].set_target(float(targets[key])) for key in CHANNEL_KEYS)

    def retime(self, speed: float, curve: Optional[Curve] = None):
        for ch in self.channels.values():
            ch.retime(speed, curve)

    @property
    def is_animating(self) -> bool:
        return any(ch.is_animating for ch in self.channels.values())

    @property
    def rollout_x(self) -> tuple[float, float]:
        return (self.channels[(ROLL, 'x')].value, self.channels[(POINTER, 'x')].value)

    @property
    def rollout_y(self) -> tuple[float, float]:
        return (self.channels[(ROLL, 'y')].value, self.channels[(POINTER, 'y')].value)

    def tick(self, dt: float):
        for ch in self.channels.values():
            ch.tick(dt)
        return self.rollout_x, self.rollout_y


class FoilAnimation:
    """Both stages for one foil. `update` sets targets, `tick` advances time."""

    def __init__(self, gradient, duration: float = 0.5, speed: float = 0.15,
                 curve: Curve = linear, aggressive: bool = False,
                 on_end: Optional[Callable[[], None]] = None,
                 rollout_x: tuple[float, float] = (0.0, 0.0),
                 rollout_y: tuple[float, float] = (0.0, 0.0)):
        self.gradient = GradientAnimator(gradient, duration, curve, aggressive, on_end)
        self.rollout = RolloutAnimator(speed, curve, rollout_x, rollout_y)

    def update(self, gradient, rollout_x: tuple[float, float], rollout_y: tuple[float, float]):
        self.gradient.set_target(gradient)
        self.rollout.set_targets(rollout_x, rollout_y)

    def configure(self, duration: Optional[float] = None, speed: Optional[float] = None,
                  curve: Optional[Curve] = None, aggressive: Optional[bool] = None):
        if duration is not None or curve is not None:
            self.gradient.retime(self.gradient.channel.duration if duration is None else duration, curve)
        if speed is not None or curve is not None:
            first = self.rollout.channels[CHANNEL_KEYS[0]]
            self.rollout.retime(first.duration if speed is None else speed, curve)
        if aggressive is not None:
            self.gradient.aggressive = aggressive

    @property
    def is_animating(self) -> bool:
        return self.gradient.is_animating or self.rollout.is_animating

    def tick(self, dt: float):
        self.gradient.tick(dt)
        self.rollout.tick(dt)

    def values(self):
        """(gradient, rollout_x, rollout_y) as of the last tick."""
        return self.gradient.value, self.rollout.rollout_x, self.rollout.rollout_y
