from typing import Any, Callable, Optional

import numpy as np

from animation.easing import Curve, linear
from animation.easing import lerp as _default_lerp


class ChannelError(ValueError):
    """Raised for an invalid tween duration."""


class AnimationChannel:
    """A single tween: begin -> end over `duration` seconds through `curve`.

    A new target restarts the tween from the value currently on screen,
    not from the previous target, so an interrupted tween never jumps.
    A fresh channel is seeded with begin == end (a zero-length no-op).
    """

    def __init__(self, value: Any, duration: float, curve: Curve = linear,
                 lerp: Optional[Callable[[Any, Any, float], Any]] = None):
        if duration < 0:
            raise ChannelError(f"duration must be non-negative, got {duration}")
        self.begin = value
        self.end = value
        self.duration = float(duration)
        self.curve = curve
        self.elapsed = self.duration
        self._lerp = lerp or _default_lerp

    @property
    def progress(self) -> float:
        if self.duration <= 0.0:
            return 1.0
        return float(np.clip(self.elapsed / self.duration, 0.0, 1.0))

    @property
    def is_animating(self) -> bool:
        return self.elapsed < self.duration

    @property
    def value(self):
        if not self.is_animating:
            return self.end
        if self.elapsed <= 0.0:
            return self.begin
        return self._lerp(self.begin, self.end, self.curve(self.progress))

    def set_target(self, target) -> bool:
        """Retarget the channel. Returns False when `target` is already the end value."""
        if target == self.end:
            return False
        self.begin = self.value
        self.end = target
        self.elapsed = 0.0
        return True

    def jump_to(self, value):
        self.begin = value
        self.end = value
        self.elapsed = self.duration

    def retime(self, duration: float, curve: Optional[Curve] = None):
        if duration < 0:
            raise ChannelError(f"duration must be non-negative, got {duration}")
        self.duration = float(duration)
        if curve is not None:
            self.curve = curve

    def tick(self, dt: float):
        if self.is_animating:
            self.elapsed = min(self.elapsed + dt, self.duration)
        return self.value
