from dataclasses import dataclass, replace
from typing import Optional

from foil.scalar import Scalar
from foil.transformation import TransformFn


@dataclass(frozen=True)
class Crinkle:
    """Animation settings for a Roll: the value oscillates from `min` to `max`
    every `period` seconds, ping-ponging when `reverse` is set.

    The value is multiplied by `scalar` per axis before it reaches a Foil,
    and `transform` (x, y) -> gradient transform decides what that value does
    to the gradient. A non-animated crinkle contributes nothing.
    """
    min: float = 0.0
    max: float = 1.0
    period: float = 1.0
    reverse: bool = False
    is_animated: bool = False
    scalar: Scalar = Scalar.IDENTITY
    transform: Optional[TransformFn] = None

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(
                f"min ({self.min}) must not be greater than max ({self.max})")
        if self.period <= 0:
            raise ValueError(f"period must be positive, got {self.period}")

    @property
    def span(self) -> float:
        return self.max - self.min

    def with_reverse(self, reverse: bool = True) -> 'Crinkle':
        return replace(self, reverse=reverse)

    def scaled(self, scalar: Scalar) -> 'Crinkle':
        return replace(self, scalar=scalar)

    def with_transform(self, transform: Optional[TransformFn]) -> 'Crinkle':
        return replace(self, transform=transform)

    @property
    def slow(self) -> 'Crinkle':
        return replace(self, period=self.period * 2.0)

    @property
    def fast(self) -> 'Crinkle':
        return replace(self, period=self.period / 2.0)

    @property
    def animated(self) -> 'Crinkle':
        return replace(self, is_animated=True)


SMOOTH = Crinkle()
CRAWLING = Crinkle(min=-1.0, max=1.0, period=6.0, reverse=True, is_animated=True,
                   scalar=Scalar.xy(0.5))
TWINKLING = Crinkle(min=-1.0, max=1.0, period=2.0, reverse=True, is_animated=True,
                    scalar=Scalar(horizontal=0.25, vertical=0.1))
VIBRANT = Crinkle(min=0.0, max=1.0, period=1.5, reverse=False, is_animated=True,
                  scalar=Scalar.xy(1.0, 0.0))
PIXELATED = Crinkle(min=-1.0, max=1.0, period=0.25, reverse=True, is_animated=True,
                    scalar=Scalar.xy(0.05))

CRINKLES = {
    'smooth':    SMOOTH,
    'crawling':  CRAWLING,
    'twinkling': TWINKLING,
    'vibrant':   VIBRANT,
    'pixelated': PIXELATED,
}
