"""
Gradient definitions.

Gradients are immutable value types: two gradients with the same kind,
colors, stops, geometry and transform compare equal, which is what decides
whether a new gradient animation has to start.

Colors are RGBA tuples of floats in 0..1 (not premultiplied).
"""
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from foil.geometry import Alignment, CENTER, CENTER_LEFT, CENTER_RIGHT


Color = tuple[float, float, float, float]

MAX_STOPS = 16


class TileMode(Enum):
    CLAMP = 'clamp'
    REPEATED = 'repeated'
    MIRROR = 'mirror'
    DECAL = 'decal'


def rgba(r: float, g: float, b: float, a: float = 1.0) -> Color:
    return (float(r), float(g), float(b), float(a))


def hex_color(value: int) -> Color:
    """0xAARRGGBB -> RGBA floats."""
    a = (value >> 24) & 0xFF
    r = (value >> 16) & 0xFF
    g = (value >> 8) & 0xFF
    b = value & 0xFF
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def with_alpha_scaled(color: Color, factor: float) -> Color:
    a = min(max(color[3] * factor, 0.0), 1.0)
    return (color[0], color[1], color[2], a)


def lerp_color(a: Color, b: Color, t: float) -> Color:
    return tuple(a[i] + (b[i] - a[i]) * t for i in range(4))


def even_stops(count: int) -> tuple[float, ...]:
    if count == 1:
        return (0.0,)
    return tuple(i / (count - 1) for i in range(count))


def _freeze_colors(colors) -> tuple[Color, ...]:
    out = []
    for c in colors:
        c = tuple(float(v) for v in c)
        if len(c) == 3:
            c = c + (1.0,)
        if len(c) != 4:
            raise ValueError(f"color must have 3 or 4 components, got {c}")
        out.append(c)
    return tuple(out)


@dataclass(frozen=True)
class Gradient:
    colors: tuple = ()
    stops: Optional[tuple] = None
    tile_mode: TileMode = TileMode.CLAMP
    transform: Optional[object] = None

    kind = 'gradient'

    def __post_init__(self):
        colors = _freeze_colors(self.colors)
        if len(colors) < 2:
            raise ValueError(f"gradient needs at least 2 colors, got {len(colors)}")
        if len(colors) > MAX_STOPS:
            raise ValueError(f"gradient supports at most {MAX_STOPS} colors, got {len(colors)}")
        object.__setattr__(self, 'colors', colors)
        if self.stops is not None:
            stops = tuple(float(s) for s in self.stops)
            if len(stops) != len(colors):
                raise ValueError(
                    f"stops ({len(stops)}) must match colors ({len(colors)})")
            if any(b < a for a, b in zip(stops, stops[1:])):
                raise ValueError(f"stops must be non-decreasing, got {stops}")
            object.__setattr__(self, 'stops', stops)

    @property
    def stop_count(self) -> int:
        return len(self.colors)

    def resolved_stops(self) -> tuple[float, ...]:
        if self.stops is not None:
            return self.stops
        return even_stops(len(self.colors))

    def with_transform(self, transform) -> 'Gradient':
        return replace(self, transform=transform)

    def scale(self, factor: float) -> 'Gradient':
        """Same gradient with every color's opacity multiplied by `factor`."""
        if factor == 1.0:
            return self
        return replace(self, colors=tuple(with_alpha_scaled(c, factor) for c in self.colors))

    def as_nill(self) -> 'Gradient':
        """Fully transparent copy, shape-compatible for smooth lerps."""
        return self.scale(0.0)

    def same_shape(self, other: 'Gradient') -> bool:
        return (type(self) is type(other)
                and self.stop_count == other.stop_count
                and self.tile_mode == other.tile_mode)


@dataclass(frozen=True)
class LinearGradient(Gradient):
    begin: Alignment = CENTER_LEFT
    end: Alignment = CENTER_RIGHT

    kind = 'linear'


@dataclass(frozen=True)
class RadialGradient(Gradient):
    center: Alignment = CENTER
    radius: float = 0.5

    kind = 'radial'

    def __post_init__(self):
        super().__post_init__()
        if self.radius <= 0.0:
            raise ValueError(f"radius must be positive, got {self.radius}")


@dataclass(frozen=True)
class SweepGradient(Gradient):
    center: Alignment = CENTER
    start_angle: float = 0.0
    end_angle: float = 2.0 * math.pi

    kind = 'sweep'


@dataclass(frozen=True)
class CrossFadeGradient:
    """Two gradients shown at once, `begin` fading out while `end` fades in.

    Either side may itself be a cross-fade when a fade is interrupted.
    """
    begin: object
    end: object
    t: float

    kind = 'crossfade'

    @property
    def transform(self):
        return self.end.transform

    def with_transform(self, transform) -> 'CrossFadeGradient':
        return CrossFadeGradient(self.begin.with_transform(transform),
                                 self.end.with_transform(transform), self.t)

    def scale(self, factor: float) -> 'CrossFadeGradient':
        return CrossFadeGradient(self.begin.scale(factor), self.end.scale(factor), self.t)

    def as_nill(self) -> 'CrossFadeGradient':
        return self.scale(0.0)
