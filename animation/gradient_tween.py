"""
Gradient interpolation.

Two policies:

  gentle (default) - when both gradients have the same kind, stop count and
      tile mode, colors, stops and geometry are lerped stop by stop.
      Anything else cross-fades: both gradients are drawn, one fading out
      while the other fades in.

  aggressive - stops are paired by index even when counts or kinds differ
      (the shorter list repeats its last stop), geometry shared by both kinds
      is lerped and the kind itself switches at t = 0.5. Dissimilar
      gradients can look abrupt mid-way; that is the price of never
      drawing two gradients at once.
"""
from dataclasses import fields, is_dataclass, replace

from foil.gradients import (
    Gradient, CrossFadeGradient, lerp_color,
)
from foil.geometry import Alignment


_BASE_FIELDS = {'colors', 'stops', 'tile_mode', 'transform'}


def _lerp_value(a, b, t: float):
    if isinstance(a, Alignment) and isinstance(b, Alignment):
        return a.lerp(b, t)
    if isinstance(a, (int, float)) and isinstance(b, (int, float)) \
            and not isinstance(a, bool) and not isinstance(b, bool):
        return a + (b - a) * t
    return a if t < 0.5 else b


def _geometry(g: Gradient) -> dict:
    return {f.name: getattr(g, f.name) for f in fields(g) if f.name not in _BASE_FIELDS}


def _pad(seq: tuple, n: int) -> tuple:
    if len(seq) >= n:
        return seq
    return seq + (seq[-1],) * (n - len(seq))


def _lerp_stops(a: Gradient, b: Gradient, t: float):
    n = max(a.stop_count, b.stop_count)
    colors_a, colors_b = _pad(a.colors, n), _pad(b.colors, n)
    stops_a, stops_b = _pad(a.resolved_stops(), n), _pad(b.resolved_stops(), n)
    colors = tuple(lerp_color(ca, cb, t) for ca, cb in zip(colors_a, colors_b))
    stops = tuple(sa + (sb - sa) * t for sa, sb in zip(stops_a, stops_b))
    return colors, stops


def _lerp_transform(a, b, t: float):
    if a == b:
        return a
    if is_dataclass(a) and type(a) is type(b):
        return replace(a, **{f.name: _lerp_value(getattr(a, f.name), getattr(b, f.name), t)
                             for f in fields(a)})
    return a if t < 0.5 else b


def lerp_same_shape(a: Gradient, b: Gradient, t: float) -> Gradient:
    colors, stops = _lerp_stops(a, b, t)
    geometry = {name: _lerp_value(value, getattr(b, name), t)
                for name, value in _geometry(a).items()}
    return replace(a, colors=colors, stops=stops,
                   transform=_lerp_transform(a.transform, b.transform, t),
                   **geometry)


def lerp_aggressive(a: Gradient, b: Gradient, t: float) -> Gradient:
    colors, stops = _lerp_stops(a, b, t)
    base, other = (a, b) if t < 0.5 else (b, a)
    geometry = {}
    for name, value in _geometry(base).items():
        if hasattr(other, name):
            src, dst = (value, getattr(other, name)) if base is a else (getattr(other, name), value)
            geometry[name] = _lerp_value(src, dst, t)
        else:
            geometry[name] = value
    return type(base)(colors=colors, stops=stops,
                      tile_mode=base.tile_mode,
                      transform=_lerp_transform(a.transform, b.transform, t),
                      **geometry)


def _settle(g):
    # Aggressive lerps only understand plain gradients.
    if isinstance(g, CrossFadeGradient):
        return g.end if g.t >= 0.5 else g.begin
    return g


def lerp_gradient(a, b, t: float, aggressive: bool = False):
    """Blend gradient `a` into `b` at `t` (0..1). Either side may be None."""
    if a is None and b is None:
        return None
    if a is None:
        return b.scale(t)
    if b is None:
        return a.scale(1.0 - t)
    if t <= 0.0:
        return a
    if t >= 1.0:
        return b
    if a == b:
        return a
    if aggressive:
        return lerp_aggressive(_settle(a), _settle(b), t)
    if isinstance(a, Gradient) and isinstance(b, Gradient) and a.same_shape(b):
        return lerp_same_shape(a, b, t)
    # An interrupted cross-fade nests instead of snapping to one side.
    return CrossFadeGradient(a, b, t)


class GradientTween:
    """Binds an interpolation policy so it can drive an AnimationChannel."""

    def __init__(self, aggressive: bool = False):
        self.aggressive = aggressive

    def __call__(self, a, b, t: float):
        return lerp_gradient(a, b, t, self.aggressive)
