"""
Resolves a gradient against the rect it is drawn into.

The output (ShaderParams) is everything a backend needs to evaluate the
gradient per pixel: geometry in surface pixels, stops, colors, tile mode and
the inverse of the gradient transform. Both the numpy rasterizer and the GL
renderer consume it, so the two agree on where the gradient lands.

Cross-fades are flattened into weighted layers.
"""
from dataclasses import dataclass

import numpy as np

from foil.geometry import Rect, TextDirection, DEFAULT_DIRECTION
from foil.gradients import (
    Gradient, LinearGradient, RadialGradient, SweepGradient, CrossFadeGradient, TileMode,
)


KIND_LINEAR = 0
KIND_RADIAL = 1
KIND_SWEEP = 2

TILE_INDEX = {
    TileMode.CLAMP: 0,
    TileMode.REPEATED: 1,
    TileMode.MIRROR: 2,
    TileMode.DECAL: 3,
}


@dataclass(frozen=True)
class GradientLayer:
    kind: int
    # linear: begin / end points; radial: center / (radius, 0); sweep: center / (start, end)
    p0: tuple[float, float]
    p1: tuple[float, float]
    stops: tuple[float, ...]
    colors: tuple[tuple[float, float, float, float], ...]
    tile_mode: TileMode
    # Row-major 3x3 inverse transform (surface pixels -> gradient space)
    inverse: tuple[float, ...]
    weight: float = 1.0

    @property
    def inverse_matrix(self) -> np.ndarray:
        return np.array(self.inverse, dtype=np.float64).reshape(3, 3)


@dataclass(frozen=True)
class ShaderParams:
    rect: Rect
    layers: tuple[GradientLayer, ...]


_IDENTITY = tuple(np.eye(3).ravel().tolist())


def _inverse(gradient: Gradient, rect: Rect, direction: TextDirection) -> tuple[float, ...]:
    if gradient.transform is None:
        return _IDENTITY
    m = gradient.transform.matrix(rect, direction)
    return tuple(np.linalg.inv(m).ravel().tolist())


def resolve_layer(gradient: Gradient, rect: Rect, direction: TextDirection,
                  weight: float = 1.0) -> GradientLayer:
    if isinstance(gradient, LinearGradient):
        kind = KIND_LINEAR
        p0 = gradient.begin.within(rect, direction)
        p1 = gradient.end.within(rect, direction)
    elif isinstance(gradient, RadialGradient):
        kind = KIND_RADIAL
        p0 = gradient.center.within(rect, direction)
        p1 = (gradient.radius * rect.shortest_side, 0.0)
    elif isinstance(gradient, SweepGradient):
        kind = KIND_SWEEP
        p0 = gradient.center.within(rect, direction)
        p1 = (gradient.start_angle, gradient.end_angle)
    else:
        raise TypeError(f"unsupported gradient type: {type(gradient).__name__}")

    return GradientLayer(
        kind=kind,
        p0=(float(p0[0]), float(p0[1])),
        p1=(float(p1[0]), float(p1[1])),
        stops=gradient.resolved_stops(),
        colors=gradient.colors,
        tile_mode=gradient.tile_mode,
        inverse=_inverse(gradient, rect, direction),
        weight=weight,
    )


def _flatten(gradient, weight: float):
    if isinstance(gradient, CrossFadeGradient):
        t = float(np.clip(gradient.t, 0.0, 1.0))
        yield from _flatten(gradient.begin, weight * (1.0 - t))
        yield from _flatten(gradient.end, weight * t)
    elif weight > 0.0:
        yield gradient, weight


def resolve(gradient, rect: Rect, direction: TextDirection = None) -> ShaderParams:
    direction = direction or DEFAULT_DIRECTION
    layers = tuple(resolve_layer(g, rect, direction, w) for g, w in _flatten(gradient, 1.0))
    return ShaderParams(rect=rect, layers=layers)


def strongest_layers(params: ShaderParams, limit: int) -> tuple[GradientLayer, ...]:
    """At most `limit` layers, heaviest first, weights renormalized to the original total."""
    layers = params.layers
    if len(layers) <= limit:
        return layers
    total = sum(l.weight for l in layers)
    kept = sorted(layers, key=lambda l: l.weight, reverse=True)[:limit]
    kept_total = sum(l.weight for l in kept)
    scale = total / kept_total if kept_total > 0 else 0.0
    return tuple(GradientLayer(l.kind, l.p0, l.p1, l.stops, l.colors, l.tile_mode,
                               l.inverse, l.weight * scale) for l in kept)
