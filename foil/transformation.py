"""
Gradient transforms.

A transform maps the shader's bounds to a 3x3 affine matrix applied to the
gradient before it is sampled (gradient space -> surface space). The
rasterizer inverts it to find where each pixel lands on the gradient.
"""
import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

from foil.geometry import Rect, TextDirection, DEFAULT_DIRECTION


def translation(dx: float, dy: float) -> np.ndarray:
    m = np.eye(3, dtype=np.float64)
    m[0, 2] = dx
    m[1, 2] = dy
    return m


def about_point(m: np.ndarray, px: float, py: float) -> np.ndarray:
    return translation(px, py) @ m @ translation(-px, -py)


@dataclass(frozen=True)
class TranslateGradient:
    """Shift the gradient by a fraction of the bounds on each axis."""
    percent_x: float = 0.0
    percent_y: float = 0.0

    def matrix(self, bounds: Rect, direction: TextDirection = DEFAULT_DIRECTION) -> np.ndarray:
        return translation(bounds.width * self.percent_x,
                           bounds.height * self.percent_y)


@dataclass(frozen=True)
class RotateGradient:
    radians: float = 0.0

    def matrix(self, bounds: Rect, direction: TextDirection = DEFAULT_DIRECTION) -> np.ndarray:
        # Mirrored layouts rotate the other way round.
        angle = -self.radians if direction == TextDirection.RTL else self.radians
        c, s = math.cos(angle), math.sin(angle)
        rot = np.array([[c, -s, 0.0],
                        [s,  c, 0.0],
                        [0.0, 0.0, 1.0]], dtype=np.float64)
        return about_point(rot, *bounds.center)


@dataclass(frozen=True)
class ScaleGradient:
    sx: float = 1.0
    sy: float = 1.0

    def matrix(self, bounds: Rect, direction: TextDirection = DEFAULT_DIRECTION) -> np.ndarray:
        m = np.diag([self.sx, self.sy, 1.0]).astype(np.float64)
        return about_point(m, *bounds.center)


@dataclass(frozen=True)
class ChainedTransform:
    """Applies `first`, then `second`."""
    first: object
    second: object

    def matrix(self, bounds: Rect, direction: TextDirection = DEFAULT_DIRECTION) -> np.ndarray:
        return self.second.matrix(bounds, direction) @ self.first.matrix(bounds, direction)


# A roll-driven transform factory: (x, y) -> transform
TransformFn = Callable[[float, float], object]


def translate_by_percent(x: float, y: float) -> TranslateGradient:
    return TranslateGradient(percent_x=x, percent_y=y)


def rotate_and_translate(x: float, y: float) -> ChainedTransform:
    """Swirl: rotate by x quarter-turns, then drift along y."""
    return ChainedTransform(RotateGradient(x * math.pi / 2.0),
                            TranslateGradient(0.0, y))


def zoom(x: float, y: float) -> ScaleGradient:
    return ScaleGradient(1.0 + abs(x), 1.0 + abs(y))
