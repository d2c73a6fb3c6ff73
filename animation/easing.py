from typing import Callable

import numpy as np


Curve = Callable[[float], float]


def linear(t: float) -> float:
    return float(np.clip(t, 0.0, 1.0))


def ease_in_out_cubic(t: float) -> float:
    t = np.clip(t, 0.0, 1.0)
    if t < 0.5:
        return 4.0 * t * t * t
    else:
        return 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def ease_out_quad(t: float) -> float:
    t = np.clip(t, 0.0, 1.0)
    return 1.0 - (1.0 - t) ** 2


def ease_out_cubic(t: float) -> float:
    t = np.clip(t, 0.0, 1.0)
    return 1.0 - (1.0 - t) ** 3


def ease_in_quad(t: float) -> float:
    t = np.clip(t, 0.0, 1.0)
    return t * t


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Curve:
    """CSS-style cubic bezier curve through (0,0), (x1,y1), (x2,y2), (1,1).

    x(s) is inverted with a few Newton steps followed by bisection,
    which is plenty for per-frame animation values.
    """
    def _coord(s, a, b):
        return 3.0 * a * s * (1.0 - s) ** 2 + 3.0 * b * s * s * (1.0 - s) + s ** 3

    def _slope(s, a, b):
        return 3.0 * a * (1.0 - s) ** 2 + 6.0 * (b - a) * s * (1.0 - s) + 3.0 * (1.0 - b) * s * s

    def curve(t: float) -> float:
        t = float(np.clip(t, 0.0, 1.0))
        if t <= 0.0 or t >= 1.0:
            return t
        s = t
        for _ in range(8):
            dx = _coord(s, x1, x2) - t
            if abs(dx) < 1e-7:
                return _coord(s, y1, y2)
            d = _slope(s, x1, x2)
            if abs(d) < 1e-6:
                break
            s -= dx / d
        lo, hi = 0.0, 1.0
        s = t
        while hi - lo > 1e-7:
            if _coord(s, x1, x2) < t:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2.0
        return _coord(s, y1, y2)

    return curve


ease = cubic_bezier(0.25, 0.1, 0.25, 1.0)
decelerate = ease_out_quad
fast_out_slow_in = cubic_bezier(0.4, 0.0, 0.2, 1.0)


def lerp(a, b, t: float):
    return a + (b - a) * np.clip(t, 0.0, 1.0)


CURVES: dict[str, Curve] = {
    'linear':           linear,
    'ease':             ease,
    'ease_in_quad':     ease_in_quad,
    'ease_out_quad':    ease_out_quad,
    'ease_out_cubic':   ease_out_cubic,
    'ease_in_out_cubic': ease_in_out_cubic,
    'decelerate':       decelerate,
    'fast_out_slow_in': fast_out_slow_in,
}
