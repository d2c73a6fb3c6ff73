"""
Blend modes on premultiplied RGBA arrays (..., 4), src = gradient, dst = child.

Porter-Duff modes use the premultiplied operators directly. Separable modes
follow the W3C compositing formula

    co = (1 - ab) * cs + (1 - as) * cb + as * ab * B(Cb, Cs)
    ao = as + ab - as * ab

with B evaluated on unpremultiplied colors. shaders/foil.frag mirrors this
file; the enum order is the mode index sent to the GPU.
"""
from enum import Enum

import numpy as np


class BlendMode(Enum):
    CLEAR = 'clear'
    SRC = 'src'
    DST = 'dst'
    SRC_OVER = 'src_over'
    DST_OVER = 'dst_over'
    SRC_IN = 'src_in'
    DST_IN = 'dst_in'
    SRC_OUT = 'src_out'
    DST_OUT = 'dst_out'
    SRC_ATOP = 'src_atop'
    DST_ATOP = 'dst_atop'
    XOR = 'xor'
    PLUS = 'plus'
    MODULATE = 'modulate'
    SCREEN = 'screen'
    OVERLAY = 'overlay'
    DARKEN = 'darken'
    LIGHTEN = 'lighten'
    COLOR_DODGE = 'color_dodge'
    COLOR_BURN = 'color_burn'
    HARD_LIGHT = 'hard_light'
    SOFT_LIGHT = 'soft_light'
    DIFFERENCE = 'difference'
    EXCLUSION = 'exclusion'
    MULTIPLY = 'multiply'

    @property
    def index(self) -> int:
        return list(BlendMode).index(self)


def premultiply(rgba: np.ndarray) -> np.ndarray:
    out = np.array(rgba, dtype=np.float32, copy=True)
    out[..., :3] *= out[..., 3:4]
    return out


def unpremultiply(rgba: np.ndarray) -> np.ndarray:
    out = np.array(rgba, dtype=np.float32, copy=True)
    a = out[..., 3:4]
    safe = np.where(a > 1e-8, a, 1.0)
    out[..., :3] = np.where(a > 1e-8, out[..., :3] / safe, 0.0)
    return out


# ── separable blend functions B(Cb, Cs) ─────────────────────────────

def _multiply(cb, cs):
    return cb * cs


def _screen(cb, cs):
    return cb + cs - cb * cs


def _hard_light(cb, cs):
    return np.where(cs <= 0.5, _multiply(cb, 2.0 * cs), _screen(cb, 2.0 * cs - 1.0))


def _overlay(cb, cs):
    return _hard_light(cs, cb)


def _darken(cb, cs):
    return np.minimum(cb, cs)


def _lighten(cb, cs):
    return np.maximum(cb, cs)


def _color_dodge(cb, cs):
    denom = np.where(cs < 1.0, 1.0 - cs, 1.0)
    out = np.where(cs >= 1.0, 1.0, np.minimum(1.0, cb / denom))
    return np.where(cb <= 0.0, 0.0, out)


def _color_burn(cb, cs):
    denom = np.where(cs > 0.0, cs, 1.0)
    out = np.where(cs <= 0.0, 0.0, 1.0 - np.minimum(1.0, (1.0 - cb) / denom))
    return np.where(cb >= 1.0, 1.0, out)


def _soft_light(cb, cs):
    d = np.where(cb <= 0.25, ((16.0 * cb - 12.0) * cb + 4.0) * cb, np.sqrt(cb))
    return np.where(cs <= 0.5,
                    cb - (1.0 - 2.0 * cs) * cb * (1.0 - cb),
                    cb + (2.0 * cs - 1.0) * (d - cb))


def _difference(cb, cs):
    return np.abs(cb - cs)


def _exclusion(cb, cs):
    return cb + cs - 2.0 * cb * cs


SEPARABLE = {
    BlendMode.SCREEN:      _screen,
    BlendMode.OVERLAY:     _overlay,
    BlendMode.DARKEN:      _darken,
    BlendMode.LIGHTEN:     _lighten,
    BlendMode.COLOR_DODGE: _color_dodge,
    BlendMode.COLOR_BURN:  _color_burn,
    BlendMode.HARD_LIGHT:  _hard_light,
    BlendMode.SOFT_LIGHT:  _soft_light,
    BlendMode.DIFFERENCE:  _difference,
    BlendMode.EXCLUSION:   _exclusion,
    BlendMode.MULTIPLY:    _multiply,
}


def _porter_duff(s, d, sa, da, mode: BlendMode):
    if mode == BlendMode.CLEAR:
        return np.zeros_like(s)
    if mode == BlendMode.SRC:
        return s
    if mode == BlendMode.DST:
        return d
    if mode == BlendMode.SRC_OVER:
        return s + d * (1.0 - sa)
    if mode == BlendMode.DST_OVER:
        return d + s * (1.0 - da)
    if mode == BlendMode.SRC_IN:
        return s * da
    if mode == BlendMode.DST_IN:
        return d * sa
    if mode == BlendMode.SRC_OUT:
        return s * (1.0 - da)
    if mode == BlendMode.DST_OUT:
        return d * (1.0 - sa)
    if mode == BlendMode.SRC_ATOP:
        return s * da + d * (1.0 - sa)
    if mode == BlendMode.DST_ATOP:
        return d * sa + s * (1.0 - da)
    if mode == BlendMode.XOR:
        return s * (1.0 - da) + d * (1.0 - sa)
    if mode == BlendMode.PLUS:
        return np.minimum(s + d, 1.0)
    if mode == BlendMode.MODULATE:
        return s * d
    raise ValueError(f"not a Porter-Duff mode: {mode}")


def blend(src: np.ndarray, dst: np.ndarray, mode: BlendMode) -> np.ndarray:
    """Composite premultiplied `src` onto premultiplied `dst`."""
    src = np.asarray(src, dtype=np.float32)
    dst = np.asarray(dst, dtype=np.float32)
    sa = src[..., 3:4]
    da = dst[..., 3:4]

    fn = SEPARABLE.get(mode)
    if fn is None:
        out = _porter_duff(src, dst, sa, da, mode)
        return np.clip(out, 0.0, 1.0).astype(np.float32)

    cs = unpremultiply(src)[..., :3]
    cb = unpremultiply(dst)[..., :3]
    out = np.empty(np.broadcast_shapes(src.shape, dst.shape), dtype=np.float32)
    out[..., :3] = ((1.0 - da) * src[..., :3] + (1.0 - sa) * dst[..., :3]
                    + sa * da * fn(cb, cs))
    out[..., 3:4] = sa + da - sa * da
    return np.clip(out, 0.0, 1.0)
