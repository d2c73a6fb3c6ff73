"""
CPU gradient shading and an image-backed paint surface.

shade() evaluates ShaderParams at every pixel center of a width x height
surface and returns premultiplied RGBA float32, (height, width, 4).
ImageSurface composites that over a child image the way the GL renderer
does on the GPU; it backs headless recording and the tests.
"""
import numpy as np
from PIL import Image

from foil.geometry import Rect, TextDirection, DEFAULT_DIRECTION
from foil.gradients import TileMode
from visualization.blend import blend, premultiply, unpremultiply
from visualization.shading import (
    ShaderParams, GradientLayer, resolve, KIND_LINEAR, KIND_RADIAL, KIND_SWEEP,
)


def pixel_grid(width: int, height: int):
    xs = np.arange(width, dtype=np.float64) + 0.5
    ys = np.arange(height, dtype=np.float64) + 0.5
    return np.meshgrid(xs, ys)


def apply_tile(t: np.ndarray, tile_mode: TileMode):
    """Returns (t in 0..1, visible mask)."""
    visible = np.ones_like(t, dtype=bool)
    if tile_mode == TileMode.CLAMP:
        t = np.clip(t, 0.0, 1.0)
    elif tile_mode == TileMode.REPEATED:
        t = t - np.floor(t)
    elif tile_mode == TileMode.MIRROR:
        m = np.mod(t, 2.0)
        t = np.where(m > 1.0, 2.0 - m, m)
    elif tile_mode == TileMode.DECAL:
        visible = (t >= 0.0) & (t <= 1.0)
        t = np.clip(t, 0.0, 1.0)
    return t, visible


def gradient_t(layer: GradientLayer, x: np.ndarray, y: np.ndarray) -> np.ndarray:
    inv = layer.inverse_matrix
    gx = inv[0, 0] * x + inv[0, 1] * y + inv[0, 2]
    gy = inv[1, 0] * x + inv[1, 1] * y + inv[1, 2]

    if layer.kind == KIND_LINEAR:
        (bx, by), (ex, ey) = layer.p0, layer.p1
        dx, dy = ex - bx, ey - by
        length2 = dx * dx + dy * dy
        if length2 < 1e-12:
            return np.zeros_like(gx)
        return ((gx - bx) * dx + (gy - by) * dy) / length2

    if layer.kind == KIND_RADIAL:
        (cx, cy), (radius, _) = layer.p0, layer.p1
        return np.hypot(gx - cx, gy - cy) / max(radius, 1e-6)

    if layer.kind == KIND_SWEEP:
        (cx, cy), (start, end) = layer.p0, layer.p1
        angle = np.mod(np.arctan2(gy - cy, gx - cx), 2.0 * np.pi)
        span = end - start
        if abs(span) < 1e-9:
            return np.zeros_like(gx)
        return (angle - start) / span

    raise ValueError(f"unknown gradient kind {layer.kind}")


def sample_colors(layer: GradientLayer, t: np.ndarray) -> np.ndarray:
    """Unpremultiplied RGBA at parameter t (already tiled)."""
    stops = np.asarray(layer.stops, dtype=np.float64)
    colors = np.asarray(layer.colors, dtype=np.float64)
    out = np.empty(t.shape + (4,), dtype=np.float32)
    for c in range(4):
        out[..., c] = np.interp(t, stops, colors[:, c])
    return out


def shade_layer(layer: GradientLayer, x: np.ndarray, y: np.ndarray) -> np.ndarray:
    t, visible = apply_tile(gradient_t(layer, x, y), layer.tile_mode)
    rgba = premultiply(sample_colors(layer, t))
    rgba[~visible] = 0.0
    return rgba


def shade(params: ShaderParams, width: int, height: int) -> np.ndarray:
    x, y = pixel_grid(width, height)
    out = np.zeros((height, width, 4), dtype=np.float32)
    for layer in params.layers:
        out += shade_layer(layer, x, y) * layer.weight
    return np.clip(out, 0.0, 1.0)


def shade_gradient(gradient, rect: Rect, width: int, height: int,
                   direction: TextDirection = DEFAULT_DIRECTION) -> np.ndarray:
    return shade(resolve(gradient, rect, direction), width, height)


def to_image(premultiplied: np.ndarray) -> Image.Image:
    straight = unpremultiply(premultiplied)
    data = np.clip(straight * 255.0 + 0.5, 0, 255).astype(np.uint8)
    return Image.fromarray(data, 'RGBA')


class ImageSurface:
    """Paint surface backed by a numpy child image.

    `child` is straight-alpha RGBA in 0..1, shape (height, width, 4).
    Every paint() composites the shader over the child (not over the
    previous frame) and stores the result in `pixels`.
    """

    def __init__(self, child: np.ndarray, direction: TextDirection = None):
        child = np.asarray(child, dtype=np.float32)
        if child.ndim != 3 or child.shape[2] != 4:
            raise ValueError(f"child must be (height, width, 4), got {child.shape}")
        self._child = premultiply(child)
        self.direction = direction
        self.pixels = self._child.copy()
        self.paint_count = 0
        self.last_command = None

    @property
    def size(self) -> tuple[int, int]:
        h, w = self._child.shape[:2]
        return w, h

    def paint(self, command):
        w, h = self.size
        shader = shade(resolve(command.gradient, command.mask_rect, command.direction), w, h)
        composed = blend(shader, self._child, command.blend_mode)

        # Only the mask bounds receive the shader; the rest shows the child.
        x, y = pixel_grid(w, h)
        b = command.bounds
        inside = (x >= b.left) & (x < b.right) & (y >= b.top) & (y < b.bottom)
        self.pixels = np.where(inside[..., None], composed, self._child)
        self.paint_count += 1
        self.last_command = command

    def to_image(self) -> Image.Image:
        return to_image(self.pixels)


def blank_child(width: int, height: int, color=(0.0, 0.0, 0.0, 1.0)) -> np.ndarray:
    child = np.empty((height, width, 4), dtype=np.float32)
    child[...] = color
    return child

