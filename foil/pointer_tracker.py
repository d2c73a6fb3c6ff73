"""
Pointer tracking.

Turns raw pointer positions on a surface into a normalized (x, y) signal in
-1..1 per axis (before scaling), delivered through `on_position_change`.

  - relative mode: movement since the pointer went down, measured against
    half the surface size
  - absolute mode: position within the surface, center = (0, 0)

Hover only counts while no pointer is down, and moves only count while one
is. Releasing the pointer leaves the last signal where it was.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import numpy as np

from foil.scalar import Scalar


PositionCallback = Callable[[float, float], None]
SizeFn = Callable[[], Optional[tuple[float, float]]]


class TrackerState(Enum):
    IDLE = 'idle'
    CONTACT = 'contact'
    TRACKING = 'tracking'


class PointerKind(Enum):
    DOWN = 'down'
    MOVE = 'move'
    UP = 'up'
    HOVER = 'hover'


@dataclass(frozen=True)
class PointerEvent:
    kind: PointerKind
    x: float
    y: float


@dataclass(frozen=True)
class NormalizedVector:
    x: float = 0.0
    y: float = 0.0


def normalize_absolute(x, y, width, height, scalar: Scalar = Scalar.IDENTITY) -> NormalizedVector:
    nx = float(np.clip((x / width) * 2.0 - 1.0, -1.0, 1.0)) * scalar.horizontal
    ny = float(np.clip((y / height) * 2.0 - 1.0, -1.0, 1.0)) * scalar.vertical
    return NormalizedVector(nx, ny)


def normalize_relative(dx, dy, width, height, scalar: Scalar = Scalar.IDENTITY) -> NormalizedVector:
    nx = float(np.clip(dx / (width / 2.0), -1.0, 1.0)) * scalar.horizontal
    ny = float(np.clip(dy / (height / 2.0), -1.0, 1.0)) * scalar.vertical
    return NormalizedVector(nx, ny)


class PointerTracker:
    def __init__(self, on_position_change: PositionCallback,
                 size_fn: SizeFn,
                 scalar: Scalar = Scalar.IDENTITY,
                 disabled: bool = False,
                 use_relative_position: bool = True):
        self.on_position_change = on_position_change
        self.size_fn = size_fn
        self.scalar = scalar
        self.disabled = disabled
        self.use_relative_position = use_relative_position

        self.state = TrackerState.IDLE
        self.initial_position: Optional[tuple[float, float]] = None
        self.normalized = NormalizedVector()

    @property
    def is_pointer_down(self) -> bool:
        return self.state != TrackerState.IDLE

    def _surface_size(self):
        size = self.size_fn()
        if size is None:
            return None
        w, h = size
        if w <= 0 or h <= 0:
            return None
        return w, h

    def _update_position(self, x: float, y: float):
        if self.disabled:
            return
        size = self._surface_size()
        if size is None:
            # Not laid out yet; the next event tries again.
            return
        w, h = size

        if self.use_relative_position and self.initial_position is not None:
            x0, y0 = self.initial_position
            self.normalized = normalize_relative(x - x0, y - y0, w, h, self.scalar)
        else:
            self.normalized = normalize_absolute(x, y, w, h, self.scalar)

        self.on_position_change(self.normalized.x, self.normalized.y)

    def pointer_down(self, x: float, y: float):
        if self.disabled:
            return
        self.state = TrackerState.CONTACT
        self.initial_position = (x, y)
        self._update_position(x, y)

    def pointer_move(self, x: float, y: float):
        if self.disabled or not self.is_pointer_down:
            return
        self.state = TrackerState.TRACKING
        self._update_position(x, y)

    def pointer_up(self, x: float = 0.0, y: float = 0.0):
        if self.disabled:
            return
        self.state = TrackerState.IDLE
        # The last signal stays in place; initial_position is kept too.

    def pointer_hover(self, x: float, y: float):
        if self.disabled or self.is_pointer_down:
            return
        self._update_position(x, y)

    def handle(self, event: PointerEvent):
        handler = {
            PointerKind.DOWN: self.pointer_down,
            PointerKind.MOVE: self.pointer_move,
            PointerKind.UP: self.pointer_up,
            PointerKind.HOVER: self.pointer_hover,
        }[event.kind]
        handler(event.x, event.y)
