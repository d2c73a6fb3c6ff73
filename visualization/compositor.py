"""
Foil compositor.

Turns one frame's inputs (gradient, the two rollout pairs, blend mode,
sensor flag, roll transform, text direction, surface size) into a
PaintCommand:

  - a non-zero roll channel (rollout_x[0] / rollout_y[0]) transforms the
    gradient, through the roll's transform fn or a percentage translation
  - the pointer channel (rollout_x[1] / rollout_y[1]) slides the shader rect
    by a fraction of the surface size when the sensor is on; otherwise the
    rect stays pinned at the origin
  - the shader is clipped to the surface bounds and blended over the child

Identical inputs produce no new command.
"""
from dataclasses import dataclass
from typing import Optional

from foil.geometry import Rect, TextDirection, DEFAULT_DIRECTION
from foil.transformation import TransformFn, translate_by_percent
from visualization.blend import BlendMode


@dataclass(frozen=True)
class CompositionFrame:
    gradient: object
    rollout_x: tuple[float, float]
    rollout_y: tuple[float, float]
    blend_mode: BlendMode
    use_sensor: bool
    size: tuple[float, float]
    transform: Optional[TransformFn] = None
    direction: Optional[TextDirection] = None


@dataclass(frozen=True)
class PaintCommand:
    gradient: object
    mask_rect: Rect
    bounds: Rect
    blend_mode: BlendMode
    direction: TextDirection


def positioned_gradient(gradient, roll_x: float, roll_y: float,
                        transform: Optional[TransformFn] = None):
    if roll_x == 0 and roll_y == 0:
        return gradient
    make = transform or translate_by_percent
    return gradient.with_transform(make(roll_x, roll_y))


def mask_rect(width: float, height: float, pointer_x: float, pointer_y: float,
              use_sensor: bool) -> Rect:
    return Rect.from_ltwh(
        width * pointer_x if use_sensor else 0.0,
        height * pointer_y if use_sensor else 0.0,
        width,
        height,
    )


def build_paint(frame: CompositionFrame) -> PaintCommand:
    width, height = frame.size
    roll_x, pointer_x = frame.rollout_x
    roll_y, pointer_y = frame.rollout_y
    return PaintCommand(
        gradient=positioned_gradient(frame.gradient, roll_x, roll_y, frame.transform),
        mask_rect=mask_rect(width, height, pointer_x, pointer_y, frame.use_sensor),
        bounds=Rect.from_ltwh(0.0, 0.0, width, height),
        blend_mode=frame.blend_mode,
        direction=frame.direction or DEFAULT_DIRECTION,
    )


class FoilCompositor:
    def __init__(self):
        self.last_frame: Optional[CompositionFrame] = None
        self.last_command: Optional[PaintCommand] = None
        self.paint_count = 0

    def compose(self, frame: CompositionFrame) -> Optional[PaintCommand]:
        """Returns a new command, or None for an empty frame or when nothing changed."""
        if frame.size[0] <= 0 or frame.size[1] <= 0:
            return None
        if frame == self.last_frame:
            return None
        self.last_frame = frame
        self.last_command = build_paint(frame)
        return self.last_command

    def paint(self, frame: CompositionFrame, surface) -> bool:
        command = self.compose(frame)
        if command is None:
            return False
        surface.paint(command)
        self.paint_count += 1
        return True

    def invalidate(self):
        self.last_frame = None
