"""
Foil: one shimmering surface.

Wires a PointerTracker, an optional shared Roll, the two-stage FoilAnimation
and a FoilCompositor together:

    pointer events -> tracker -> pointer channels --\
    roll value * crinkle.scalar -> roll channels -----> compositor -> surface
    gradient (own / roll's / default) -> gradient channel -/

The Roll is passed in rather than looked up; without one the foil reacts to
the pointer only. dispose() detaches from the roll and the clock at once.
"""
from typing import Callable, Optional

from animation.clock import FrameClock
from animation.easing import Curve, linear
from animation.pipeline import FoilAnimation
from animation.roll import Roll
from foil.foils import LINEAR_LOOPING
from foil.geometry import TextDirection
from foil.pointer_tracker import PointerTracker, PointerEvent
from foil.scalar import Scalar
from visualization.blend import BlendMode
from visualization.compositor import CompositionFrame, FoilCompositor, PaintCommand


class Foil:
    def __init__(self, gradient=None, roll: Optional[Roll] = None,
                 clock: Optional[FrameClock] = None,
                 scalar: Scalar = Scalar.IDENTITY,
                 opacity: float = 1.0,
                 unwrapped: bool = False,
                 unwrapped_gradient=None,
                 blend_mode: BlendMode = BlendMode.SRC_ATOP,
                 use_sensor: bool = True,
                 aggressive: bool = False,
                 duration: float = 0.5,
                 speed: float = 0.15,
                 curve: Curve = linear,
                 use_relative_position: bool = True,
                 on_end: Optional[Callable[[], None]] = None):
        self.gradient = gradient
        self.roll = roll
        self.opacity = opacity
        self.unwrapped = unwrapped
        self.unwrapped_gradient = unwrapped_gradient
        self.blend_mode = blend_mode
        self.use_sensor = use_sensor

        self.size: Optional[tuple[float, float]] = None
        self.normalized_x = 0.0
        self.normalized_y = 0.0
        self.roll_x = 0.0
        self.roll_y = 0.0

        self.tracker = PointerTracker(
            on_position_change=self._on_position_change,
            size_fn=lambda: self.size,
            scalar=scalar,
            disabled=unwrapped,
            use_relative_position=use_relative_position,
        )
        if roll is not None:
            self._on_roll_change(roll.value)
        self.animation = FoilAnimation(self.effective_gradient(), duration, speed,
                                       curve, aggressive, on_end,
                                       rollout_x=(self.roll_x, 0.0),
                                       rollout_y=(self.roll_y, 0.0))
        self.compositor = FoilCompositor()

        self._clock = clock
        self._disposed = False
        if roll is not None:
            roll.add_listener(self._on_roll_change)
        if clock is not None:
            clock.subscribe(self.tick)

    # -- inputs -----------------------------------------------------------

    def effective_gradient(self):
        gradient = self.gradient
        if gradient is None and self.roll is not None:
            gradient = self.roll.gradient
        if gradient is None:
            gradient = LINEAR_LOOPING
        if self.unwrapped:
            return self.unwrapped_gradient or gradient.as_nill()
        return gradient.scale(self.opacity)

    def set_unwrapped(self, unwrapped: bool):
        self.unwrapped = unwrapped
        self.tracker.disabled = unwrapped

    def _on_position_change(self, x: float, y: float):
        self.normalized_x = x
        self.normalized_y = y

    def _on_roll_change(self, value: float):
        if self.unwrapped or self.roll is None:
            return
        self.roll_x, self.roll_y = self.roll.rollout()

    def pointer_down(self, x: float, y: float):
        if not self._disposed:
            self.tracker.pointer_down(x, y)

    def pointer_move(self, x: float, y: float):
        if not self._disposed:
            self.tracker.pointer_move(x, y)

    def pointer_up(self, x: float = 0.0, y: float = 0.0):
        if not self._disposed:
            self.tracker.pointer_up(x, y)

    def pointer_hover(self, x: float, y: float):
        if not self._disposed:
            self.tracker.pointer_hover(x, y)

    def handle(self, event: PointerEvent):
        if not self._disposed:
            self.tracker.handle(event)

    def layout(self, width: float, height: float):
        self.size = (float(width), float(height))

    # -- per frame --------------------------------------------------------

    def tick(self, dt: float):
        if self._disposed:
            return
        if self.roll is not None:
            self._on_roll_change(self.roll.value)
        self.animation.update(
            self.effective_gradient(),
            (self.roll_x, self.normalized_x),
            (self.roll_y, self.normalized_y),
        )
        self.animation.tick(dt)

    def composition(self, direction: Optional[TextDirection] = None) -> Optional[CompositionFrame]:
        if self.size is None:
            return None
        gradient, rollout_x, rollout_y = self.animation.values()
        return CompositionFrame(
            gradient=gradient,
            rollout_x=rollout_x,
            rollout_y=rollout_y,
            blend_mode=self.blend_mode,
            use_sensor=self.use_sensor,
            size=self.size,
            transform=self.roll.transform if self.roll is not None else None,
            direction=direction,
        )

    def frame(self, size: Optional[tuple[float, float]] = None,
              direction: Optional[TextDirection] = None) -> Optional[PaintCommand]:
        """The paint command for this frame, or None if nothing changed."""
        if self._disposed:
            return None
        if size is not None:
            self.layout(*size)
        frame = self.composition(direction)
        if frame is None:
            return None
        return self.compositor.compose(frame)

    def paint(self, surface) -> bool:
        if self._disposed:
            return False
        self.layout(*surface.size)
        frame = self.composition(getattr(surface, 'direction', None))
        return self.compositor.paint(frame, surface)

    # -- lifecycle --------------------------------------------------------

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self):
        if self._disposed:
            return
        self._disposed = True
        if self.roll is not None:
            self.roll.remove_listener(self._on_roll_change)
        if self._clock is not None:
            self._clock.unsubscribe(self.tick)
