"""
Roll: the shared oscillator behind a group of foils.

A Roll owns one Crinkle-driven value that runs from `min` to `max` every
`period` seconds. Foils hold a reference to the Roll and listen to it; only
the owner starts, stops, reconfigures or disposes it.

  reverse=False: sawtooth, restarts at min every period
  reverse=True:  triangle, min -> max -> min over one period
"""
from typing import Callable, Optional

from animation.clock import FrameClock
from foil.crinkle import Crinkle, SMOOTH


RollListener = Callable[[float], None]


def oscillate(elapsed: float, crinkle: Crinkle) -> float:
    phase = (elapsed % crinkle.period) / crinkle.period
    if crinkle.reverse:
        phase = 1.0 - abs(2.0 * phase - 1.0)
    return crinkle.min + crinkle.span * phase


class Roll:
    def __init__(self, crinkle: Crinkle = SMOOTH, clock: Optional[FrameClock] = None,
                 gradient=None, autostart: bool = True):
        self.crinkle = crinkle
        self.gradient = gradient
        self._clock = clock
        self._listeners: list[RollListener] = []
        self._elapsed = 0.0
        self._value = 0.0
        self._running = False
        self._disposed = False

        # Held from construction to dispose so the roll ticks before any foil
        # subscribed after it, whatever the crinkle.
        if clock is not None:
            clock.subscribe(self.tick)
        if autostart:
            self.start()

    # -- shared-scope data read by foils --------------------------------

    @property
    def is_animated(self) -> bool:
        return self.crinkle.is_animated

    @property
    def scalar(self):
        return self.crinkle.scalar

    @property
    def transform(self):
        return self.crinkle.transform

    @property
    def value(self) -> float:
        return self._value

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def rollout(self) -> tuple[float, float]:
        """(x, y) contribution for foils: value scaled per axis, or zeros when static."""
        if not self.is_animated or self._disposed:
            return 0.0, 0.0
        return self.crinkle.scalar.apply(self._value, self._value)

    def value_at(self, elapsed: float) -> float:
        return oscillate(elapsed, self.crinkle)

    # -- listeners ------------------------------------------------------

    def add_listener(self, listener: RollListener):
        if self._disposed:
            return
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: RollListener):
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _notify(self):
        value = self._value
        for listener in list(self._listeners):
            if self._disposed:
                return
            listener(value)

    # -- lifecycle ------------------------------------------------------

    def start(self):
        if self._disposed:
            raise RuntimeError("Roll has been disposed")
        if self._running or not self.crinkle.is_animated:
            return
        self._running = True
        self._value = self.value_at(self._elapsed)

    def stop(self):
        if not self._running:
            return
        self._running = False

    def reconfigure(self, crinkle: Crinkle):
        if self._disposed:
            raise RuntimeError("Roll has been disposed")
        if crinkle == self.crinkle:
            return
        self.crinkle = crinkle
        self._elapsed = 0.0
        if crinkle.is_animated:
            self._value = self.value_at(0.0)
            self.start()
        else:
            self._value = 0.0
            self.stop()
        self._notify()

    def dispose(self):
        if self._disposed:
            return
        self.stop()
        if self._clock is not None:
            self._clock.unsubscribe(self.tick)
        self._listeners.clear()
        self._disposed = True

    def tick(self, dt: float):
        if not self._running or self._disposed:
            return
        self._elapsed += dt
        self._value = self.value_at(self._elapsed)
        self._notify()
