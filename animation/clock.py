from typing import Callable


TickCallback = Callable[[float], None]


class FrameClock:
    """Per-frame tick source shared by every animation in a window.

    Subscribers receive the frame delta (seconds) in registration order.
    A subscriber removed during a tick is not called for the rest of it.
    """

    def __init__(self):
        self._subscribers: list[TickCallback] = []
        self.elapsed: float = 0.0
        self.frame: int = 0

    def subscribe(self, cb: TickCallback):
        if cb not in self._subscribers:
            self._subscribers.append(cb)

    def unsubscribe(self, cb: TickCallback):
        try:
            self._subscribers.remove(cb)
        except ValueError:
            pass

    def is_subscribed(self, cb: TickCallback) -> bool:
        return cb in self._subscribers

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def tick(self, dt: float):
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        self.elapsed += dt
        self.frame += 1
        for cb in list(self._subscribers):
            if cb in self._subscribers:
                cb(dt)
