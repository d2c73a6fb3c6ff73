from dataclasses import dataclass
from enum import Enum


class TextDirection(Enum):
    LTR = 'ltr'
    RTL = 'rtl'


DEFAULT_DIRECTION = TextDirection.LTR


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @classmethod
    def from_ltwh(cls, left, top, width, height) -> 'Rect':
        return cls(float(left), float(top), float(width), float(height))

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.width / 2.0, self.top + self.height / 2.0)

    @property
    def shortest_side(self) -> float:
        return min(abs(self.width), abs(self.height))

    @property
    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0


@dataclass(frozen=True)
class Alignment:
    """A point in a rect where (-1, -1) is the top-left and (1, 1) the bottom-right.

    A directional alignment mirrors x for right-to-left text.
    """
    x: float
    y: float
    directional: bool = False

    def resolve(self, direction: TextDirection = DEFAULT_DIRECTION) -> 'Alignment':
        if self.directional and direction == TextDirection.RTL:
            return Alignment(-self.x, self.y)
        return Alignment(self.x, self.y)

    def within(self, rect: Rect, direction: TextDirection = DEFAULT_DIRECTION) -> tuple[float, float]:
        a = self.resolve(direction)
        cx, cy = rect.center
        return (cx + a.x * rect.width / 2.0, cy + a.y * rect.height / 2.0)

    def lerp(self, other: 'Alignment', t: float) -> 'Alignment':
        return Alignment(self.x + (other.x - self.x) * t,
                         self.y + (other.y - self.y) * t,
                         self.directional if t < 0.5 else other.directional)


TOP_LEFT = Alignment(-1.0, -1.0)
TOP_CENTER = Alignment(0.0, -1.0)
TOP_RIGHT = Alignment(1.0, -1.0)
CENTER_LEFT = Alignment(-1.0, 0.0)
CENTER = Alignment(0.0, 0.0)
CENTER_RIGHT = Alignment(1.0, 0.0)
BOTTOM_LEFT = Alignment(-1.0, 1.0)
BOTTOM_CENTER = Alignment(0.0, 1.0)
BOTTOM_RIGHT = Alignment(1.0, 1.0)

TOP_START = Alignment(-1.0, -1.0, directional=True)
TOP_END = Alignment(1.0, -1.0, directional=True)
BOTTOM_START = Alignment(-1.0, 1.0, directional=True)
BOTTOM_END = Alignment(1.0, 1.0, directional=True)
