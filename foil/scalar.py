from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Scalar:
    """Per-axis multiplier for pointer or roll data.

    Values above 1.0 exaggerate an axis, values in 0..1 damp it,
    0 removes it and negative values invert it. Nothing is clamped.
    """
    horizontal: float = 1.0
    vertical: float = 1.0

    @classmethod
    def xy(cls, x: float, y: Optional[float] = None) -> 'Scalar':
        return cls(horizontal=x, vertical=x if y is None else y)

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return x * self.horizontal, y * self.vertical


Scalar.IDENTITY = Scalar(1.0, 1.0)
