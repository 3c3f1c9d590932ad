"""Geometric primitives for layout computation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen cells, with inclusive bounds.

    A rect of width or height 0 has ``x1 == x0 - 1`` (or ``y1 == y0 - 1``).
    Nothing is validated: a box given negative space gets a rect whose far
    edge lies before its origin.
    """

    x0: int
    y0: int
    x1: int
    y1: int

    @classmethod
    def from_origin(cls, x0: int, y0: int, width: int, height: int) -> Rect:
        return cls(x0, y0, x0 + width - 1, y0 + height - 1)

    @property
    def width(self) -> int:
        return self.x1 - self.x0 + 1

    @property
    def height(self) -> int:
        return self.y1 - self.y0 + 1

    @property
    def is_empty(self) -> bool:
        """True when the rect covers no cells."""
        return self.width <= 0 or self.height <= 0

    def contains(self, px: int, py: int) -> bool:
        return self.x0 <= px <= self.x1 and self.y0 <= py <= self.y1

    def to_dict(self) -> dict:
        return {"x0": self.x0, "y0": self.y0, "x1": self.x1, "y1": self.y1}
