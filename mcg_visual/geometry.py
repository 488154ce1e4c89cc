"""Small two-dimensional geometry types used for laying out cards."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A point or an extent in screen coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        if isinstance(factor, Vec2):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min: Vec2
    max: Vec2

    @classmethod
    def from_min_size(cls, min_pos: Vec2, size: Vec2) -> Rect:
        return cls(min_pos, min_pos + size)

    def contains(self, point: Vec2) -> bool:
        """Whether the point lies inside the rectangle, edges included."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def left(self) -> float:
        return self.min.x

    def right(self) -> float:
        return self.max.x

    def top(self) -> float:
        return self.min.y

    def bottom(self) -> float:
        return self.max.y

    @property
    def size(self) -> Vec2:
        return self.max - self.min