"""Board coordinates and ship directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Coord:
    """A position on the board; (-1, -1) marks an invalid position."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Coord) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coord) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x - other.x, self.y - other.y)

    def __mul__(self, n: int) -> Coord:
        if not isinstance(n, int):
            return NotImplemented
        return Coord(self.x * n, self.y * n)

    __rmul__ = __mul__

    def valid(self) -> bool:
        return self.x != -1 and self.y != -1

    @classmethod
    def invalid(cls) -> Coord:
        return cls(-1, -1)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class Direction(Enum):
    """Orientation of a ship on the board."""

    LEFT_TO_RIGHT = 0
    TOP_DOWN = 1

    def increment(self) -> Coord:
        """Step from one ship cell to the next."""
        return Coord(1, 0) if self is Direction.LEFT_TO_RIGHT else Coord(0, 1)

    def decrement(self) -> Coord:
        return Coord() - self.increment()

    def increment_perpendicular(self) -> Coord:
        return Coord(0, 1) if self is Direction.LEFT_TO_RIGHT else Coord(1, 0)

    def decrement_perpendicular(self) -> Coord:
        return Coord() - self.increment_perpendicular()