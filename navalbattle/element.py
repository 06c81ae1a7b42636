"""A single square of a battle field."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol


class _ShipLike(Protocol):
    def dec_life(self) -> None: ...


class ElementType(Enum):
    ALIVE = 0
    DEAD = 1
    MISS = 2
    BORDER = 3
    WATER = 4


class HitType(Enum):
    """Outcome of shooting at a square."""

    HIT = 0
    MISS = 1
    INVALID = 2


@dataclass
class Element:
    """A square: its state and the ship occupying it, if any."""

    type: ElementType = ElementType.WATER
    parent: Optional[Any] = None

    def free(self) -> bool:
        """True if the square has not been shot at."""
        return self.type in (ElementType.ALIVE, ElementType.WATER)

    def water(self) -> bool:
        return self.type is ElementType.WATER

    def hit(self) -> HitType:
        """Shoot at this square and report the outcome."""
        if self.type is ElementType.ALIVE:
            self.type = ElementType.DEAD
            ship: _ShipLike = self.parent
            ship.dec_life()
            return HitType.HIT
        if self.type is ElementType.WATER:
            self.type = ElementType.MISS
            return HitType.MISS
        return HitType.INVALID