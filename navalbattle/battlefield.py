"""One player's board: ship placement, shots and bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional, Protocol

from navalbattle.coord import Coord, Direction
from navalbattle.element import Element, ElementType, HitType


class _ShipLike(Protocol):
    position: Coord
    size: int
    direction: Direction

    @property
    def alive(self) -> bool: ...

    def dec_life(self) -> None: ...


@dataclass
class HitInfo:
    """Result of a shot; names the ship if the shot sank it."""

    type: HitType
    ship_destroyed: Optional[Any] = None
    ship_pos: Coord = field(default_factory=Coord.invalid)


class BattleField:
    """A grid of elements with the ships placed on it."""

    def __init__(self, size: Coord, allow_adjacent_ships: bool) -> None:
        self.size = size
        self.allow_adjacent_ships = allow_adjacent_ships
        self._board: dict[Coord, Element] = {
            Coord(x, y): Element()
            for y in range(size.y)
            for x in range(size.x)
        }
        # squares taken by ships, plus their borders when ships may not touch
        self._occupied: set[Coord] = set()
        self._ships = 0

    @property
    def ships(self) -> int:
        """Number of ships still afloat."""
        return self._ships

    def valid(self, pos: Coord) -> bool:
        return 0 <= pos.x < self.size.x and 0 <= pos.y < self.size.y

    def get(self, pos: Coord) -> Element:
        try:
            return self._board[pos]
        except KeyError:
            raise IndexError(f"position {pos} is outside the board") from None

    def set(self, pos: Coord, element: Element) -> None:
        """Replace the element at pos; positions off the board are ignored."""
        if self.valid(pos):
            self._board[pos] = element

    def add_count(self, n: int) -> None:
        self._ships += n

    def add_ship(self, ship: _ShipLike) -> None:
        for p in self._ship_cells(ship.position, ship.size, ship.direction):
            self.set(p, Element(ElementType.ALIVE, ship))
        self._ships += 1
        self._occupied.update(
            p for p in self._ship_cells(ship.position, ship.size, ship.direction)
        )
        if not self.allow_adjacent_ships:
            self._occupied.update(
                p
                for p in self._ring(ship.position, ship.size, ship.direction)
                if self.valid(p)
            )

    def add_border(self, pos: Coord) -> None:
        """Mark the squares around the ship at pos as border."""
        ship = self.get(pos).parent
        if ship is None:
            return
        for p in self._ring(pos, ship.size, ship.direction):
            self.set(p, Element(ElementType.BORDER))

    def can_add_ship(self, pos: Coord, size: int, direction: Direction) -> bool:
        inc = direction.increment()
        if not all(self.valid(p) for p in self._ship_cells(pos, size, direction)):
            return False
        if self.allow_adjacent_ships:
            starts = [pos]
            length = size
        else:
            before = pos + direction.decrement()
            starts = [
                before + direction.decrement_perpendicular(),
                before,
                before + direction.increment_perpendicular(),
            ]
            length = size + 2
        for start in starts:
            for i in range(length):
                p = start + inc * i
                if self.valid(p) and not self.get(p).water():
                    return False
        return True

    def can_add_ship_of_size(self, size: int) -> bool:
        """True if some free straight run of the given length remains."""
        rows = (
            (Coord(x, y) for x in range(self.size.x)) for y in range(self.size.y)
        )
        columns = (
            (Coord(x, y) for y in range(self.size.y)) for x in range(self.size.x)
        )
        return self._has_run(rows, size) or self._has_run(columns, size)

    def hit(self, pos: Coord) -> HitInfo:
        element = self.get(pos)
        result = HitInfo(element.hit())
        ship = element.parent
        if ship is not None and not ship.alive:
            self._ships -= 1
            result.ship_destroyed = ship
            result.ship_pos = self.find(ship)
        return result

    def force_hit(self, pos: Coord, info: HitInfo) -> None:
        """Record a shot whose outcome is already known."""
        if info.type is HitType.HIT:
            self.get(pos).type = ElementType.DEAD
            ship = info.ship_destroyed
            if ship is not None:
                for c in self._ship_cells(info.ship_pos, ship.size, ship.direction):
                    self.get(c).parent = ship
                self._ships -= 1
        elif info.type is HitType.MISS:
            self.get(pos).type = ElementType.MISS

    def find(self, ship: Any) -> Coord:
        """First square occupied by ship, or the invalid coordinate."""
        return next(
            (p for p, e in self._board.items() if e.parent is ship),
            Coord.invalid(),
        )

    def is_near_ship(self, pos: Coord) -> bool:
        return any(
            self.valid(p) and self.get(p).parent is not None
            for p in (pos + Coord(i, j) for i in (-1, 0, 1) for j in (-1, 0, 1))
        )

    def clear(self) -> None:
        """Empty the board so ships can be placed again."""
        self._occupied.clear()
        for element in self._board.values():
            element.type = ElementType.WATER
            element.parent = None
        self._ships = 0

    @staticmethod
    def _ship_cells(pos: Coord, size: int, direction: Direction) -> Iterator[Coord]:
        inc = direction.increment()
        return (pos + inc * i for i in range(size))

    @staticmethod
    def _ring(pos: Coord, size: int, direction: Direction) -> Iterator[Coord]:
        """Squares surrounding a ship, including the corners."""
        inc = direction.increment()
        orth = Coord(inc.y, inc.x)
        yield pos - inc
        for i in range(-1, size + 1):
            p = pos + inc * i
            yield p + orth
            yield p - orth
        yield pos + inc * size

    def _has_run(self, lines: Iterable[Iterable[Coord]], size: int) -> bool:
        for line in lines:
            run = 0
            for p in line:
                if p in self._occupied:
                    run = 0
                else:
                    run += 1
                    if run >= size:
                        return True
        return False