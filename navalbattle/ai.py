"""Computer opponents: ship placement and shot selection."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Protocol

from navalbattle.coord import Coord, Direction
from navalbattle.element import ElementType, HitType

ShipFactory = Callable[[int, Direction, Coord], Any]

_RANDOM_ATTEMPTS = 10000
_DIAGONAL_ATTEMPTS = 50
_DIRECTIONS = (Coord(1, 0), Coord(0, 1), Coord(-1, 0), Coord(0, -1))


class SeaLike(Protocol):
    """What the computer players need from the game's sea."""

    size: Coord
    turn: Any

    @property
    def playing(self) -> bool: ...

    def opponent(self, player: Any) -> Any: ...

    def at(self, player: Any, pos: Coord) -> Any: ...

    def valid(self, player: Any, pos: Coord) -> bool: ...

    def can_hit(self, player: Any, pos: Coord) -> bool: ...

    def can_add_ship(
        self, player: Any, pos: Coord, size: int, direction: Direction
    ) -> bool: ...

    def can_add_ship_of_size(self, player: Any, size: int) -> bool: ...

    def add(self, player: Any, ship: Any) -> None: ...


class ShipsConfiguration(Protocol):
    """How many ships of each size a fleet has."""

    @property
    def longest_ship(self) -> int: ...

    def number_of_ships_of_size(self, size: int) -> int: ...


class PlacementError(RuntimeError):
    """The fleet cannot be placed on the board."""


class AI(ABC):
    """Base of computer players."""

    def __init__(
        self,
        player: Any,
        sea: SeaLike,
        config: ShipsConfiguration,
        *,
        ship_factory: Optional[ShipFactory] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.player = player
        self.sea = sea
        self.config = config
        self.ship_factory = ship_factory
        self.rng = rng if rng is not None else random.Random()

    @abstractmethod
    def get_move(self) -> Coord:
        """The square to shoot at next."""

    @abstractmethod
    def notify(self, player: Any, coord: Coord, info: Any) -> None:
        """Learn the outcome of a shot."""

    def set_ships(self) -> None:
        """Place the whole fleet at random, biggest ships first."""
        if self.ship_factory is None:
            raise PlacementError("no ship factory to build ships with")
        width, height = self.sea.size.x, self.sea.size.y
        for size in range(self.config.longest_ship, 0, -1):
            for _ in range(self.config.number_of_ships_of_size(size)):
                while True:
                    c = Coord(self.rng.randrange(width), self.rng.randrange(height))
                    direction = (
                        Direction.LEFT_TO_RIGHT
                        if self.rng.randrange(2) == 0
                        else Direction.TOP_DOWN
                    )
                    if self.sea.can_add_ship(self.player, c, size, direction):
                        self.sea.add(self.player, self.ship_factory(size, direction, c))
                        break
                    if not self.sea.can_add_ship_of_size(self.player, size):
                        raise PlacementError(
                            f"no room left for a ship of size {size}"
                        )

    def desperate_move(self) -> Coord:
        """The first square of the opponent's board not yet shot at."""
        opp = self.sea.opponent(self.player)
        for i in range(self.sea.size.x):
            for j in range(self.sea.size.y):
                if self.sea.at(opp, Coord(i, j)).free():
                    return Coord(i, j)
        return Coord.invalid()


class DummyAI(AI):
    """Shoots at random squares."""

    def get_move(self) -> Coord:
        if self.sea.turn == self.player and self.sea.playing:
            for _ in range(_RANDOM_ATTEMPTS):
                c = Coord(
                    self.rng.randrange(self.sea.size.x),
                    self.rng.randrange(self.sea.size.y),
                )
                if self.sea.can_hit(self.player, c):
                    return c
        return self.desperate_move()

    def notify(self, player: Any, coord: Coord, info: Any) -> None:
        pass


class SmartAIState:
    """Ships of the opponent still afloat, by size, and the strategy choice."""

    def __init__(
        self,
        random_strategy: bool,
        config: ShipsConfiguration,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.random = random_strategy
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.ships: dict[int, int] = {
            i: config.number_of_ships_of_size(i + 1)
            for i in range(config.longest_ship)
        }

    def default_strategy(self, player: Any, sea: SeaLike) -> Strategy:
        """Strategy for searching ships when none is being chased."""
        if self.random:
            return RandomStrategy(player, sea, self)
        for i in range(self.config.longest_ship - 1, -1, -1):
            if self.ships.get(i, 0) > 0 or i == 0:
                return DiagonalStrategy(player, sea, self, i + 1)
        raise ValueError("the fleet configuration has no ships")

    def destroyed(self, size: int) -> None:
        """Record that a ship of the given size was sunk."""
        if size <= self.config.longest_ship:
            index = size - 1
            if self.ships.get(index, 0) > 0:
                self.ships[index] -= 1


class Strategy(ABC):
    """A way of choosing shots; may hand over to another strategy."""

    def __init__(self, player: Any, sea: SeaLike, state: SmartAIState) -> None:
        self.player = player
        self.sea = sea
        self.state = state

    @abstractmethod
    def get_move(self) -> Coord:
        """Next square to shoot at, or the invalid coordinate."""

    @abstractmethod
    def notify(self, coord: Coord, info: Any) -> Optional[Strategy]:
        """Learn a shot's outcome; return a replacement strategy, if any."""


class DestroyStrategy(Strategy):
    """Follows a line of hits until the ship under fire sinks."""

    def __init__(
        self, player: Any, sea: SeaLike, state: SmartAIState, begin: Coord
    ) -> None:
        super().__init__(player, sea, state)
        self.original = begin
        self.begin = begin
        self.end = begin
        self.direction = 0

    def _step(self) -> Coord:
        return _DIRECTIONS[min(self.direction, 3)]

    def _next_try(self) -> bool:
        if self.begin == self.end:
            self.direction += 1
            if self.direction > 3:
                return False
        elif self.direction > 1:
            # this line is exhausted: probably more than one ship was hit
            self.begin = self.original
            self.end = self.original
            self.direction -= 1
        else:
            self.direction += 2
            self.begin, self.end = self.end, self.begin
        return True

    def get_move(self) -> Coord:
        opp = self.sea.opponent(self.player)
        while True:
            c = self.end + self._step()
            while (
                self.sea.valid(opp, c)
                and self.sea.at(opp, c).type is ElementType.DEAD
            ):
                c = c + self._step()
            if self.sea.valid(opp, c) and self.sea.can_hit(self.player, c):
                return c
            if not self._next_try():
                return Coord.invalid()

    def notify(self, coord: Coord, info: Any) -> Optional[Strategy]:
        if info.ship_destroyed is not None:
            self.state.destroyed(info.ship_destroyed.size)
            return self.state.default_strategy(self.player, self.sea)
        if info.type is HitType.HIT:
            self.end = coord
        elif not self._next_try():
            return self.state.default_strategy(self.player, self.sea)
        return None


def _chase_on_hit(strategy: Strategy, coord: Coord, info: Any) -> Optional[Strategy]:
    if info.type is HitType.HIT and info.ship_destroyed is None:
        return DestroyStrategy(strategy.player, strategy.sea, strategy.state, coord)
    return None


class RandomStrategy(Strategy):
    """Shoots at random until something is hit."""

    def get_move(self) -> Coord:
        rng = self.state.rng
        for _ in range(_RANDOM_ATTEMPTS):
            c = Coord(rng.randrange(self.sea.size.x), rng.randrange(self.sea.size.y))
            if self.sea.can_hit(self.player, c):
                return c
        return Coord.invalid()

    def notify(self, coord: Coord, info: Any) -> Optional[Strategy]:
        return _chase_on_hit(self, coord, info)


class DiagonalStrategy(Strategy):
    """Shoots along diagonals spaced by the size of the longest ship left."""

    def __init__(
        self, player: Any, sea: SeaLike, state: SmartAIState, gap: int
    ) -> None:
        super().__init__(player, sea, state)
        self.gap = gap
        self.offset = 0
        self.range = 0
        self._setup()

    def _moves_available(self) -> bool:
        opp = self.sea.opponent(self.player)
        return any(
            (j - i - self.offset) % self.gap == 0
            and self.sea.at(opp, Coord(i, j)).free()
            for i in range(self.sea.size.x)
            for j in range(self.sea.size.y)
        )

    def _diagonals(self) -> list[tuple[Coord, int]]:
        """Start and length of each diagonal, in a fixed order."""
        width, height = self.sea.size.x, self.sea.size.y
        diagonals = [
            (Coord(0, y), min(height - y, width))
            for y in range(self.offset, height, self.gap)
        ]
        diagonals += [
            (Coord(x, 0), min(width - x, height))
            for x in range(self.gap - self.offset, width, self.gap)
        ]
        return diagonals

    def _setup(self) -> None:
        while True:
            self.offset = self.state.rng.randrange(self.gap)
            if self._moves_available():
                break
        self.range = sum(length for _, length in self._diagonals())

    def _random_square(self) -> Coord:
        index = self.state.rng.randrange(self.range)
        current = 0
        for start, length in self._diagonals():
            if index < current + length:
                k = index - current
                return start + Coord(k, k)
            current += length
        return Coord.invalid()

    def get_move(self) -> Coord:
        if not self._moves_available():
            self._setup()
        for _ in range(_DIAGONAL_ATTEMPTS):
            c = self._random_square()
            if self.sea.can_hit(self.player, c):
                return c
        return Coord.invalid()

    def notify(self, coord: Coord, info: Any) -> Optional[Strategy]:
        return _chase_on_hit(self, coord, info)


class SmartAI(AI):
    """Searches for ships, then chases down every ship it hits."""

    def __init__(
        self,
        player: Any,
        sea: SeaLike,
        random_strategy: bool,
        config: ShipsConfiguration,
        *,
        ship_factory: Optional[ShipFactory] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(player, sea, config, ship_factory=ship_factory, rng=rng)
        self.state = SmartAIState(random_strategy, config, self.rng)
        self.strategy: Strategy = self.state.default_strategy(player, sea)

    def get_move(self) -> Coord:
        if self.sea.turn == self.player and self.sea.playing:
            move = self.strategy.get_move()
            if move != Coord.invalid():
                return move
        return self.desperate_move()

    def notify(self, player: Any, coord: Coord, info: Any) -> None:
        if player == self.player:
            new_strategy = self.strategy.notify(coord, info)
            if new_strategy is not None:
                self.strategy = new_strategy