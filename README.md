# navalbattle

The game logic behind a two-player naval battle (battleship) game, with no
user interface attached. It has no dependencies beyond the standard library.

## Modules

- `navalbattle.coord`: `Coord`, a board position (`Coord.invalid()` is
  `(-1, -1)`), and `Direction` (`LEFT_TO_RIGHT`, `TOP_DOWN`) with the steps
  along and across a ship (`increment`, `decrement`,
  `increment_perpendicular`, `decrement_perpendicular`).
- `navalbattle.element`: `Element`, the state of one board square
  (`ElementType`: `ALIVE`, `DEAD`, `MISS`, `BORDER`, `WATER`), and `HitType`,
  the outcome of a shot (`HIT`, `MISS`, `INVALID`).
- `navalbattle.battlefield`: `BattleField`, one player's board. It places
  ships (`add_ship`), checks whether a ship fits (`can_add_ship`,
  `can_add_ship_of_size`, honouring `allow_adjacent_ships`), resolves shots
  into `HitInfo` (`hit`, `force_hit`), finds ships (`find`, `is_near_ship`),
  marks borders around a ship (`add_border`) and counts the ships afloat
  (`ships`).
- `navalbattle.ai`: computer opponents. `DummyAI` shoots at random squares;
  `SmartAI` hunts with a `RandomStrategy` or a `DiagonalStrategy` and, after a
  hit, follows the line of hits with a `DestroyStrategy`. `AI.set_ships`
  places a fleet at random, biggest ships first, and raises `PlacementError`
  when no room is left. All of them accept an optional `random.Random`.
- `navalbattle.message`: the messages exchanged between two networked players
  (`HeaderMessage`, `RejectMessage`, `NickMessage`, `BeginMessage`,
  `MoveMessage`, `NotificationMessage`, `GameOverMessage` with `ShipInfo`,
  `RestartMessage`, `ChatMessage`, `GameOptionsMessage`), each with its
  `MSGTYPE` and `message_type`, and `MessageVisitor` for dispatching on them
  through `Message.accept`.
- `navalbattle.animation`: time-stepped animations (`FadeAnimation` on a
  sprite's `opacity`, `MovementAnimation` on its `pos`, `AnimationGroup`) and
  `Animator`, which drives a group from a clock. The caller's event loop calls
  `Animator.tick()` while `Animator.active` is true.
- `navalbattle.button`: `Button`, the size, press and hover state and
  brightness of a menu button, with `ButtonAnimation` fading the brightness
  towards its target.
- `navalbattle.chat`: `ChatBox`, a chat transcript with an input line whose
  history is browsed with `key_up` and `key_down`.
- `navalbattle.renderer`: `Renderer`, which converts between board
  coordinates and pixel positions for a given square size.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

`BattleField` works with any ship object that has `position`, `size`,
`direction`, an `alive` property and a `dec_life()` method:

```python
from dataclasses import dataclass, field

from navalbattle.battlefield import BattleField
from navalbattle.coord import Coord, Direction
from navalbattle.element import HitType


@dataclass
class Ship:
    size: int
    direction: Direction
    position: Coord
    life: int = field(init=False)

    def __post_init__(self):
        self.life = self.size

    @property
    def alive(self):
        return self.life > 0

    def dec_life(self):
        self.life -= 1


board = BattleField(Coord(10, 10), allow_adjacent_ships=False)
ship = Ship(2, Direction.LEFT_TO_RIGHT, Coord(0, 0))
board.can_add_ship(Coord(0, 0), 2, Direction.LEFT_TO_RIGHT)  # True
board.add_ship(ship)

board.hit(Coord(0, 0)).type       # HitType.HIT
info = board.hit(Coord(1, 0))
info.ship_destroyed is ship       # True
info.ship_pos                     # Coord(x=0, y=0)
board.ships                       # 0
```

## What the package does not do

- It has no command, window or screen; drawing, sound and input handling are
  left to the program that uses it.
- It provides no ship class, no fleet configuration and no sea holding both
  players' boards. The computer players in `navalbattle.ai` expect a sea and
  a configuration matching the `SeaLike` and `ShipsConfiguration` protocols,
  and `AI.set_ships` needs a `ship_factory` to build ships.
- It does not open network connections or encode messages for the wire;
  `navalbattle.message` only defines the messages themselves.
- It keeps no settings, scores or statistics.