"""Messages exchanged between players over the network protocol."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar

from navalbattle.coord import Coord, Direction


class Message:
    """Base of all protocol messages."""

    MSGTYPE: ClassVar[int]
    message_type: ClassVar[str]
    _visit: ClassVar[str]

    def accept(self, visitor: MessageVisitor) -> Any:
        """Dispatch to the visitor method for this kind of message."""
        return getattr(visitor, self._visit)(self)


@dataclass
class HeaderMessage(Message):
    MSGTYPE: ClassVar[int] = 0
    message_type: ClassVar[str] = "Header"
    _visit: ClassVar[str] = "visit_header"

    protocol_version: str = "0.1.0"
    client_name: str = "KBattleship"
    client_version: str = "4.0"
    client_description: str = "The Naval Battle game"


@dataclass
class RejectMessage(Message):
    MSGTYPE: ClassVar[int] = 1
    message_type: ClassVar[str] = "Reject"
    _visit: ClassVar[str] = "visit_reject"

    version_mismatch: bool
    reason: str


@dataclass
class NickMessage(Message):
    MSGTYPE: ClassVar[int] = 2
    message_type: ClassVar[str] = "Nick"
    _visit: ClassVar[str] = "visit_nick"

    nickname: str


@dataclass
class BeginMessage(Message):
    MSGTYPE: ClassVar[int] = 3
    message_type: ClassVar[str] = "Begin"
    _visit: ClassVar[str] = "visit_begin"


@dataclass
class MoveMessage(Message):
    MSGTYPE: ClassVar[int] = 4
    message_type: ClassVar[str] = "Move"
    _visit: ClassVar[str] = "visit_move"

    move: Coord


@dataclass
class NotificationMessage(Message):
    """The outcome of a move; start and stop span a sunk ship."""

    MSGTYPE: ClassVar[int] = 5
    message_type: ClassVar[str] = "Notification"
    _visit: ClassVar[str] = "visit_notification"

    move: Coord
    hit: bool
    death: bool
    start: Coord = field(default_factory=Coord.invalid)
    stop: Coord = field(default_factory=Coord.invalid)


@dataclass(frozen=True)
class ShipInfo:
    pos: Coord
    size: int
    direction: Direction


@dataclass
class GameOverMessage(Message):
    """End of game, revealing the sender's remaining ships."""

    MSGTYPE: ClassVar[int] = 6
    message_type: ClassVar[str] = "GameOver"
    _visit: ClassVar[str] = "visit_game_over"

    ships: list[ShipInfo] = field(default_factory=list)

    def add_ship(self, pos: Coord, size: int, direction: Direction) -> None:
        self.ships.append(ShipInfo(pos, size, direction))


@dataclass
class RestartMessage(Message):
    MSGTYPE: ClassVar[int] = 7
    message_type: ClassVar[str] = "Restart"
    _visit: ClassVar[str] = "visit_restart"


@dataclass
class ChatMessage(Message):
    MSGTYPE: ClassVar[int] = 8
    message_type: ClassVar[str] = "Chat"
    _visit: ClassVar[str] = "visit_chat"

    nickname: str
    chat: str


@dataclass
class GameOptionsMessage(Message):
    """Game options; flags travel as the strings "true" and "false".

    ``configuration`` is any object with ``board_width`` and ``board_height``.
    """

    MSGTYPE: ClassVar[int] = 9
    message_type: ClassVar[str] = "GameOptions"
    _visit: ClassVar[str] = "visit_game_options"

    enabled_adjacent_ships: str
    one_or_several_ships: str
    configuration: Any

    @classmethod
    def from_flags(
        cls, enable_adjacent_ships: bool, several_ships: bool, configuration: Any
    ) -> GameOptionsMessage:
        """Build the message from booleans, keeping a copy of the configuration."""
        return cls(
            "true" if enable_adjacent_ships else "false",
            "true" if several_ships else "false",
            copy.copy(configuration),
        )

    @property
    def grid_width(self) -> int:
        return self.configuration.board_width

    @property
    def grid_height(self) -> int:
        return self.configuration.board_height


class MessageVisitor(ABC):
    """Handles each kind of message."""

    @abstractmethod
    def visit_header(self, msg: HeaderMessage) -> Any: ...

    @abstractmethod
    def visit_reject(self, msg: RejectMessage) -> Any: ...

    @abstractmethod
    def visit_nick(self, msg: NickMessage) -> Any: ...

    @abstractmethod
    def visit_begin(self, msg: BeginMessage) -> Any: ...

    @abstractmethod
    def visit_move(self, msg: MoveMessage) -> Any: ...

    @abstractmethod
    def visit_notification(self, msg: NotificationMessage) -> Any: ...

    @abstractmethod
    def visit_game_over(self, msg: GameOverMessage) -> Any: ...

    @abstractmethod
    def visit_restart(self, msg: RestartMessage) -> Any: ...

    @abstractmethod
    def visit_chat(self, msg: ChatMessage) -> Any: ...

    @abstractmethod
    def visit_game_options(self, msg: GameOptionsMessage) -> Any: ...