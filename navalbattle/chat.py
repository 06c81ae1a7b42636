"""Chat box state: the transcript, the input line and its history."""

from __future__ import annotations

from typing import Callable


class ChatBox:
    """Chat transcript with an input line whose history is browsed with up/down.

    Callables in ``listeners`` receive each line the local player sends.
    """

    size_hint = (100, 100)

    def __init__(self, nick: str = "") -> None:
        self.nick = nick
        self.input = ""
        self.lines: list[str] = []
        self.visible = False
        self.listeners: list[Callable[[str], None]] = []
        self._history: list[str] = [""]
        self._current = 0

    @property
    def history(self) -> list[str]:
        return list(self._history)

    def _set_history_text(self, index: int) -> None:
        self._history[self._current] = self.input
        self._current = index
        self.input = self._history[self._current]

    def key_up(self) -> None:
        """Show the previous history entry in the input line."""
        if self._current > 0:
            self._set_history_text(self._current - 1)

    def key_down(self) -> None:
        """Show the next history entry in the input line."""
        if self._current < len(self._history) - 1:
            self._set_history_text(self._current + 1)

    def send_line(self) -> None:
        """Send the input line: record it, show it and notify listeners."""
        text = self.input
        self._history.append("")
        self._set_history_text(len(self._history) - 1)
        self.display_message(self.nick, text)
        for listener in list(self.listeners):
            listener(text)

    def display_message(self, nick: str, text: str) -> None:
        self.display(f"<{nick}> {text}")

    def display(self, text: str) -> None:
        """Append a line to the transcript when the chat is shown."""
        if self.visible:
            self.lines.append(text)

    def bind(self, callback: Callable[[str], None]) -> None:
        """Send lines to callback, clear the transcript and show the chat."""
        self.listeners.append(callback)
        self.lines.clear()
        self.visible = True