"""Scripted transport that replays a fixed list of lines."""

from typing import Iterable, Optional

from guessing_game.events import MessageKind


class ScriptedTransport:
    """Feeds predetermined lines to a session and records its output.

    Once the lines run out, read_line reports end of input, or raises
    ``error`` if one was given.
    """

    def __init__(self, lines: Iterable[str], error: Optional[OSError] = None):
        self._lines = list(lines)
        self._error = error
        self._position = 0
        self.written: list[tuple[str, MessageKind]] = []

    @property
    def remaining(self) -> int:
        return len(self._lines) - self._position

    @property
    def output(self) -> list[str]:
        """Written text without message kinds."""
        return [text for text, _ in self.written]

    async def read_line(self) -> Optional[str]:
        if self._position >= len(self._lines):
            if self._error is not None:
                raise self._error
            return None
        line = self._lines[self._position]
        self._position += 1
        return line

    def write_line(self, text: str, kind: MessageKind = MessageKind.INFO) -> None:
        self.written.append((text, kind))
