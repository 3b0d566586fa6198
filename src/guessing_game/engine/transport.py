"""Line transport interfaces used by the session runner.

The runner never touches a terminal directly. It reads through a LineSource
and writes through a LineSink, so the console, the textual UI, the stub
guesser and test scripts are interchangeable.
"""

from typing import Optional, Protocol

from guessing_game.events import MessageKind


class LineSource(Protocol):
    """Supplies one line of player input at a time."""

    async def read_line(self) -> Optional[str]:
        """Return the next line, or None when no more input will arrive.

        May raise OSError if the underlying stream cannot be read.
        """
        ...


class LineSink(Protocol):
    """Receives the lines shown to the player."""

    def write_line(self, text: str, kind: MessageKind = MessageKind.INFO) -> None:
        """Show one line of text."""
        ...
