"""Console transport for human players.

Uses rich to print styled messages and read guesses from the terminal.
"""

from typing import Optional
from rich.console import Console

from guessing_game.events import MessageKind

# Style per message kind (None keeps the terminal default)
MESSAGE_STYLES: dict[MessageKind, Optional[str]] = {
    MessageKind.INFO: None,
    MessageKind.PROMPT: "bold",
    MessageKind.HINT: "cyan",
    MessageKind.ERROR: "red",
    MessageKind.WIN: "bold green",
}


class ConsoleTransport:
    """Line source and sink backed by a rich Console.

    Usage:
        transport = ConsoleTransport()
        game = GuessingGame(source=transport, sink=transport)
    """

    def __init__(self, console: Optional[Console] = None):
        """Initialize the transport.

        Args:
            console: Rich Console instance. Creates one if None.
        """
        self._console = console or Console()

    @property
    def console(self) -> Console:
        return self._console

    async def read_line(self) -> Optional[str]:
        """Read one line from the terminal. Ctrl-D and Ctrl-C end the input."""
        try:
            return self._console.input()
        except (KeyboardInterrupt, EOFError):
            return None

    def write_line(self, text: str, kind: MessageKind = MessageKind.INFO) -> None:
        self._console.print(text, style=MESSAGE_STYLES.get(kind), markup=False, highlight=False)
