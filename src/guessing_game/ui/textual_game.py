"""Textual-based full-screen UI for the guessing game.

A terminal UI with a persistent game log and an input box for guesses.
"""

import asyncio
from typing import Optional

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Input, RichLog, Static

from guessing_game.models import MIN_GUESS, MAX_GUESS, GameConfig, RoundOutcome
from guessing_game.engine import GuessingGame, TransportFailure
from guessing_game.events import (
    GameEvent,
    GameEventLog,
    GameStatus,
    MessageKind,
    READ_FAILURE,
    RoundEvent,
)
from .console import MESSAGE_STYLES


class TextualTransport:
    """Line source and sink bridging a GuessingGame to the Textual app."""

    def __init__(self, app: "GuessingGameUI"):
        self._app = app
        self._queue: asyncio.Queue[Optional[str]] = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, text: str) -> None:
        """Queue a line typed by the player."""
        if not self._closed:
            self._queue.put_nowait(text)

    def close(self) -> None:
        """Signal that no more input will arrive."""
        if not self._closed:
            self._closed = True
            self._queue.put_nowait(None)

    async def read_line(self) -> Optional[str]:
        return await self._queue.get()

    def write_line(self, text: str, kind: MessageKind = MessageKind.INFO) -> None:
        style = MESSAGE_STYLES.get(kind) or ""
        self._app.write_log(Text(text, style=style))


class GuessingGameUI(App):
    """Main game UI for the guessing game."""

    CSS = """
    GuessingGameUI {
        layout: vertical;
    }

    #header {
        height: auto;
        border: solid cyan;
        padding: 1;
    }

    #game_log {
        height: 1fr;
        border: solid green;
        padding: 1;
    }

    #guess_input {
        border: solid yellow;
    }
    """

    BINDINGS = [
        Binding("escape", "close_input", "Give up", show=False),
        Binding("ctrl+q", "close_input", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        secret: Optional[int] = None,
        exit_delay: float = 2.0,
    ):
        """Initialize the UI.

        Args:
            config: Session options (seed, reveal_secret).
            secret: Optional fixed secret, mainly for tests.
            exit_delay: Seconds to keep the final log on screen before exiting.
        """
        super().__init__()
        self.config = config or GameConfig()
        self.status: Optional[GameStatus] = None
        self.outcomes: list[RoundOutcome] = []
        self.event_log: Optional[GameEventLog] = None
        self._secret = secret
        self._exit_delay = exit_delay
        self._transport = TextualTransport(self)

    def compose(self) -> ComposeResult:
        seed = self.config.seed if self.config.seed is not None else "random"
        yield Static(f"GUESS THE NUMBER ({MIN_GUESS}-{MAX_GUESS}) (Seed: {seed})", id="header")
        yield RichLog(id="game_log", highlight=False, markup=False)
        yield Input(placeholder="Type your guess and press ENTER (ESC to give up)", id="guess_input")

    def on_mount(self) -> None:
        """Start the game."""
        self.query_one("#guess_input", Input).focus()
        self.run_worker(self._run_game(), exclusive=True)

    def write_log(self, text: Text | str) -> None:
        """Write to game log."""
        self.query_one("#game_log", RichLog).write(text)

    @on(Input.Submitted, "#guess_input")
    def on_guess_submitted(self, event: Input.Submitted) -> None:
        """Forward the typed line to the session."""
        self._transport.submit(event.value)
        event.input.value = ""

    def action_close_input(self) -> None:
        """Give up a running game, or leave at once if it is already over."""
        if self.status is not None:
            self.exit(self.status)
        else:
            self._transport.close()

    async def action_quit(self) -> None:
        self.action_close_input()

    def _on_event(self, event: GameEvent) -> None:
        if isinstance(event, RoundEvent):
            self.outcomes.append(event.outcome)

    async def _run_game(self) -> None:
        """Run one session, then exit with its status."""
        game = GuessingGame(
            source=self._transport,
            sink=self._transport,
            config=self.config,
            secret=self._secret,
            event_callback=self._on_event,
        )
        self.event_log = game.event_log
        try:
            await game.run()
            self.status = GameStatus.WON
        except TransportFailure:
            self.status = GameStatus.ABORTED
            self.write_log(Text(READ_FAILURE, style=MESSAGE_STYLES[MessageKind.ERROR]))

        self.query_one("#guess_input", Input).disabled = True
        self.write_log(Text(f"Game over: {self.status.value}", style="bold"))
        await asyncio.sleep(self._exit_delay)
        self.exit(self.status)
