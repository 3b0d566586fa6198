"""Player-facing messages for session events."""

from enum import Enum

from guessing_game.models import MIN_GUESS, MAX_GUESS, RoundOutcome
from .game_events import GameEvent, GameStart, RoundEvent

GREETING = "Guess the number!"
PROMPT = "Please input your guess."
READ_FAILURE = "Failed to read line"


class MessageKind(str, Enum):
    """Rough category of a message, used by sinks for styling."""

    INFO = "info"
    PROMPT = "prompt"
    HINT = "hint"
    ERROR = "error"
    WIN = "win"


# Outcome -> (message, kind)
OUTCOME_MESSAGES: dict[RoundOutcome, tuple[str, MessageKind]] = {
    RoundOutcome.PARSE_ERROR: (
        "Error. Invalid input. Please enter a valid number.",
        MessageKind.ERROR,
    ),
    RoundOutcome.RANGE_ERROR: (
        f"Error: Please enter a number between {MIN_GUESS} and {MAX_GUESS}.",
        MessageKind.ERROR,
    ),
    RoundOutcome.TOO_LOW: ("Too small!", MessageKind.HINT),
    RoundOutcome.TOO_HIGH: ("Too big!", MessageKind.HINT),
    RoundOutcome.WIN: ("You win!!", MessageKind.WIN),
}


class EventFormatter:
    """Turn session events into the lines shown to the player.

    Usage:
        formatter = EventFormatter()
        for text, kind in formatter.format(event):
            sink.write_line(text, kind)
    """

    def format(self, event: GameEvent) -> list[tuple[str, MessageKind]]:
        """Format one event. Events with nothing to show return an empty list."""
        if isinstance(event, GameStart):
            return self._format_game_start(event)
        elif isinstance(event, RoundEvent):
            return self._format_round(event)
        # GameOver has no message of its own: the win message belongs to the
        # winning round and read failures are reported by the caller
        return []

    def _format_game_start(self, event: GameStart) -> list[tuple[str, MessageKind]]:
        lines = []
        if event.revealed:
            lines.append((f"The secret number is: {event.secret}", MessageKind.INFO))
        lines.append((GREETING, MessageKind.INFO))
        return lines

    def _format_round(self, event: RoundEvent) -> list[tuple[str, MessageKind]]:
        lines = []
        if event.guess is not None:
            lines.append((f"You guessed: {event.guess}", MessageKind.INFO))
        lines.append(OUTCOME_MESSAGES[event.outcome])
        return lines

