"""Events package."""

from guessing_game.events.game_events import (
    GameEvent,
    GameStatus,
    GameStart,
    RoundEvent,
    GameOver,
)

from guessing_game.events.event_log import GameEventLog

from guessing_game.events.event_formatter import (
    EventFormatter,
    MessageKind,
    OUTCOME_MESSAGES,
    GREETING,
    PROMPT,
    READ_FAILURE,
)

__all__ = [
    # Events
    "GameEvent",
    "GameStatus",
    "GameStart",
    "RoundEvent",
    "GameOver",
    # Log
    "GameEventLog",
    # Formatting
    "EventFormatter",
    "MessageKind",
    "OUTCOME_MESSAGES",
    "GREETING",
    "PROMPT",
    "READ_FAILURE",
]
