"""Models package."""

from guessing_game.models.game import (
    MIN_GUESS,
    MAX_GUESS,
    RoundOutcome,
    SessionState,
    SecretNumber,
    GuessAttempt,
    RoundResult,
    GameConfig,
    draw_secret,
)

__all__ = [
    "MIN_GUESS",
    "MAX_GUESS",
    "RoundOutcome",
    "SessionState",
    "SecretNumber",
    "GuessAttempt",
    "RoundResult",
    "GameConfig",
    "draw_secret",
]
