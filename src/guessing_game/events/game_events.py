"""Event types for session logging."""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from guessing_game.models import RoundOutcome


class GameStatus(str, Enum):
    """How a session ended."""

    WON = "WON"
    ABORTED = "ABORTED"


class GameEvent(BaseModel):
    """Base class for all session events."""

    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())


class GameStart(GameEvent):
    """Session started with a freshly drawn secret."""

    secret: int
    revealed: bool = False

    def __str__(self) -> str:
        note = " (revealed to player)" if self.revealed else ""
        return f"GameStart: secret={self.secret}{note}"


class RoundEvent(GameEvent):
    """One submitted line and its classification."""

    raw: str
    guess: Optional[int] = None
    outcome: RoundOutcome

    def __str__(self) -> str:
        if self.guess is None:
            return f"Round: {self.raw!r} -> {self.outcome.value}"
        return f"Round: {self.guess} -> {self.outcome.value}"


class GameOver(GameEvent):
    """Session ended, either by a win or by a transport failure."""

    status: GameStatus
    reason: Optional[str] = None

    def __str__(self) -> str:
        if self.reason:
            return f"GameOver: {self.status.value} ({self.reason})"
        return f"GameOver: {self.status.value}"
