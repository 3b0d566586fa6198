"""Chronological event log for one guessing session."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .game_events import GameStart, RoundEvent, GameOver, GameStatus


class GameEventLog(BaseModel):
    """
    Event log of a session.

    Structure:
    - game_start: Secret drawn
    - rounds: Every submitted line in order
    - game_over: Final status (absent while the session is running)
    """

    game_id: str = Field(default_factory=lambda: datetime.now().strftime("%Y%m%d_%H%M%S"))
    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())

    game_start: Optional[GameStart] = None
    rounds: list[RoundEvent] = Field(default_factory=list)
    game_over: Optional[GameOver] = None

    @property
    def is_complete(self) -> bool:
        return self.game_over is not None

    @property
    def winner_found(self) -> bool:
        return self.game_over is not None and self.game_over.status == GameStatus.WON

    def describe(self) -> str:
        """Format the whole log as readable text."""
        lines = [f"Game {self.game_id} ({self.created_at})"]
        if self.game_start:
            lines.append(f"  {self.game_start}")
        for i, event in enumerate(self.rounds, start=1):
            lines.append(f"  [{i}] {event}")
        if self.game_over:
            lines.append(f"  {self.game_over}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()
