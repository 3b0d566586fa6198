"""Secret, attempt and outcome models."""

from enum import Enum
from typing import Optional, Protocol
from pydantic import BaseModel, ConfigDict, Field

# Inclusive bounds for both the secret and accepted guesses
MIN_GUESS = 1
MAX_GUESS = 100


class RoundOutcome(str, Enum):
    """Classification of a single submitted line."""

    PARSE_ERROR = "PARSE_ERROR"
    RANGE_ERROR = "RANGE_ERROR"
    TOO_LOW = "TOO_LOW"
    TOO_HIGH = "TOO_HIGH"
    WIN = "WIN"

    @property
    def is_retryable(self) -> bool:
        """True for input mistakes that simply reprompt the player."""
        return self in (RoundOutcome.PARSE_ERROR, RoundOutcome.RANGE_ERROR)


class SessionState(str, Enum):
    """Two-state session machine. WON is terminal."""

    RUNNING = "RUNNING"
    WON = "WON"

    def advance(self, outcome: RoundOutcome) -> "SessionState":
        """Return the state after classifying one more round.

        Raises:
            ValueError: If the session has already been won.
        """
        if self is SessionState.WON:
            raise ValueError("session already won; no further rounds allowed")
        if outcome is RoundOutcome.WIN:
            return SessionState.WON
        return SessionState.RUNNING


class RandomSource(Protocol):
    """Anything with an inclusive ``randint``, e.g. ``random.Random``."""

    def randint(self, a: int, b: int) -> int:
        ...


class SecretNumber(BaseModel):
    """The target integer for one session."""

    value: int = Field(ge=MIN_GUESS, le=MAX_GUESS)

    model_config = ConfigDict(frozen=True)

    def __int__(self) -> int:
        return self.value


class GuessAttempt(BaseModel):
    """One successfully parsed submission."""

    raw: str
    value: int


class RoundResult(BaseModel):
    """Outcome of one processed line.

    ``guess`` is None only when the line failed to parse.
    """

    outcome: RoundOutcome
    guess: Optional[int] = None

    @property
    def is_win(self) -> bool:
        return self.outcome is RoundOutcome.WIN


class GameConfig(BaseModel):
    """Options for a single game session."""

    reveal_secret: bool = False  # debug/demo only
    seed: Optional[int] = None


def draw_secret(rng: RandomSource) -> SecretNumber:
    """Draw a secret uniformly from the closed range [MIN_GUESS, MAX_GUESS].

    Args:
        rng: Random source whose ``randint`` includes both bounds.

    Returns:
        A new SecretNumber.
    """
    return SecretNumber(value=rng.randint(MIN_GUESS, MAX_GUESS))
