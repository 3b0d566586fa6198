"""GuessingGameEngine - owns the secret and classifies submitted lines."""

import logging
import random
from typing import Optional, Union

from guessing_game.models import (
    MIN_GUESS,
    MAX_GUESS,
    GuessAttempt,
    RoundOutcome,
    RoundResult,
    SecretNumber,
    SessionState,
    draw_secret,
)
from guessing_game.models.game import RandomSource
from guessing_game.engine.exceptions import SessionFinishedError
from guessing_game.engine.parsing import parse_guess

logger = logging.getLogger(__name__)


class GuessingGameEngine:
    """Pure classification core of a guessing session.

    The engine performs no I/O. Each call to ``process_line`` classifies one
    raw line as PARSE_ERROR, RANGE_ERROR, TOO_LOW, TOO_HIGH or WIN. A WIN moves
    the session from RUNNING to WON, after which the engine rejects input.
    """

    def __init__(
        self,
        secret: Optional[Union[SecretNumber, int]] = None,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ):
        """Initialize the engine.

        Args:
            secret: Fixed secret to use instead of drawing one. Must be in
                    [1, 100].
            rng: Random source to draw the secret from. Ignored when
                 ``secret`` is given.
            seed: Seed for a private ``random.Random`` when neither ``secret``
                  nor ``rng`` is given. None uses natural randomness.
        """
        if secret is None:
            if rng is None:
                rng = random.Random(seed)
            secret = draw_secret(rng)
        elif isinstance(secret, int):
            secret = SecretNumber(value=secret)

        self._secret: SecretNumber = secret
        self._state = SessionState.RUNNING
        logger.debug("Secret drawn: %d", self._secret.value)

    @property
    def secret(self) -> int:
        return self._secret.value

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_won(self) -> bool:
        return self._state is SessionState.WON

    def parse(self, raw: str) -> Optional[GuessAttempt]:
        """Parse a line into a GuessAttempt, or None if it is not an integer."""
        value = parse_guess(raw)
        if value is None:
            return None
        return GuessAttempt(raw=raw, value=value)

    def classify(self, guess: int) -> RoundOutcome:
        """Classify an already parsed guess without touching session state."""
        if guess < MIN_GUESS or guess > MAX_GUESS:
            return RoundOutcome.RANGE_ERROR
        if guess < self._secret.value:
            return RoundOutcome.TOO_LOW
        if guess > self._secret.value:
            return RoundOutcome.TOO_HIGH
        return RoundOutcome.WIN

    def process_line(self, raw: str) -> RoundResult:
        """Classify one submitted line and advance the session.

        Args:
            raw: Line text without its line terminator.

        Returns:
            RoundResult with the outcome and the parsed guess (None on
            PARSE_ERROR).

        Raises:
            SessionFinishedError: If the session has already been won.
        """
        if self.is_won:
            raise SessionFinishedError("the secret has already been guessed")

        attempt = self.parse(raw)
        if attempt is None:
            result = RoundResult(outcome=RoundOutcome.PARSE_ERROR)
        else:
            result = RoundResult(outcome=self.classify(attempt.value), guess=attempt.value)

        self._state = self._state.advance(result.outcome)
        logger.debug("Line %r classified as %s", raw, result.outcome.value)
        return result
