"""Stub guesser for demos and stress testing.

The StubGuesser plays without a human: it bisects the guess range using the
outcomes it observes, and can be told to mix in invalid lines so that every
outcome of the engine gets exercised.
"""

import random
from typing import Optional

from guessing_game.models import MIN_GUESS, MAX_GUESS, RoundOutcome
from guessing_game.events import GameEvent, RoundEvent

# Lines the engine must reject, either at parse time or at range check
INVALID_LINES = [
    "",
    "  ",
    "abc",
    "12abc",
    "3.14",
    " 42",
    "+7",
    str(MIN_GUESS - 1),
    str(MAX_GUESS + 1),
    "-5",
    "150",
]


class StubGuesser:
    """An automated player implementing the LineSource protocol.

    Wire ``observe`` as the session's event callback so the guesser can
    narrow its range after each TOO_LOW / TOO_HIGH.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        noise: float = 0.0,
        max_lines: Optional[int] = None,
    ):
        """Initialize the guesser.

        Args:
            seed: Seed for the guesser's private random source.
            noise: Probability in [0, 1] of emitting an invalid line on a read.
            max_lines: Stop (report end of input) after this many lines.
        """
        if not 0.0 <= noise <= 1.0:
            raise ValueError(f"noise must be between 0 and 1, got {noise}")
        self._rng = random.Random(seed)
        self._noise = noise
        self._max_lines = max_lines
        self._low = MIN_GUESS
        self._high = MAX_GUESS
        self._pending: Optional[int] = None
        self.lines_sent = 0

    @property
    def bounds(self) -> tuple[int, int]:
        """Current (low, high) range still consistent with observed hints."""
        return self._low, self._high

    async def read_line(self) -> Optional[str]:
        if self._max_lines is not None and self.lines_sent >= self._max_lines:
            return None
        self.lines_sent += 1

        if self._noise and self._rng.random() < self._noise:
            self._pending = None
            return self._rng.choice(INVALID_LINES)

        self._pending = (self._low + self._high) // 2
        return str(self._pending)

    def observe(self, event: GameEvent) -> None:
        """Narrow the range from a classified round."""
        if not isinstance(event, RoundEvent) or event.guess is None:
            return
        if event.guess != self._pending:
            return

        if event.outcome == RoundOutcome.TOO_LOW:
            self._low = event.guess + 1
        elif event.outcome == RoundOutcome.TOO_HIGH:
            self._high = event.guess - 1
        elif event.outcome == RoundOutcome.WIN:
            self._low = self._high = event.guess
        self._pending = None


def create_stub_guesser(
    seed: Optional[int] = None,
    noise: float = 0.0,
    max_lines: Optional[int] = None,
) -> StubGuesser:
    """Factory function to create a StubGuesser."""
    return StubGuesser(seed=seed, noise=noise, max_lines=max_lines)
