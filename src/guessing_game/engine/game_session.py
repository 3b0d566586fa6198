"""GuessingGame - runs one session over a line transport."""

import logging
from typing import Callable, Optional

from guessing_game.models import GameConfig
from guessing_game.models.game import RandomSource
from guessing_game.events import (
    EventFormatter,
    GameEvent,
    GameEventLog,
    GameOver,
    GameStart,
    GameStatus,
    MessageKind,
    PROMPT,
    RoundEvent,
)
from guessing_game.engine.exceptions import TransportFailure
from guessing_game.engine.guessing_engine import GuessingGameEngine
from guessing_game.engine.parsing import strip_line_terminator
from guessing_game.engine.transport import LineSink, LineSource

logger = logging.getLogger(__name__)


class GuessingGame:
    """Session controller - reads, classifies and reports until a win.

    Game Flow:
        1. Draw the secret (optionally reveal it)
        2. Greet the player
        3. Prompt, read one line, classify it, report the outcome
        4. Repeat step 3 until WIN; end of input aborts the session
    """

    def __init__(
        self,
        source: LineSource,
        sink: LineSink,
        config: Optional[GameConfig] = None,
        rng: Optional[RandomSource] = None,
        secret: Optional[int] = None,
        event_callback: Optional[Callable[[GameEvent], None]] = None,
    ):
        """Initialize the GuessingGame.

        Args:
            source: Where player lines come from.
            sink: Where player-facing messages go.
            config: Session options. Defaults to GameConfig().
            rng: Optional random source for the secret. If None, a private
                 random.Random seeded with config.seed is used.
            secret: Optional fixed secret (tests, replays).
            event_callback: Called with every event as it is recorded.
        """
        self.config = config or GameConfig()
        self._source = source
        self._sink = sink
        self._event_callback = event_callback
        self._formatter = EventFormatter()
        self._engine = GuessingGameEngine(secret=secret, rng=rng, seed=self.config.seed)
        self._event_log = GameEventLog()

    @property
    def engine(self) -> GuessingGameEngine:
        return self._engine

    @property
    def event_log(self) -> GameEventLog:
        """Events recorded so far. Still available after a TransportFailure."""
        return self._event_log

    async def run(self) -> GameEventLog:
        """Run the session until the secret is guessed.

        Returns:
            The completed event log.

        Raises:
            TransportFailure: If the source runs dry or fails before a win.
        """
        self._record(GameStart(
            secret=self._engine.secret,
            revealed=self.config.reveal_secret,
        ))
        logger.info("Game %s started", self._event_log.game_id)

        while not self._engine.is_won:
            self._sink.write_line(PROMPT, MessageKind.PROMPT)
            line = await self._read()
            raw = strip_line_terminator(line)

            result = self._engine.process_line(raw)
            self._record(RoundEvent(raw=raw, guess=result.guess, outcome=result.outcome))

        self._record(GameOver(status=GameStatus.WON))
        logger.info("Game %s won after %d line(s)", self._event_log.game_id, len(self._event_log.rounds))
        return self._event_log

    async def _read(self) -> str:
        """Read one line, turning end of input and I/O errors into TransportFailure."""
        try:
            line = await self._source.read_line()
        except OSError as e:
            reason = str(e) or type(e).__name__
            self._abort(reason)
            raise TransportFailure(reason, cause=e) from e

        if line is None:
            self._abort("end of input")
            raise TransportFailure("end of input")
        return line

    def _abort(self, reason: str) -> None:
        logger.warning("Game %s aborted: %s", self._event_log.game_id, reason)
        self._record(GameOver(status=GameStatus.ABORTED, reason=reason))

    def _record(self, event: GameEvent) -> None:
        """Append an event to the log, show its messages, notify the callback."""
        if isinstance(event, GameStart):
            self._event_log.game_start = event
        elif isinstance(event, RoundEvent):
            self._event_log.rounds.append(event)
        elif isinstance(event, GameOver):
            self._event_log.game_over = event

        for text, kind in self._formatter.format(event):
            self._sink.write_line(text, kind)

        if self._event_callback is not None:
            self._event_callback(event)
