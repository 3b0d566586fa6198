"""Engine package - classification core and session runner."""

from .exceptions import TransportFailure, SessionFinishedError
from .parsing import parse_guess, strip_line_terminator
from .guessing_engine import GuessingGameEngine
from .transport import LineSource, LineSink
from .game_session import GuessingGame

__all__ = [
    "TransportFailure",
    "SessionFinishedError",
    "parse_guess",
    "strip_line_terminator",
    "GuessingGameEngine",
    "LineSource",
    "LineSink",
    "GuessingGame",
]
