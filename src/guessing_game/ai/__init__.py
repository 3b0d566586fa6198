"""AI package - automated guessers."""

from .stub_ai import StubGuesser, create_stub_guesser, INVALID_LINES

__all__ = ["StubGuesser", "create_stub_guesser", "INVALID_LINES"]
