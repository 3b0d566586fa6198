"""Number-guessing game: a secret between 1 and 100, guessed one line at a time."""

__version__ = "0.1.0"
