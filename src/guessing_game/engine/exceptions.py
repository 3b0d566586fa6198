"""Engine exceptions."""

from typing import Optional


class TransportFailure(Exception):
    """Raised when the input source is exhausted or unreadable before a win.

    Unlike parse and range errors this is fatal: the session is aborted
    and never retried.
    """

    def __init__(self, reason: str = "end of input", cause: Optional[BaseException] = None):
        self.reason = reason
        self.cause = cause
        super().__init__(f"Failed to read line: {reason}")


class SessionFinishedError(Exception):
    """Raised when a line is submitted to an engine whose session is already won."""
