"""Strict parsing of submitted guesses."""

import re
from typing import Optional

# Optional minus sign, then ASCII digits only. No whitespace, no plus sign.
_INTEGER_RE = re.compile(r"-?[0-9]+")

# Guesses are 32-bit signed integers; wider literals fail to parse
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
_INT32_MAX_DIGITS = len(str(INT32_MAX))


def parse_guess(raw: str) -> Optional[int]:
    """Parse a whole line as a base-10 signed integer.

    The entire string must match; a numeric prefix followed by anything
    else is rejected, as are empty and whitespace-only strings. Literals
    outside the 32-bit signed range are rejected as well.

    Args:
        raw: The submitted text, already stripped of its line terminator.

    Returns:
        The parsed integer, or None if the text is not a valid literal.
    """
    if not _INTEGER_RE.fullmatch(raw):
        return None
    negative = raw.startswith("-")
    digits = raw.lstrip("-").lstrip("0") or "0"
    # Bound the digit count before int() so huge pastes stay cheap
    if len(digits) > _INT32_MAX_DIGITS:
        return None
    value = -int(digits) if negative else int(digits)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def strip_line_terminator(line: str) -> str:
    """Remove exactly one trailing ``\\n`` or ``\\r\\n`` from a read line."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line
