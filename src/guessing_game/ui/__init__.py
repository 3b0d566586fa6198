"""Player-facing transports.

Provides:
- ConsoleTransport: rich-based terminal input/output
- ScriptedTransport: fixed input lines, recorded output
- GuessingGameUI: full-screen Textual app
"""

from .console import ConsoleTransport, MESSAGE_STYLES
from .scripted import ScriptedTransport
from .textual_game import GuessingGameUI, TextualTransport

__all__ = [
    "ConsoleTransport",
    "MESSAGE_STYLES",
    "ScriptedTransport",
    "GuessingGameUI",
    "TextualTransport",
]
