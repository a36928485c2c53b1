"""
guessgame - guess the number in the terminal.

The computer picks a secret number and the player tries to find it,
getting "too small" / "too much" feedback after every guess.
"""

from .errors import GuessGameError, IOReadFailure, ParseFailure
from .outcome import Outcome, evaluate
from .session import GameConfig, GuessSession, Mode, SessionResult

__version__ = "0.1.0"

__all__ = [
    "GuessGameError",
    "IOReadFailure",
    "ParseFailure",
    "Outcome",
    "evaluate",
    "GameConfig",
    "GuessSession",
    "Mode",
    "SessionResult",
]
