"""
Guess session - the read / compare / print loop.

One session owns one secret. The secret is drawn in ``start()`` and is
never touched again; every guess is checked against it with ``evaluate``.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from .outcome import Outcome, evaluate
from .providers import parse_guess

logger = logging.getLogger(__name__)

DEFAULT_LOW = 1
DEFAULT_HIGH = 100
DEFAULT_ATTEMPTS = 10

PROMPT = "pls guess a number: "


class Mode(Enum):
    BOUNDED = "bounded"
    SINGLE = "single"


SUCCESS_MESSAGES = {
    Mode.BOUNDED: "CONGRATS!!",
    Mode.SINGLE: "congrats",
}


@dataclass(frozen=True)
class GameConfig:
    """Range and attempt budget of a session."""

    low: int = DEFAULT_LOW
    high: int = DEFAULT_HIGH
    attempts: int = DEFAULT_ATTEMPTS
    mode: Mode = Mode.BOUNDED

    def __post_init__(self):
        if self.low > self.high:
            raise ValueError(f"empty range {self.low}-{self.high}")
        if self.mode is Mode.BOUNDED and self.attempts < 1:
            raise ValueError("attempts must be at least 1")

    @property
    def budget(self) -> int:
        if self.mode is Mode.SINGLE:
            return 1
        return self.attempts


@dataclass
class SessionResult:
    """What happened in a finished session."""

    won: bool
    secret: int
    outcomes: List[Outcome] = field(default_factory=list)

    @property
    def attempts(self) -> int:
        return len(self.outcomes)


class GuessSession:
    """
    Interactive guessing game.

    Usage:
        session = GuessSession(GameConfig(), NumpySecretSource(), ConsoleInput())
        result = session.run()

    ``run`` drives the whole game. ``start`` and ``guess`` are exposed
    separately so automated players can feed integers without going
    through text input.
    """

    def __init__(
        self,
        config: GameConfig,
        secret_source: Callable[[int, int], int],
        read_line: Optional[Callable[[str], str]],
        write: Callable[[str], None] = print,
    ):
        self.config = config
        self.secret_source = secret_source
        self.read_line = read_line
        self.write = write
        self._secret: Optional[int] = None
        self._outcomes: List[Outcome] = []

    @property
    def secret(self) -> Optional[int]:
        return self._secret

    @property
    def started(self) -> bool:
        return self._secret is not None

    @property
    def finished(self) -> bool:
        if not self._outcomes:
            return False
        return (
            self._outcomes[-1] is Outcome.CORRECT
            or len(self._outcomes) >= self.config.budget
        )

    def start(self) -> None:
        """Draw the secret and print the instructions."""
        if self.started:
            raise RuntimeError("session already started")
        cfg = self.config
        self._secret = self.secret_source(cfg.low, cfg.high)
        logger.debug("secret drawn in %d-%d", cfg.low, cfg.high)

        self.write(f"guess a number between {cfg.low}-{cfg.high}")
        if cfg.mode is Mode.BOUNDED:
            self.write(f"you got {cfg.budget} chances.")

    def guess(self, value: int) -> Outcome:
        """Check one guess and print the feedback.

        Args:
            value (int): The player's guess.

        Returns:
            Outcome: How the guess relates to the secret
        """
        if not self.started:
            raise RuntimeError("session not started")
        if self.finished:
            raise RuntimeError("session is over")

        outcome = evaluate(value, self._secret)
        self._outcomes.append(outcome)
        logger.debug("attempt %d: %d -> %s", len(self._outcomes), value, outcome.name)

        if outcome is Outcome.CORRECT:
            self.write(SUCCESS_MESSAGES[self.config.mode])
        else:
            self.write(outcome.feedback)

        if self.config.mode is Mode.SINGLE:
            self.write(f"you guessed : {value}")
            self.write(f"secret num. : {self._secret}")
        return outcome

    def result(self) -> SessionResult:
        return SessionResult(
            won=bool(self._outcomes) and self._outcomes[-1] is Outcome.CORRECT,
            secret=self._secret,
            outcomes=list(self._outcomes),
        )

    def run(self) -> SessionResult:
        """Play a full game over ``read_line``.

        A ParseFailure or IOReadFailure propagates out untouched and
        ends the game; nothing is compared for that attempt.

        Returns:
            SessionResult: won flag, secret and per-attempt outcomes
        """
        if self.read_line is None:
            raise RuntimeError("no line reader to play from")
        self.start()
        while not self.finished:
            line = self.read_line(PROMPT)
            self.guess(parse_guess(line))
        return self.result()
