"""
Pluggable sources of secrets and guesses.

A session never touches the random module or stdin directly: it gets a
secret source (``draw(low, high) -> int``) and a line reader
(``read(prompt) -> str``). Tests swap in fixed/scripted versions.
"""

import logging
import re
import sys
from typing import Iterable, Optional

import numpy as np

from .errors import IOReadFailure, ParseFailure

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class NumpySecretSource:
    """Uniform secret in a closed range, drawn with numpy."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def __call__(self, low: int, high: int) -> int:
        # integers() excludes the upper bound
        return int(self._rng.integers(low, high + 1))


class FixedSecretSource:
    """Always hands out the same secret."""

    def __init__(self, value: int):
        self.value = value

    def __call__(self, low: int, high: int) -> int:
        if not low <= self.value <= high:
            raise ValueError(f"secret {self.value} is outside {low}-{high}")
        return self.value


class ConsoleInput:
    """Reads one line per call from stdin, prompting on stdout."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def __call__(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise IOReadFailure("failed to read line") from exc
        if not line:
            raise IOReadFailure("failed to read line")
        return line


class ScriptedInput:
    """Replays prepared lines; useful for tests and demos."""

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise IOReadFailure("failed to read line") from None


def parse_guess(text: str) -> int:
    """Parse a line as a signed base-10 integer.

    Args:
        text (str): Raw line, trailing newline allowed.

    Raises:
        ParseFailure: not a 32-bit signed integer

    Returns:
        int: The guess
    """
    stripped = text.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        logger.debug("rejected input %r", text)
        raise ParseFailure("please type a number!")
    value = int(stripped)
    if not INT32_MIN <= value <= INT32_MAX:
        logger.debug("input %r out of range", text)
        raise ParseFailure("please type a number!")
    return value
