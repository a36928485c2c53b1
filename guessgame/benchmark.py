"""Automated players: how many attempts does a strategy need on average?"""

from typing import Callable, Optional

import numpy as np

from .outcome import Outcome
from .providers import FixedSecretSource, NumpySecretSource
from .session import GameConfig, GuessSession

# wide enough for any strictly narrowing player
BENCHMARK_CONFIG = GameConfig(attempts=100)


class BisectionPlayer:
    """Always guesses the middle of what is left."""

    def __init__(self, low: int, high: int):
        self.low = low
        self.high = high
        self.last = None

    def next_guess(self) -> int:
        self.last = (self.low + self.high) // 2
        return self.last

    def feedback(self, outcome: Outcome) -> None:
        if outcome is Outcome.TOO_LOW:
            self.low = self.last + 1
        elif outcome is Outcome.TOO_HIGH:
            self.high = self.last - 1


class RandomNarrowingPlayer(BisectionPlayer):
    """Guesses at random inside what is left."""

    def __init__(self, low: int, high: int, seed: Optional[int] = None):
        super().__init__(low, high)
        self._rng = np.random.default_rng(seed)

    def next_guess(self) -> int:
        self.last = int(self._rng.integers(self.low, self.high + 1))
        return self.last


PLAYERS = {
    "bisection": BisectionPlayer,
    "random": RandomNarrowingPlayer,
}


def _silent(line: str) -> None:
    pass


def play_automatically(
    player_factory: Callable, secret: int, config: GameConfig = BENCHMARK_CONFIG
) -> int:
    """Let a player find a known secret.

    Args:
        player_factory (Callable): called with (low, high), returns a player
        secret (int): the number to find
        config (GameConfig, optional): range and budget. Defaults to BENCHMARK_CONFIG.

    Returns:
        int: number of attempts used
    """
    session = GuessSession(
        config, FixedSecretSource(secret), read_line=None, write=_silent
    )
    session.start()
    player = player_factory(config.low, config.high)
    while not session.finished:
        player.feedback(session.guess(player.next_guess()))
    return session.result().attempts


def score_game(
    player_factory: Callable,
    games: int = 1000,
    seed: Optional[int] = None,
    config: GameConfig = BENCHMARK_CONFIG,
) -> int:
    """Average number of attempts over many games.

    Args:
        player_factory (Callable): see play_automatically
        games (int, optional): how many secrets to play. Defaults to 1000.
        seed (int, optional): seed for the secrets. Defaults to None.

    Returns:
        int: mean attempts, truncated
    """
    rng = np.random.default_rng(seed)
    secrets = rng.integers(config.low, config.high + 1, size=games)

    count_ls = [play_automatically(player_factory, int(s), config) for s in secrets]

    score = int(np.mean(count_ls))
    print(f"Your algorithm finds the number in {score} attempts on average")
    return score


def secret_frequencies(
    draws: int, source: Optional[NumpySecretSource] = None, config: GameConfig = GameConfig()
) -> np.ndarray:
    """How often each value of the range came out of ``source``.

    Returns:
        np.ndarray: counts, index 0 is ``config.low``
    """
    source = source or NumpySecretSource()
    values = np.fromiter(
        (source(config.low, config.high) for _ in range(draws)), dtype=np.int64, count=draws
    )
    return np.bincount(values - config.low, minlength=config.high - config.low + 1)
