"""
Pytest fixtures for guessgame tests.
"""

import pytest

from ..providers import FixedSecretSource, ScriptedInput
from ..session import GameConfig, GuessSession, Mode


@pytest.fixture
def lines():
    """Collects everything a session prints."""
    return []


@pytest.fixture
def make_session(lines):
    """Build a session with secret 50 and scripted guesses."""

    def _make(inputs, secret=50, **config):
        reader = ScriptedInput(inputs)
        session = GuessSession(
            GameConfig(**config), FixedSecretSource(secret), reader, write=lines.append
        )
        return session, reader

    return _make


@pytest.fixture
def single_config() -> GameConfig:
    return GameConfig(mode=Mode.SINGLE)
