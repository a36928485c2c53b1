"""Three-way classification of a guess."""

from enum import Enum


class Outcome(Enum):
    TOO_LOW = "too small"
    TOO_HIGH = "too much"
    CORRECT = "correct"

    @property
    def feedback(self) -> str:
        """Line printed for a miss. CORRECT is worded by the session mode."""
        return self.value


def evaluate(guess: int, secret: int) -> Outcome:
    """Compare a guess with the secret.

    Args:
        guess (int): Number typed by the player.
        secret (int): Number to find.

    Returns:
        Outcome: TOO_LOW, TOO_HIGH or CORRECT
    """
    if guess < secret:
        return Outcome.TOO_LOW
    elif guess > secret:
        return Outcome.TOO_HIGH
    return Outcome.CORRECT
