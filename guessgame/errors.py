"""Errors that end a game session."""


class GuessGameError(Exception):
    """Base class for fatal game errors."""


class IOReadFailure(GuessGameError):
    """A line could not be read from the player."""


class ParseFailure(GuessGameError):
    """The player typed something that is not an integer."""
