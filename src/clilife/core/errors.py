"""Exceptions raised while building or loading a board."""


class LifeError(Exception):
    """Base class for all clilife errors."""


class InvalidDimension(LifeError, ValueError):
    """Raised when a board is created with a non-positive width or height."""


class MalformedState(LifeError, ValueError):
    """Raised when a saved board state cannot be turned into a board."""
