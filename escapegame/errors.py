"""Exceptions raised by the simulation core."""


class GameError(Exception):
    """Base class for every error the game core raises."""


class SpawnPoolExhausted(GameError):
    """A spawn was requested from an empty candidate pool."""
