"""Exceptions raised by the salvo game engine."""


class BattleshipError(Exception):
    """Base class for every error the engine raises."""


class InvalidCraft(BattleshipError, ValueError):
    """Raised when a craft is built with a bad name, length or id."""


class InvalidConfiguration(BattleshipError, ValueError):
    """Raised for bad grid dimensions, duplicate craft ids or bad player setup."""


class OutOfBounds(BattleshipError, IndexError):
    """Raised when a coordinate falls outside a grid."""


class InvalidStrike(BattleshipError, ValueError):
    """Raised when a strike has no live opponent or no coordinate."""


class UnknownCraft(BattleshipError, LookupError):
    """Raised when a home grid cell names a craft missing from the fleet."""


class PlacementInfeasible(BattleshipError, RuntimeError):
    """Raised when a fleet cannot be placed within the attempt ceiling."""


class NoWinner(BattleshipError, RuntimeError):
    """Raised when a game ends with no player left alive."""
