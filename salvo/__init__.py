"""
Salvo: multi-player Battleship game engine.

Available modules:
- craft: Craft (vessel) model
- grid: Playing grid and fleet placement
- player: Players and strike resolution
- game: Round-robin turn engine
- render: Text rendering of grids
- cli: Command-line host
"""

from salvo.craft import Craft, Orientation, Position
from salvo.errors import (
    BattleshipError,
    InvalidConfiguration,
    InvalidCraft,
    InvalidStrike,
    NoWinner,
    OutOfBounds,
    PlacementInfeasible,
    UnknownCraft,
)
from salvo.game import Game, GameState
from salvo.grid import Cell, CellKind, Grid, GridKind
from salvo.player import Player, StrikeOutcome, StrikeResult, standard_fleet

__version__ = "0.1.0"

__all__ = [
    'Craft', 'Orientation', 'Position',
    'Grid', 'GridKind', 'Cell', 'CellKind',
    'Player', 'StrikeOutcome', 'StrikeResult', 'standard_fleet',
    'Game', 'GameState',
    'BattleshipError', 'InvalidCraft', 'InvalidConfiguration', 'OutOfBounds',
    'InvalidStrike', 'UnknownCraft', 'PlacementInfeasible', 'NoWinner',
]
