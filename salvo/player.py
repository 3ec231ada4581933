"""Players and strike resolution for the salvo engine."""

import logging
from dataclasses import dataclass
from enum import Enum

from salvo import config
from salvo.craft import Craft
from salvo.errors import InvalidConfiguration, InvalidStrike, OutOfBounds, UnknownCraft
from salvo.grid import Cell, CellKind, Grid

logger = logging.getLogger(__name__)


class StrikeOutcome(str, Enum):
    HIT = "hit"
    MISS = "miss"
    DUPLICATE = "already"


@dataclass(frozen=True)
class StrikeResult:
    """What a single strike did. ``x`` and ``y`` are the one-based board coordinates fired at."""

    outcome: StrikeOutcome
    x: int
    y: int
    craft_id: str = None
    sunk: bool = False
    eliminated: bool = False

    @property
    def is_hit(self):
        return self.outcome is StrikeOutcome.HIT

    @property
    def is_duplicate(self):
        return self.outcome is StrikeOutcome.DUPLICATE


def standard_fleet():
    """A fresh copy of the five-craft standard fleet."""
    return [Craft(name, length) for name, length in config.STANDARD_FLEET]


def _check_player_dimensions(dimensions):
    if dimensions is None:
        return config.DEFAULT_DIMENSIONS
    try:
        width, height = dimensions
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"Dimensions must be a (width, height) pair, got {dimensions!r}.") from None
    return width, height


def _board_coordinate(value):
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidStrike(f"Strike coordinates must be whole numbers, got {value!r}.") from None
    if isinstance(value, bool) or number != value:
        raise InvalidStrike(f"Strike coordinates must be whole numbers, got {value!r}.")
    return number


class Player:
    """
    A player with a fleet on a private home grid.

    Each opponent this player fires at gets its own tracking grid, keyed by
    the opponent's id and created on the first strike against them.
    """

    def __init__(self, id, name=None, fleet=None, dimensions=None, rng=None):
        try:
            id = int(id)
        except (TypeError, ValueError):
            raise InvalidConfiguration(f"Player id must be a positive integer, got {id!r}.") from None
        if id <= 0:
            raise InvalidConfiguration(f"Player id must be a positive integer, got {id}.")

        self.id = id
        self.name = name or f"player_{id}"
        self.score = 0
        self.fleet = [Craft.from_spec(craft) for craft in fleet] if fleet is not None else standard_fleet()
        if not self.fleet:
            raise InvalidConfiguration(f"{self.name} needs at least one craft.")

        self._crafts = {}
        self._craft_ids_by_name = {}
        for craft in self.fleet:
            if craft.id in self._crafts:
                raise InvalidConfiguration(
                    f"Duplicate craft id {craft.id!r} in {self.name}'s fleet "
                    f"({self._crafts[craft.id].name} and {craft.name})."
                )
            self._crafts[craft.id] = craft
            self._craft_ids_by_name.setdefault(craft.name, craft.id)

        width, height = _check_player_dimensions(dimensions)
        self.home_grid = Grid(width, height)
        self.home_grid.place_fleet(self.fleet, rng)
        self.tracking_grids = {}

        self.life = sum(craft.length for craft in self.fleet)

    @classmethod
    def from_spec(cls, spec, id, rng=None):
        """Build a player from a mapping of name, fleet and dimensions."""
        return cls(
            id=spec.get("id") or id,
            name=spec.get("name"),
            fleet=spec.get("fleet"),
            dimensions=spec.get("dimensions"),
            rng=rng,
        )

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #
    @property
    def key(self):
        return f"player_{self.id}"

    @property
    def dimensions(self):
        return self.home_grid.dimensions

    def is_alive(self):
        return self.life > 0

    def remaining_value(self):
        """Sum of what is left of every craft; always equal to ``life``."""
        return sum(max(0, craft.remaining) for craft in self.fleet)

    def craft(self, craft_id):
        return self._crafts.get(str(craft_id).upper())

    def craft_named(self, name):
        craft_id = self._craft_ids_by_name.get(name)
        return self._crafts[craft_id] if craft_id is not None else None

    def tracking_grid(self, opponent):
        return self.tracking_grids.get(opponent.id)

    # ------------------------------------------------------------------ #
    # Strikes
    # ------------------------------------------------------------------ #
    def strike(self, defender, x, y):
        """
        Fire at ``defender`` at the one-based board coordinate (x, y).

        Returns a StrikeResult. A coordinate already fired at against the
        same defender comes back as DUPLICATE and changes nothing.
        """
        if defender is None:
            raise InvalidStrike("No opponent to strike.")
        if defender is self:
            raise InvalidStrike(f"{self.name} cannot strike themselves.")
        if not defender.is_alive():
            raise InvalidStrike(f"{defender.name} is already out of the game. Strike another opponent.")
        if x is None or y is None:
            raise InvalidStrike("No coordinate at which to strike.")
        x, y = _board_coordinate(x), _board_coordinate(y)

        width, height = defender.dimensions
        if not (1 <= x <= width and 1 <= y <= height):
            raise OutOfBounds(f"({x}, {y}) is outside {defender.name}'s {width} x {height} grid.")
        col, row = x - 1, y - 1

        tracking = self.tracking_grids.get(defender.id)
        if tracking is None:
            tracking = self.tracking_grids[defender.id] = Grid.tracking(width, height)

        if tracking.cell_at(col, row).kind is not CellKind.UNKNOWN:
            logger.debug(f"Duplicate strike on {defender.name} by {self.name} at {x}, {y}")
            return StrikeResult(StrikeOutcome.DUPLICATE, x, y)

        target = defender.home_grid.cell_at(col, row)
        # A cell another attacker already holed takes no further damage.
        if target.kind is not CellKind.OCCUPIED:
            tracking.mark(col, row, Cell.miss())
            logger.debug(f"{self.name} missed {defender.name} at {x}, {y}")
            return StrikeResult(StrikeOutcome.MISS, x, y)

        craft = defender.craft(target.craft_id)
        if craft is None:
            raise UnknownCraft(
                f"{defender.name}'s grid shows craft {target.craft_id!r} at {x}, {y} "
                f"but their fleet has no such craft."
            )

        remaining = craft.record_hit()
        tracking.mark(col, row, Cell.hit())
        defender.home_grid.mark(col, row, Cell.occupied_hit(craft.id))
        self.score += 1
        defender.life -= 1

        sunk = remaining == 0
        eliminated = defender.life <= 0
        logger.info(f"{self.name} hit {defender.name}'s {craft.name}!")
        if sunk:
            logger.info(f"{self.name} sunk {defender.name}'s {craft.name}!")
        if eliminated:
            logger.info(f"{defender.name} is out of the game.")

        return StrikeResult(StrikeOutcome.HIT, x, y, craft_id=craft.id, sunk=sunk, eliminated=eliminated)

    def __repr__(self):
        return f"Player(id={self.id}, name={self.name!r}, life={self.life}, score={self.score})"
