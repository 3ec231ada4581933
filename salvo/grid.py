"""Playing grid for the salvo engine: cell storage and fleet placement."""

import logging
import random
from dataclasses import dataclass
from enum import Enum

import numpy as np

from salvo import config
from salvo.craft import Orientation, Position
from salvo.errors import InvalidConfiguration, OutOfBounds, PlacementInfeasible

logger = logging.getLogger(__name__)

BLANK = "."
HIT_MARK = "x"
MISS_MARK = "o"


class GridKind(Enum):
    """A home grid holds a player's own fleet; a tracking grid records shots at one opponent."""

    HOME = "home"
    TRACKING = "tracking"


class CellKind(Enum):
    EMPTY = "empty"
    OCCUPIED = "occupied"
    OCCUPIED_HIT = "occupied_hit"
    UNKNOWN = "unknown"
    HIT = "hit"
    MISS = "miss"


HOME_KINDS = frozenset({CellKind.EMPTY, CellKind.OCCUPIED, CellKind.OCCUPIED_HIT})
TRACKING_KINDS = frozenset({CellKind.UNKNOWN, CellKind.HIT, CellKind.MISS})


@dataclass(frozen=True)
class Cell:
    """State of one grid coordinate. Only home cells carry a craft id."""

    kind: CellKind
    craft_id: str = None

    @property
    def token(self):
        """Single-character rendering of the cell."""
        if self.kind is CellKind.OCCUPIED:
            return self.craft_id.upper()
        if self.kind is CellKind.OCCUPIED_HIT:
            return self.craft_id.lower()
        if self.kind is CellKind.HIT:
            return HIT_MARK
        if self.kind is CellKind.MISS:
            return MISS_MARK
        return BLANK

    @classmethod
    def empty(cls):
        return cls(CellKind.EMPTY)

    @classmethod
    def unknown(cls):
        return cls(CellKind.UNKNOWN)

    @classmethod
    def occupied(cls, craft_id):
        return cls(CellKind.OCCUPIED, craft_id.upper())

    @classmethod
    def occupied_hit(cls, craft_id):
        return cls(CellKind.OCCUPIED_HIT, craft_id.upper())

    @classmethod
    def hit(cls):
        return cls(CellKind.HIT)

    @classmethod
    def miss(cls):
        return cls(CellKind.MISS)


def _check_dimensions(width, height):
    try:
        width, height = int(width), int(height)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"Grid dimensions must be integers, got {width!r} x {height!r}.") from None
    if width <= 0 or height <= 0:
        raise InvalidConfiguration(f"Grid dimensions must be positive, got {width} x {height}.")
    return width, height


class Grid:
    """
    A width x height matrix of cells, indexed by zero-based (x, y).

    Cells are stored as single characters in a numpy array (row = y), which is
    also what ``rows()`` hands out for display.
    """

    def __init__(self, width=None, height=None, kind=GridKind.HOME):
        if width is None and height is None:
            width, height = config.DEFAULT_DIMENSIONS
        self.width, self.height = _check_dimensions(width, height)
        self.kind = kind
        self.matrix = np.full((self.height, self.width), BLANK, dtype="<U1")

    @classmethod
    def tracking(cls, width, height):
        return cls(width, height, kind=GridKind.TRACKING)

    @property
    def dimensions(self):
        return self.width, self.height

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x, y):
        if not self.in_bounds(x, y):
            raise OutOfBounds(
                f"({x}, {y}) is outside the {self.width} x {self.height} grid."
            )

    # ------------------------------------------------------------------ #
    # Cell access
    # ------------------------------------------------------------------ #
    def cell_at(self, x, y):
        """Return the Cell at (x, y)."""
        self._check_bounds(x, y)
        token = str(self.matrix[y, x])
        if self.kind is GridKind.TRACKING:
            if token == HIT_MARK:
                return Cell.hit()
            if token == MISS_MARK:
                return Cell.miss()
            return Cell.unknown()
        if token == BLANK:
            return Cell.empty()
        if token.isupper():
            return Cell.occupied(token)
        return Cell.occupied_hit(token)

    def mark(self, x, y, cell):
        """Write ``cell`` at (x, y)."""
        allowed = HOME_KINDS if self.kind is GridKind.HOME else TRACKING_KINDS
        if cell.kind not in allowed:
            raise InvalidConfiguration(f"{cell.kind.name} cells do not belong on a {self.kind.value} grid.")
        self._check_bounds(x, y)
        self.matrix[y, x] = cell.token

    def cells_of(self, craft_id):
        """Coordinates on a home grid holding ``craft_id``, hit or not."""
        ys, xs = np.nonzero(np.char.upper(self.matrix) == craft_id.upper())
        return sorted(zip(xs.tolist(), ys.tolist()))

    def rows(self):
        """Read-only view of the grid as rows of single-character tokens."""
        return tuple(tuple(str(token) for token in row) for row in self.matrix)

    def clear(self):
        self.matrix[:, :] = BLANK

    # ------------------------------------------------------------------ #
    # Placement
    # ------------------------------------------------------------------ #
    def _segment(self, x, y, length, orientation):
        if orientation is Orientation.HORIZONTAL:
            return self.matrix[y, x:x + length]
        return self.matrix[y:y + length, x]

    def _fits(self, position, length):
        x, y = position.x, position.y
        if not self.in_bounds(x, y):
            return False
        if position.orientation is Orientation.HORIZONTAL:
            return x + length <= self.width
        return y + length <= self.height

    def _is_clear(self, position, length):
        return bool(np.all(self._segment(position.x, position.y, length, position.orientation) == BLANK))

    def _put(self, craft, position):
        self._segment(position.x, position.y, craft.length, position.orientation)[:] = craft.id
        craft.position = position

    def place_fleet(self, fleet, rng=None, max_attempts=None):
        """
        Lay ``fleet`` out on the grid with no overlap.

        Craft that already carry a position keep it and go down first; the
        rest get a random orientation and bow, retried on collision.
        """
        if self.kind is not GridKind.HOME:
            raise InvalidConfiguration("A fleet can only be placed on a home grid.")
        rng = rng or random
        if max_attempts is None:
            max_attempts = config.MAX_PLACEMENT_ATTEMPTS

        ids = [craft.id for craft in fleet]
        if len(ids) != len(set(ids)):
            raise InvalidConfiguration(f"Craft ids must be unique within a fleet, got {ids}.")

        self.clear()

        for craft in fleet:
            if craft.position is None:
                continue
            if not self._fits(craft.position, craft.length):
                raise InvalidConfiguration(f"{craft.name} at {craft.position} does not fit on the grid.")
            if not self._is_clear(craft.position, craft.length):
                raise InvalidConfiguration(f"{craft.name} at {craft.position} overlaps another craft.")
            self._put(craft, craft.position)

        for craft in fleet:
            if craft.position is None:
                self._place_randomly(craft, rng, max_attempts)

    def _place_randomly(self, craft, rng, max_attempts):
        if craft.length > max(self.width, self.height):
            raise PlacementInfeasible(
                f"{craft.name} (length {craft.length}) is longer than the "
                f"{self.width} x {self.height} grid."
            )
        orientations = list(Orientation)
        for attempt in range(1, max_attempts + 1):
            orientation = rng.choice(orientations)
            max_x, max_y = self.width - 1, self.height - 1
            if orientation is Orientation.HORIZONTAL:
                max_x = self.width - craft.length
            else:
                max_y = self.height - craft.length
            if max_x < 0 or max_y < 0:
                continue  # does not fit this way round

            position = Position(rng.randint(0, max_x), rng.randint(0, max_y), orientation)
            if not self._is_clear(position, craft.length):
                continue

            self._put(craft, position)
            logger.debug(f"Placed {craft.name} at {position} after {attempt} attempt(s)")
            return

        raise PlacementInfeasible(
            f"Could not place {craft.name} on the {self.width} x {self.height} grid "
            f"in {max_attempts} attempts."
        )

    def __repr__(self):
        return f"Grid({self.width}, {self.height}, kind={self.kind.name})"
