"""Craft (vessel) model for the salvo engine."""

from dataclasses import dataclass
from enum import Enum

from salvo.errors import InvalidCraft


class Orientation(Enum):
    """Allowed craft orientations."""

    HORIZONTAL = "H"
    VERTICAL = "V"


@dataclass(frozen=True)
class Position:
    """Bow coordinate (zero-based) plus the direction the hull extends in."""

    x: int
    y: int
    orientation: Orientation = Orientation.HORIZONTAL

    def cells(self, length):
        """Return the ``length`` consecutive (x, y) cells starting at the bow."""
        if self.orientation is Orientation.HORIZONTAL:
            return [(self.x + i, self.y) for i in range(length)]
        return [(self.x, self.y + i) for i in range(length)]


class Craft:
    """
    A single vessel.
    Its length is both the number of cells it covers and its point value.
    The id marks the craft on its owner's home grid and is lower-cased there
    once that cell has been hit, so it has to be a single letter.
    """

    def __init__(self, name, length, id=None, position=None):
        if not name or not str(name).strip():
            raise InvalidCraft("Craft name not provided.")
        try:
            length = int(length)
        except (TypeError, ValueError):
            raise InvalidCraft(f"Craft length must be an integer, got {length!r}.") from None
        if length <= 0:
            raise InvalidCraft(f"Craft length must be positive, got {length}.")

        if id is None:
            id = str(name).strip()[0]
        id = str(id).upper()
        if len(id) != 1 or not id.isalpha():
            raise InvalidCraft(f"Craft id must be a single letter, got {id!r}.")

        self.id = id
        self.name = str(name)
        self.length = length
        self.hits = 0
        # Where the caller asked for the bow; random placement leaves it None.
        self.requested_position = position
        self.position = position

    @classmethod
    def from_spec(cls, spec):
        """Build a craft from a mapping with name, length and optional id/position."""
        if isinstance(spec, cls):
            return cls(spec.name, spec.length, id=spec.id, position=spec.requested_position)
        try:
            name = spec["name"]
            length = spec["length"]
        except (KeyError, TypeError):
            raise InvalidCraft(f"Craft spec needs a name and a length: {spec!r}") from None

        position = spec.get("position")
        if position is not None and not isinstance(position, Position):
            try:
                x, y, *rest = position
                orientation = Orientation(rest[0]) if rest else Orientation.HORIZONTAL
                position = Position(int(x), int(y), orientation)
            except (TypeError, ValueError):
                raise InvalidCraft(f"Bad position for {name!r}: {position!r}") from None
        return cls(name, length, id=spec.get("id"), position=position)

    @property
    def remaining(self):
        return self.length - self.hits

    def is_sunk(self):
        return self.remaining <= 0

    def record_hit(self):
        """Tally a hit and hand back what is left of the craft's value."""
        self.hits += 1
        return self.remaining

    def cells(self):
        """Cells covered by the craft, or an empty list if it is not placed yet."""
        if self.position is None:
            return []
        return self.position.cells(self.length)

    def __repr__(self):
        return (
            f"Craft(id={self.id!r}, name={self.name!r}, length={self.length}, "
            f"hits={self.hits}, position={self.position!r})"
        )
