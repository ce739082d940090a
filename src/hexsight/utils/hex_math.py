"""
Hexagonal coordinate system mathematics for hexsight.

This module implements the hex vector operations the field of view scan
needs:
- Distance calculations between hexes
- The six hex directions and the twelve-direction star
- Finding adjacent hexes, rings and filled ranges

Coordinate Systems:
-------------------
We use two coordinate systems:

1. Cell Coordinates (x, y) - for storage and representation
   - x: axis pointing to the south-east neighbour
   - y: axis pointing to the south-west neighbour
   - (1, 1) is the south neighbour, (-1, -1) the north neighbour
   - Used in HexCoord dataclass

2. Cube Coordinates (a, b, c) - for distance calculations
   - Constraint a + b + c = 0
   - Makes distance calculation simple: max(|da|, |db|, |dc|)
   - Conversion: a = x, b = -y, c = y - x

References:
-----------
Based on the excellent guide at: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True)
class HexCoord:
    """
    A hexagonal coordinate, or an offset between two of them.

    Attributes:
        x: South-east axis coordinate
        y: South-west axis coordinate

    Coordinates double as vectors: they add, subtract and scale, so the
    same type is used for absolute map positions and for offsets relative
    to a field of view origin.

    Example:
        >>> origin = HexCoord(x=0, y=0)
        >>> neighbor = HexCoord(x=1, y=1)
        >>> hex_distance(origin, neighbor)
        1
    """

    x: int
    y: int

    def __hash__(self) -> int:
        """Make HexCoord hashable for use in sets and dicts."""
        return hash((self.x, self.y))

    def __add__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.x - other.x, self.y - other.y)

    def __neg__(self) -> HexCoord:
        return HexCoord(-self.x, -self.y)

    def __mul__(self, scalar: int) -> HexCoord:
        return HexCoord(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__


ORIGIN = HexCoord(0, 0)


def axial_to_cube(coord: HexCoord) -> tuple[int, int, int]:
    """
    Convert cell coordinates (x, y) to cube coordinates (a, b, c).

    The conversion follows:
        a = x
        b = -y
        c = y - x

    This maintains the cube coordinate constraint: a + b + c = 0

    Example:
        >>> axial_to_cube(HexCoord(x=1, y=2))
        (1, -2, 1)
    """
    return coord.x, -coord.y, coord.y - coord.x


def cube_to_axial(a: int, b: int, c: int) -> HexCoord:  # noqa: ARG001
    """
    Convert cube coordinates (a, b, c) back to cell coordinates (x, y).

    The c parameter is accepted for API consistency with cube coordinates,
    but is not used in the conversion as it's redundant (c = -a - b).
    """
    return HexCoord(x=a, y=-b)


def hex_length(offset: HexCoord) -> int:
    """
    Number of hex steps needed to cover the given offset.

    When both components share a sign the move runs along the (1, 1) axis
    and the longer component wins; otherwise the components add up.

    Example:
        >>> hex_length(HexCoord(1, -1))
        2
        >>> hex_length(HexCoord(2, 3))
        3
    """
    ax, ay, az = axial_to_cube(offset)
    return max(abs(ax), abs(ay), abs(az))


def hex_distance(a: HexCoord, b: HexCoord) -> int:
    """
    Calculate the distance between two hexes.

    The distance is the minimum number of hex steps to move from hex a to
    hex b.

    Example:
        >>> hex_distance(HexCoord(x=0, y=0), HexCoord(x=2, y=-1))
        3
    """
    return hex_length(b - a)


class Dir6(IntEnum):
    """The six hex directions, clockwise starting from north."""

    NORTH = 0
    NORTHEAST = 1
    SOUTHEAST = 2
    SOUTH = 3
    SOUTHWEST = 4
    NORTHWEST = 5

    @classmethod
    def from_int(cls, n: int) -> Dir6:
        """Wrap any integer to a direction; negative values count backwards."""
        return cls(n % 6)

    def to_offset(self) -> HexCoord:
        return _DIR6_OFFSETS[self]


_DIR6_OFFSETS: tuple[HexCoord, ...] = (
    HexCoord(-1, -1),  # North
    HexCoord(0, -1),  # Northeast
    HexCoord(1, 0),  # Southeast
    HexCoord(1, 1),  # South
    HexCoord(0, 1),  # Southwest
    HexCoord(-1, 0),  # Northwest
)


class Dir12(IntEnum):
    """Twelve directions: the six hex rods and the diagonals between them.

    Even members point straight at a neighbour and match ``Dir6(n // 2)``.
    Odd members point between two neighbours, at the nearest hex two steps
    away.
    """

    NORTH = 0
    NORTH_NORTHEAST = 1
    NORTHEAST = 2
    EAST = 3
    SOUTHEAST = 4
    SOUTH_SOUTHEAST = 5
    SOUTH = 6
    SOUTH_SOUTHWEST = 7
    SOUTHWEST = 8
    WEST = 9
    NORTHWEST = 10
    NORTH_NORTHWEST = 11

    @classmethod
    def from_int(cls, n: int) -> Dir12:
        return cls(n % 12)

    def to_offset(self) -> HexCoord:
        rod = Dir6.from_int(self // 2).to_offset()
        if self % 2 == 0:
            return rod
        return rod + Dir6.from_int(self // 2 + 1).to_offset()


def hex_neighbors(coord: HexCoord) -> list[HexCoord]:
    """
    Find all 6 adjacent hexes to the given hex, clockwise from north.

    Example:
        >>> neighbors = hex_neighbors(HexCoord(x=0, y=0))
        >>> len(neighbors)
        6
        >>> HexCoord(x=1, y=1) in neighbors
        True
    """
    return [coord + direction.to_offset() for direction in Dir6]


def hex_ring(center: HexCoord, radius: int) -> list[HexCoord]:
    """
    Find the hexes at exactly ``radius`` steps from the center.

    The ring starts at the north corner and walks clockwise, visiting the
    cells in the same order as increasing winding index in the field of
    view scan. A radius of 0 yields just the center.

    Raises:
        ValueError: If radius is negative
    """
    if radius < 0:
        msg = f"Ring radius must be non-negative, got {radius}"
        raise ValueError(msg)
    if radius == 0:
        return [center]

    ring = []
    for sector in range(6):
        corner = center + Dir6.from_int(sector).to_offset() * radius
        tangent = Dir6.from_int(sector + 2).to_offset()
        for step in range(radius):
            ring.append(corner + tangent * step)
    return ring


def hexes_in_range(center: HexCoord, n: int) -> list[HexCoord]:
    """
    Find all hexes within range n of the center hex (inclusive).

    The number of hexes follows the formula: 3n^2 + 3n + 1

    Raises:
        ValueError: If n is negative

    Example:
        >>> len(hexes_in_range(HexCoord(x=0, y=0), n=1))
        7
    """
    if n < 0:
        msg = f"Range n must be non-negative, got {n}"
        raise ValueError(msg)

    cx, cy, cz = axial_to_cube(center)

    hexes = []

    # Iterate through the cube bounding box, keeping the constraint a + b + c = 0
    for da in range(-n, n + 1):
        for db in range(max(-n, -da - n), min(n, -da + n) + 1):
            dc = -da - db
            hexes.append(cube_to_axial(cx + da, cy + db, cz + dc))

    return hexes
