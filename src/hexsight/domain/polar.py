"""Points on hex rings expressed in polar coordinates.

A ring of radius ``r`` around the origin holds ``6 * r`` cells. A polar point
names a position along that ring with a continuous angular coordinate
``pos`` measured in cells: the cell with winding index ``i`` covers
``[i - 0.5, i + 0.5)``. Index 0 is the north corner of the ring and the
index grows clockwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from hexsight.utils.hex_math import ORIGIN, Dir6, HexCoord


@dataclass(frozen=True, slots=True)
class PolarPoint:
    """A position on a hex ring.

    Attributes:
        pos: Angular position along the ring, in cells
        radius: Ring radius in hex steps
    """

    pos: float
    radius: int

    @property
    def winding_index(self) -> int:
        """Index of the discrete hex cell along the ring that contains this point."""
        return math.floor(self.pos + 0.5)

    @property
    def end_index(self) -> int:
        """First winding index not covered when this point ends a half-open span."""
        return math.ceil(self.pos + 0.5)

    def is_below(self, other: PolarPoint) -> bool:
        return self.winding_index < other.end_index

    def to_offset(self) -> HexCoord:
        """Cell offset from the origin for this point."""
        if self.radius == 0:
            return ORIGIN

        index = self.winding_index
        # Floor modulo keeps negative angular positions on the right sextant.
        sector = (index % (self.radius * 6)) // self.radius
        edge_offset = index % self.radius

        rod = Dir6.from_int(sector).to_offset()
        tangent = Dir6.from_int(sector + 2).to_offset()

        return rod * self.radius + tangent * edge_offset

    def next(self) -> PolarPoint:
        """The point on the boundary between this cell and the next one along the ring."""
        return PolarPoint(math.floor(self.pos + 0.5) + 0.5, self.radius)

    def further(self) -> PolarPoint:
        """The point at the same angular fraction on the ring with radius + 1."""
        return PolarPoint(self.pos * (self.radius + 1) / self.radius, self.radius + 1)

    def side_point(self) -> HexCoord | None:
        """Cell just outside the ring between this point and the next, if they meet vertically.

        When the step to the next cell runs along the (1, 1) axis, the two
        cells touch a third one outside the ring. The field of view uses it
        to show acute corners of fake isometric rooms that strict hex
        visibility would keep hidden.
        """
        a = self.to_offset()
        b = self.next().to_offset()

        if b.x == a.x + 1 and b.y == a.y + 1:
            # Going down the right rim.
            return HexCoord(a.x + 1, a.y)
        if b.x == a.x - 1 and b.y == a.y - 1:
            # Going up the left rim.
            return HexCoord(a.x - 1, a.y)
        return None
