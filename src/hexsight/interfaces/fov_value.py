"""Field of View Value Protocol Interface.

This module defines the protocol (interface) for the user data a field of
view scan carries from cell to cell along the lines of sight.
"""

from typing import Protocol, Self

from hexsight.utils.hex_math import HexCoord


class FovValue(Protocol):
    """Protocol defining the values propagated by a hex field of view scan.

    Implementations must be immutable: the scan keeps references to values
    from earlier rings and shares them between the spans it spawns. Two
    values that compare equal belong to the same visibility group, so the
    scan only splits a span where ``__eq__`` reports a change.

    Subclass this protocol explicitly to inherit the default
    ``is_fake_isometric_wall``. Structural implementations that do not
    define it are treated as never containing walls.
    """

    def advance(self, offset: HexCoord) -> Self | None:
        """Construct the value for ``offset`` based on this one.

        Args:
            offset: Position of the new cell relative to the origin

        Returns:
            The value for the new cell, or None if the cell is not visible
            and nothing beyond it along this line of sight is either
        """
        ...

    def is_fake_isometric_wall(self, offset: HexCoord) -> bool:
        """Return whether the given offset contains an isometric wall tile.

        Used only to show acute corners of fake isometric rooms.
        """
        return False
