"""Symmetric shadowcasting field of view for hexagonal maps.

The scan walks outward ring by ring. Each ring is covered by arcs, spans of
cells that share one user value. When the value changes partway through an
arc the arc splits, and every finished span with a visible value projects
onto the next ring, where the user value decides again what is seen.

What a cell's value is, and whether anything beyond it is visible, is up to
the caller's ``FovValue``. The scan only stops when ``advance`` returns None
everywhere, so values must bound themselves, typically by a sight radius.

Example:
    >>> from dataclasses import dataclass
    >>> from hexsight.utils.hex_math import hex_length
    >>> @dataclass(frozen=True)
    ... class Lamp:
    ...     range: int
    ...
    ...     def advance(self, offset):
    ...         return self if hex_length(offset) < self.range else None
    >>> cells = {offset for offset, _ in HexFov(Lamp(2))}
    >>> len(cells)
    7
"""

from __future__ import annotations

from typing import Generic, TypeVar

from hexsight.domain.arc import Arc
from hexsight.domain.polar import PolarPoint
from hexsight.interfaces.fov_value import FovValue
from hexsight.utils.hex_math import ORIGIN, HexCoord

T = TypeVar("T", bound=FovValue)


def _is_fake_isometric_wall(value: FovValue, offset: HexCoord) -> bool:
    check = getattr(value, "is_fake_isometric_wall", None)
    return check is not None and check(offset)


class HexFov(Generic[T]):
    """Field of view iterator for a hexagonal map.

    Yields ``(offset, value)`` pairs for visible cells, offsets relative to
    the origin. The origin itself comes first. Beyond that there is no
    ordering by distance or angle, and a cell may be yielded more than once,
    so callers wanting a set should deduplicate by offset.
    """

    def __init__(self, init: T) -> None:
        self._stack: list[Arc[T]] = [Arc.spanning(PolarPoint(0.0, 1), PolarPoint(6.0, 1), init)]
        # Extra values generated by special cases, emptied before any scan work.
        # The ring scan never reaches the origin, so it is seeded here.
        self._side_channel: list[tuple[HexCoord, T]] = [(ORIGIN, init)]

    def __iter__(self) -> HexFov[T]:
        return self

    def __next__(self) -> tuple[HexCoord, T]:
        while True:
            if self._side_channel:
                return self._side_channel.pop()

            if not self._stack:
                raise StopIteration

            current = self._stack.pop()
            if current.arc_has_split(self._stack):
                continue

            self._make_corners_visible(current)

            pos = current.pt.to_offset()
            value = current.group_value

            current.advance(self._stack)

            if value is not None:
                return pos, value

    def _make_corners_visible(self, current: Arc[T]) -> None:
        """Add visible horizontal corners to fake isometric rooms."""
        # Only a vertical step along the ring has a side point to check.
        side_pos = current.pt.side_point()
        if side_pos is None:
            return

        next_pt = current.pt.next()
        pt_offset = current.pt.to_offset()
        next_offset = next_pt.to_offset()
        next_value = current.prev_value.advance(next_offset)

        # The next cell must be in the same span and value group, and the
        # current cell must be wallform.
        if not next_pt.is_below(current.end):
            return
        if not _is_fake_isometric_wall(current.prev_value, pt_offset):
            return
        if next_value != current.prev_value.advance(pt_offset):
            return
        if next_value is None:
            return

        # Both the next cell and the side cell must be wallforms, and the side
        # cell must be hidden from strict hex visibility.
        if (
            _is_fake_isometric_wall(next_value, next_offset)
            and next_value.advance(side_pos) is None
            and _is_fake_isometric_wall(next_value, side_pos)
        ):
            self._side_channel.append((side_pos, current.prev_value))
