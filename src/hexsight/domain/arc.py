"""Arcs: spans of a hex ring that share one propagated field of view value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from hexsight.domain.polar import PolarPoint
from hexsight.interfaces.fov_value import FovValue

T = TypeVar("T", bound=FovValue)


@dataclass(slots=True)
class Arc(Generic[T]):
    """A contiguous span ``[begin, end)`` of one ring being scanned.

    Attributes:
        begin: Start point of the span
        pt: Point currently being processed
        end: End point of the span
        prev_value: Value of the parent span on the previous ring
        group_value: Value shared by the span so far, None if it is opaque
    """

    begin: PolarPoint
    pt: PolarPoint
    end: PolarPoint
    prev_value: T
    group_value: T | None

    @classmethod
    def spanning(cls, begin: PolarPoint, end: PolarPoint, prev_value: T) -> Arc[T]:
        """Start a new arc at ``begin``, taking its group value from the first cell."""
        return cls(
            begin=begin,
            pt=begin,
            end=end,
            prev_value=prev_value,
            group_value=prev_value.advance(begin.to_offset()),
        )

    def advance(self, stack: list[Arc[T]]) -> None:
        """Step to the next cell and push whatever continues the scan onto ``stack``.

        The arc goes back on the stack while it has cells left on its ring.
        Once the ring is done, a non-opaque arc hands the whole span over to
        a new arc on the next ring out.
        """
        self.pt = self.pt.next()
        if self.pt.is_below(self.end):
            stack.append(self)
        elif self.group_value is not None:
            stack.append(Arc.spanning(self.begin.further(), self.end.further(), self.group_value))

    def arc_has_split(self, stack: list[Arc[T]]) -> bool:
        """Split the arc into ``stack`` if the current cell starts a new value group.

        The rest of the ring continues in a new arc under the new group, and
        the finished group, unless opaque, is extended onto the next ring.

        Returns:
            True if the arc was split and replaced on the stack
        """
        next_value = self.prev_value.advance(self.pt.to_offset())
        if next_value == self.group_value:
            return False

        # Built directly to avoid advancing prev_value a second time.
        stack.append(
            Arc(
                begin=self.pt,
                pt=self.pt,
                end=self.end,
                prev_value=self.prev_value,
                group_value=next_value,
            )
        )

        if self.group_value is not None:
            stack.append(Arc.spanning(self.begin.further(), self.pt.further(), self.group_value))

        return True
