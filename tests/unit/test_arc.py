"""Unit tests for ring arcs of the field of view scan."""

from hexsight.domain.arc import Arc
from hexsight.domain.polar import PolarPoint
from hexsight.domain.visibility import RadiusFov


def _full_ring_one(value: RadiusFov) -> Arc[RadiusFov]:
    return Arc.spanning(PolarPoint(0.0, 1), PolarPoint(6.0, 1), value)


class TestConstruction:
    def test_group_value_comes_from_first_cell(self) -> None:
        arc = _full_ring_one(RadiusFov(2))
        assert arc.pt == arc.begin
        assert arc.group_value == RadiusFov(2)

    def test_first_cell_out_of_range_is_opaque(self) -> None:
        arc = _full_ring_one(RadiusFov(1))
        assert arc.group_value is None


class TestSplit:
    def test_unchanged_value_does_not_split(self) -> None:
        arc = _full_ring_one(RadiusFov(2))
        stack: list[Arc[RadiusFov]] = []
        assert arc.arc_has_split(stack) is False
        assert stack == []

    def test_opaque_group_only_continues(self) -> None:
        arc = Arc(
            begin=PolarPoint(0.0, 1),
            pt=PolarPoint(1.5, 1),
            end=PolarPoint(6.0, 1),
            prev_value=RadiusFov(2),
            group_value=None,
        )
        stack: list[Arc[RadiusFov]] = []

        assert arc.arc_has_split(stack) is True
        assert stack == [
            Arc(
                begin=PolarPoint(1.5, 1),
                pt=PolarPoint(1.5, 1),
                end=PolarPoint(6.0, 1),
                prev_value=RadiusFov(2),
                group_value=RadiusFov(2),
            )
        ]

    def test_visible_group_is_extended_outward(self) -> None:
        arc = Arc(
            begin=PolarPoint(0.0, 1),
            pt=PolarPoint(1.5, 1),
            end=PolarPoint(6.0, 1),
            prev_value=RadiusFov(2),
            group_value=RadiusFov(5),
        )
        stack: list[Arc[RadiusFov]] = []

        assert arc.arc_has_split(stack) is True
        continuation, extension = stack
        assert continuation.begin == PolarPoint(1.5, 1)
        assert continuation.group_value == RadiusFov(2)
        # The finished group sits on top so it is scanned first.
        assert extension == Arc(
            begin=PolarPoint(0.0, 2),
            pt=PolarPoint(0.0, 2),
            end=PolarPoint(3.0, 2),
            prev_value=RadiusFov(5),
            group_value=RadiusFov(5),
        )


class TestAdvance:
    def test_stays_on_ring_while_cells_remain(self) -> None:
        arc = _full_ring_one(RadiusFov(2))
        stack: list[Arc[RadiusFov]] = []

        arc.advance(stack)

        assert stack == [arc]
        assert arc.pt == PolarPoint(0.5, 1)
        assert arc.pt.winding_index == 1

    def test_exhausted_arc_graduates_to_next_ring(self) -> None:
        arc = Arc(
            begin=PolarPoint(0.0, 1),
            pt=PolarPoint(5.5, 1),
            end=PolarPoint(6.0, 1),
            prev_value=RadiusFov(3),
            group_value=RadiusFov(3),
        )
        stack: list[Arc[RadiusFov]] = []

        arc.advance(stack)

        assert stack == [Arc.spanning(PolarPoint(0.0, 2), PolarPoint(12.0, 2), RadiusFov(3))]
        assert stack[0].group_value == RadiusFov(3)

    def test_exhausted_opaque_arc_is_dropped(self) -> None:
        arc = Arc(
            begin=PolarPoint(0.0, 1),
            pt=PolarPoint(5.5, 1),
            end=PolarPoint(6.0, 1),
            prev_value=RadiusFov(2),
            group_value=None,
        )
        stack: list[Arc[RadiusFov]] = []

        arc.advance(stack)

        assert stack == []

    def test_full_ring_visits_each_cell(self) -> None:
        arc = _full_ring_one(RadiusFov(2))
        stack: list[Arc[RadiusFov]] = []
        visited = []
        while True:
            visited.append(arc.pt.winding_index)
            arc.advance(stack)
            top = stack.pop()
            if top is not arc:
                break
        # Winding index 6 wraps onto the first cell: the span ends at its center.
        assert visited == [0, 1, 2, 3, 4, 5, 6]
        assert top.begin.radius == 2
