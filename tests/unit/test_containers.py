"""Tests for Row, Column and Padding containers."""

import pytest

from containers.padding import Padding
from containers.stack import Column, Row, column_part_behavior, row_part_behavior
from element.element import Element


class TestRow:

    def test_scenario_positions_and_width(self, boxes):
        row = Row(boxes((10, 1), (20, 1), (30, 1)), spacing=5)
        row.apply_part_behavior()
        assert [p.x for p in row.parts] == [0, 15, 40]

    def test_spacing_is_charged_once_per_child(self, boxes):
        # n * spacing, not (n - 1) * spacing
        row = Row(boxes((10, 1), (20, 1), (30, 1)), spacing=5)
        assert row.width == 5 * 3 + 10 + 20 + 30 == 75

    def test_height_is_tallest_child(self, boxes):
        row = Row(boxes((1, 4), (1, 9), (1, 2)), spacing=1)
        assert row.height == 9

    def test_height_override(self, boxes):
        row = Row(boxes((1, 4), (1, 9)), spacing=1, height=50)
        assert row.height == 50

    def test_empty_row(self):
        row = Row([], spacing=5)
        assert (row.width, row.height) == (0, 0)
        assert Row([], spacing=5, height=12).height == 12

    def test_position_passed_through(self, boxes):
        row = Row(boxes((1, 1)), spacing=0, x=30, y=40)
        assert (row.x, row.y) == (30, 40)

    @pytest.mark.parametrize("alignment,expected", [("top", 10), ("bottom", 40), ("center", 25), ("none", 3)])
    def test_cross_axis_alignment(self, alignment, expected):
        child = Element(y=3, width=10, height=10)
        row = Row([child], spacing=0, y=10, height=40, alignment=alignment)
        row.apply_part_behavior()
        assert row.parts[0].y == expected

    def test_children_are_replaced_with_copies(self, boxes):
        originals = boxes((10, 1), (20, 1))
        row = Row(originals, spacing=5)
        row.apply_part_behavior()
        assert len(row.parts) == 2
        assert all(p is not o for p, o in zip(row.parts, originals))
        # the originals were never moved
        assert [o.x for o in originals] == [0, 0]

    def test_row_keeps_its_own_list(self, boxes):
        parts = boxes((10, 1))
        row = Row(parts, spacing=5)
        parts.append(Element(width=100))
        assert len(row.parts) == 1

    def test_repeated_layout_is_stable(self, boxes):
        row = Row(boxes((10, 1), (20, 1), (30, 1)), spacing=5)
        row.apply_part_behavior()
        first = [p.x for p in row.parts]
        row.apply_part_behavior()
        assert [p.x for p in row.parts] == first

    def test_positions_ignore_row_x(self, boxes):
        # children get absolute offsets from 0, not from the row's own x
        row = Row(boxes((10, 1), (10, 1)), spacing=2, x=100)
        row.apply_part_behavior()
        assert [p.x for p in row.parts] == [0, 12]

    def test_part_behavior_uses_current_sibling_widths(self):
        part_behavior = row_part_behavior(1)
        parent = Element(height=10)
        parts = [Element(width=4), Element(width=6), Element(width=8)]
        parts[0] = Element(width=40)
        assert part_behavior(parent, parts, 2).x == 2 * 1 + 40 + 6


class TestColumn:

    def test_scenario_positions_and_height(self, boxes):
        column = Column(boxes((1, 10), (1, 20), (1, 30)), spacing=5)
        column.apply_part_behavior()
        assert [p.y for p in column.parts] == [0, 15, 40]
        assert column.height == 75

    def test_width_is_widest_child(self, boxes):
        column = Column(boxes((4, 1), (9, 1), (2, 1)), spacing=1)
        assert column.width == 9

    def test_width_override(self, boxes):
        column = Column(boxes((4, 1)), spacing=1, width=70)
        assert column.width == 70

    @pytest.mark.parametrize("alignment,expected", [("left", 10), ("right", 40), ("center", 25), ("none", 3)])
    def test_cross_axis_alignment(self, alignment, expected):
        child = Element(x=3, width=10, height=10)
        column = Column([child], spacing=0, x=10, width=40, alignment=alignment)
        column.apply_part_behavior()
        assert column.parts[0].x == expected

    def test_nested_row_is_laid_out_too(self, boxes):
        row = Row(boxes((10, 5), (10, 5)), spacing=1)
        column = Column([Element(width=5, height=7), row], spacing=3)
        column.apply_part_behavior()

        laid_row = column.parts[1]
        assert laid_row.y == 1 * 3 + 7
        assert [p.x for p in laid_row.parts] == [0, 11]

    def test_part_behavior_factory(self):
        part_behavior = column_part_behavior(2, "right")
        parent = Element(x=0, width=100)
        parts = [Element(height=10), Element(width=30, height=10)]
        placed = part_behavior(parent, parts, 1)
        assert (placed.x, placed.y) == (70, 1 * 2 + 10)


class TestPadding:

    def test_amounts_become_geometry(self, boxes):
        pad = Padding(boxes((1, 1)), 8, 6)
        assert (pad.x, pad.y, pad.width, pad.height) == (0, 0, 8, 6)

    def test_every_child_lands_on_the_amounts(self):
        pad = Padding([Element(x=50, y=60, width=5), Element(x=-1, y=2, width=7)], 8, 6)
        pad.apply_part_behavior()
        assert [(p.x, p.y) for p in pad.parts] == [(8, 6), (8, 6)]

    def test_children_are_copies(self):
        child = Element(x=50, y=60)
        pad = Padding([child], 8, 6)
        pad.apply_part_behavior()
        assert pad.parts[0] is not child
        assert (child.x, child.y) == (50, 60)
