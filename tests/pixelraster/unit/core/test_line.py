from __future__ import annotations

import pytest

from pixelraster.core.line import line
from pixelraster.core.models import Position
from tests.pixelraster.conftest import ENDPOINT_PAIRS, is_eight_connected


@pytest.mark.parametrize(
    "point", [Position(0, 0), Position(-4, 9), Position(100, -100)]
)
def test_line_single_point(point: Position) -> None:
    assert line(point, point) == [point]


def test_line_shallow_reference_sequence() -> None:
    assert line(Position(0, 0), Position(3, 2)) == [
        Position(0, 0),
        Position(1, 1),
        Position(2, 1),
        Position(3, 2),
    ]


def test_line_steep_reference_sequence() -> None:
    assert line(Position(0, 0), Position(1, 5)) == [
        Position(0, 0),
        Position(0, 1),
        Position(0, 2),
        Position(1, 3),
        Position(1, 4),
        Position(1, 5),
    ]


def test_line_horizontal_and_vertical_are_unit_steps() -> None:
    assert line(Position(2, 1), Position(-1, 1)) == [
        Position(2, 1),
        Position(1, 1),
        Position(0, 1),
        Position(-1, 1),
    ]
    assert line(Position(0, 0), Position(0, 3)) == [
        Position(0, 0),
        Position(0, 1),
        Position(0, 2),
        Position(0, 3),
    ]


def test_line_diagonal() -> None:
    assert line(Position(0, 0), Position(-3, 3)) == [
        Position(0, 0),
        Position(-1, 1),
        Position(-2, 2),
        Position(-3, 3),
    ]


@pytest.mark.parametrize("p0,p1", ENDPOINT_PAIRS)
def test_line_starts_at_p0_and_ends_at_p1(p0: Position, p1: Position) -> None:
    cells = line(p0, p1)
    assert cells[0] == p0
    assert cells[-1] == p1
    assert cells.count(p1) == 1


@pytest.mark.parametrize("p0,p1", ENDPOINT_PAIRS)
def test_line_is_eight_connected_with_one_cell_per_major_step(p0: Position, p1: Position) -> None:
    cells = line(p0, p1)
    assert is_eight_connected(cells)
    assert len(cells) == max(abs(p1.x - p0.x), abs(p1.y - p0.y)) + 1
    assert len(set(cells)) == len(cells)
