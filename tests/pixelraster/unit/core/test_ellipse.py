from __future__ import annotations

import pytest

from pixelraster.core.ellipse import circle, ellipse
from pixelraster.core.errors import InvalidArgumentError
from pixelraster.core.models import Position, Size

SIZES = (Size(1, 1), Size(2, 2), Size(3, 2), Size(2, 7), Size(9, 4), Size(12, 12), Size(0, 5))
CENTERS = (Position(0, 0), Position(7, -3), Position(-20, 11))


def test_circle_radius_two_reference_sequence() -> None:
    assert circle(2, Position(0, 0)) == [
        Position(0, 2),
        Position(0, 2),
        Position(0, -2),
        Position(0, -2),
        Position(1, 2),
        Position(-1, 2),
        Position(1, -2),
        Position(-1, -2),
        Position(2, 0),
        Position(-2, 0),
        Position(2, 0),
        Position(-2, 0),
        Position(2, 1),
        Position(-2, 1),
        Position(2, -1),
        Position(-2, -1),
    ]


def test_ellipse_quadrant_walk_region_one_then_region_two() -> None:
    center = Position(10, 10)
    cells = ellipse(Size(3, 2), center)
    local = [(p.x - center.x, p.y - center.y) for p in cells[0::4]]
    assert local == [(0, 2), (1, 2), (2, 1), (3, 0), (3, 1)]


@pytest.mark.parametrize("size", SIZES)
@pytest.mark.parametrize("center", CENTERS)
def test_ellipse_is_symmetric_about_center(size: Size, center: Position) -> None:
    cells = ellipse(size, center)
    assert len(cells) % 4 == 0
    cell_set = set(cells)
    for cell in cells:
        assert Position(2 * center.x - cell.x, cell.y) in cell_set
        assert Position(cell.x, 2 * center.y - cell.y) in cell_set


@pytest.mark.parametrize("size", SIZES)
def test_ellipse_stays_inside_bounds_and_touches_extremes(size: Size) -> None:
    center = Position(4, -4)
    cells = set(ellipse(size, center))
    for cell in cells:
        assert abs(cell.x - center.x) <= size.width
        assert abs(cell.y - center.y) <= size.height
    assert center.offset(0, size.height) in cells
    assert center.offset(0, -size.height) in cells
    assert center.offset(size.width, 0) in cells
    assert center.offset(-size.width, 0) in cells


@pytest.mark.parametrize("diameter", [0, 1, 2, 5, 13])
@pytest.mark.parametrize("center", CENTERS)
def test_circle_equals_ellipse_with_equal_axes(diameter: int, center: Position) -> None:
    assert circle(diameter, center) == ellipse(Size(diameter, diameter), center)


def test_zero_size_ellipse_collapses_to_center() -> None:
    center = Position(3, 3)
    assert ellipse(Size(0, 0), center) == [center] * 8


def test_flat_ellipse_terminates_on_the_axis() -> None:
    center = Position(0, 0)
    assert ellipse(Size(3, 0), center) == [
        center,
        center,
        center,
        center,
        Position(3, 0),
        Position(-3, 0),
        Position(3, 0),
        Position(-3, 0),
    ]


def test_circle_rejects_negative_diameter() -> None:
    with pytest.raises(InvalidArgumentError, match="diameter"):
        circle(-1, Position(0, 0))
