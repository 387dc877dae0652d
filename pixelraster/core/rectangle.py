"""Axis-aligned rectangle outlines built from line segments."""

from __future__ import annotations

import logging

from pixelraster.core.line import line
from pixelraster.core.models import Position, Size

logger = logging.getLogger(__name__)


def rectangle(size: Size, origin: Position) -> list[Position]:
    """Return the outline of the rectangle spanning ``origin`` to ``origin + size``.

    A zero size yields no cells, unlike :func:`rectangle2` which returns the
    single corner for coincident points.
    """
    if size.is_empty:
        return []
    return rectangle2(origin, origin.offset(size.width, size.height))


def rectangle2(p: Position, q: Position) -> list[Position]:
    """Return the outline of the rectangle with opposite corners ``p`` and ``q``.

    Edges run clockwise from the top-left corner (top, right, bottom, left).
    Each edge stops one cell short of the next corner so every corner appears
    exactly once. A zero span on one axis gives the single line along the
    other axis; a span of 1 still goes through the edge walk, which keeps both
    sides of a two-cell-wide rectangle.
    """
    left, right = min(p.x, q.x), max(p.x, q.x)
    top, bottom = min(p.y, q.y), max(p.y, q.y)
    top_left = Position(left, top)
    top_right = Position(right, top)
    bottom_right = Position(right, bottom)
    bottom_left = Position(left, bottom)

    if left == right and top == bottom:
        result = [top_left]
    elif left == right:
        result = line(top_left, bottom_left)
    elif top == bottom:
        result = line(top_left, top_right)
    elif right - left == 1 and bottom - top == 1:
        result = [top_left, top_right, bottom_right, bottom_left]
    else:
        result = [
            *line(top_left, top_right.offset(-1, 0)),
            *line(top_right, bottom_right.offset(0, -1)),
            *line(bottom_right, bottom_left.offset(1, 0)),
            *line(bottom_left, top_left.offset(0, 1)),
        ]

    logger.debug("raster_rectangle corners=%s,%s cells=%d", p, q, len(result))
    return result
