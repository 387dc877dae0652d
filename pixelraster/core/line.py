"""Midpoint line rasterization."""

from __future__ import annotations

import logging

from pixelraster.core.models import Position

logger = logging.getLogger(__name__)


def line(p0: Position, p1: Position) -> list[Position]:
    """Return the 8-connected cells from ``p0`` to ``p1``, both included.

    Works in every octant. The decision variable stays a float (it starts at
    half a step) while positions stay integral.
    """
    dx = float(abs(p1.x - p0.x))
    dy = float(abs(p1.y - p0.y))
    sx = 1 if p1.x > p0.x else -1
    sy = 1 if p1.y > p0.y else -1
    error = dx / 2 if dx > dy else -dy / 2

    x, y = p0.x, p0.y
    result = [p0]
    while (x, y) != (p1.x, p1.y):
        snapshot = error
        if snapshot > -dx:
            error -= dy
            x += sx
        if snapshot < dy:
            error += dx
            y += sy
        result.append(Position(x, y))

    logger.debug("raster_line from=%s to=%s cells=%d", p0, p1, len(result))
    return result
