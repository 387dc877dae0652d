"""Four-way symmetric midpoint ellipse rasterization."""

from __future__ import annotations

import logging

from pixelraster.core.errors import InvalidArgumentError
from pixelraster.core.models import Position, Size

logger = logging.getLogger(__name__)


def ellipse(size: Size, center: Position) -> list[Position]:
    """Return the outline cells of an axis-aligned ellipse.

    ``size.width`` and ``size.height`` are the semi-axes: the distance in
    cells from ``center`` to the outermost cell along x and y. The outline is
    walked in two regions. Region 1 starts at the top ``(0, height)`` and
    steps x every iteration while the tangent slope stays at or below 1.
    Region 2 starts at ``(width, 0)`` and steps y. Each local point is
    mirrored into all four quadrants, so cells on the axes appear more than
    once. No deduplication is done.
    """
    a2 = size.width * size.width
    b2 = size.height * size.height
    cx, cy = center.x, center.y
    result: list[Position] = []

    x, y = 0, size.height
    sigma = 2 * b2 + a2 * (1 - 2 * size.height)
    while y >= 0 and b2 * x <= a2 * y:
        _emit_quadrants(result, cx, cy, x, y)
        if sigma >= 0:
            sigma += 4 * a2 * (1 - y)
            y -= 1
        sigma += b2 * (4 * x + 6)
        x += 1

    x, y = size.width, 0
    sigma = 2 * a2 + b2 * (1 - 2 * size.width)
    while x >= 0 and a2 * y <= b2 * x:
        _emit_quadrants(result, cx, cy, x, y)
        if sigma >= 0:
            sigma += 4 * b2 * (1 - x)
            x -= 1
        sigma += a2 * (4 * y + 6)
        y += 1

    logger.debug("raster_ellipse size=%s center=%s cells=%d", size, center, len(result))
    return result


def circle(diameter: int, center: Position) -> list[Position]:
    """Return ``ellipse(Size(diameter, diameter), center)``."""
    if diameter < 0:
        raise InvalidArgumentError(f"diameter must be non-negative, got {diameter}")
    return ellipse(Size(diameter, diameter), center)


def _emit_quadrants(out: list[Position], cx: int, cy: int, x: int, y: int) -> None:
    out.append(Position(cx + x, cy + y))
    out.append(Position(cx - x, cy + y))
    out.append(Position(cx + x, cy - y))
    out.append(Position(cx - x, cy - y))
