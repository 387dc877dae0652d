"""Cubic Bézier flattening onto the cell grid."""

from __future__ import annotations

import logging
import math

from pixelraster.core.errors import InvalidArgumentError
from pixelraster.core.line import line
from pixelraster.core.models import Position

logger = logging.getLogger(__name__)


def bezier_samples(
    resolution: int, p0: Position, p1: Position, p2: Position, p3: Position
) -> list[Position]:
    """Sample the curve at ``resolution + 1`` evenly spaced parameter values.

    Coordinates are evaluated in floating point and floored per axis.
    """
    if resolution < 1:
        raise InvalidArgumentError(f"resolution must be at least 1, got {resolution}")
    samples: list[Position] = []
    for i in range(resolution + 1):
        t = i / resolution
        u = 1.0 - t
        b0 = u * u * u
        b1 = 3.0 * u * u * t
        b2 = 3.0 * u * t * t
        b3 = t * t * t
        x = b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x
        y = b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y
        samples.append(Position(math.floor(x), math.floor(y)))
    return samples


def bezier(
    resolution: int, p0: Position, p1: Position, p2: Position, p3: Position
) -> list[Position]:
    """Approximate a cubic Bézier by ``resolution`` joined line segments.

    Each segment is rasterized with :func:`line` and the results are
    concatenated, so the cell at every internal join appears twice.
    """
    samples = bezier_samples(resolution, p0, p1, p2, p3)
    result: list[Position] = []
    for start, end in zip(samples, samples[1:]):
        result.extend(line(start, end))
    logger.debug(
        "raster_bezier resolution=%d samples=%d cells=%d", resolution, len(samples), len(result)
    )
    return result
