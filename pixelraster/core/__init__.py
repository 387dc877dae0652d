"""Rasterizers producing grid cells for lines, curves and closed shapes."""

from pixelraster.core.bezier import bezier, bezier_samples
from pixelraster.core.ellipse import circle, ellipse
from pixelraster.core.errors import InvalidArgumentError
from pixelraster.core.line import line
from pixelraster.core.models import Position, Size
from pixelraster.core.rectangle import rectangle, rectangle2

__all__ = [
    "InvalidArgumentError",
    "Position",
    "Size",
    "bezier",
    "bezier_samples",
    "circle",
    "ellipse",
    "line",
    "rectangle",
    "rectangle2",
]
