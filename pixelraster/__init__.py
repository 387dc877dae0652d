"""Integer grid rasterization for lines, cubic Béziers, rectangles and ellipses."""

from pixelraster.core import (
    InvalidArgumentError,
    Position,
    Size,
    bezier,
    bezier_samples,
    circle,
    ellipse,
    line,
    rectangle,
    rectangle2,
)

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
