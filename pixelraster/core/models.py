"""Grid value types shared by every rasterizer."""

from __future__ import annotations

import numbers
from dataclasses import dataclass

from pixelraster.core.errors import InvalidArgumentError


def _as_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return int(value)


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Grid cell coordinate."""

    x: int
    y: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _as_int("x", self.x))
        object.__setattr__(self, "y", _as_int("y", self.y))

    def offset(self, dx: int, dy: int) -> Position:
        """Return a copy translated by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class Size:
    """Non-negative extent in cells."""

    width: int
    height: int

    def __post_init__(self) -> None:
        width = _as_int("width", self.width)
        height = _as_int("height", self.height)
        if width < 0 or height < 0:
            raise InvalidArgumentError(f"size must be non-negative, got {width}x{height}")
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 and self.height == 0
