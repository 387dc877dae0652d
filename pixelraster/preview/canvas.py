"""Numpy-backed canvas that accumulates rasterized cells."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import numpy as np

from pixelraster.core.errors import InvalidArgumentError
from pixelraster.core.models import Position


@dataclass(slots=True)
class PixelCanvas:
    """Hit-count grid covering ``width`` x ``height`` cells from ``origin``."""

    width: int
    height: int
    origin: Position = Position(0, 0)
    counts: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidArgumentError(
                f"canvas must be at least 1x1, got {self.width}x{self.height}"
            )
        self.counts = np.zeros((self.height, self.width), dtype=np.int64)

    @classmethod
    def fit(cls, positions: Sequence[Position], margin: int = 0) -> PixelCanvas:
        """Build a canvas around the bounding box of ``positions`` and plot them."""
        if positions:
            xs = [p.x for p in positions]
            ys = [p.y for p in positions]
            min_x, max_x, min_y, max_y = min(xs), max(xs), min(ys), max(ys)
        else:
            min_x = max_x = min_y = max_y = 0
        canvas = cls(
            width=max_x - min_x + 1 + 2 * margin,
            height=max_y - min_y + 1 + 2 * margin,
            origin=Position(min_x - margin, min_y - margin),
        )
        canvas.plot(positions)
        return canvas

    def in_bounds(self, position: Position) -> bool:
        """Return whether the position falls inside the canvas."""
        col = position.x - self.origin.x
        row = position.y - self.origin.y
        return 0 <= row < self.height and 0 <= col < self.width

    def plot(self, positions: Iterable[Position]) -> int:
        """Count every in-bounds position; return how many were out of bounds."""
        skipped = 0
        for position in positions:
            if not self.in_bounds(position):
                skipped += 1
                continue
            self.counts[position.y - self.origin.y, position.x - self.origin.x] += 1
        return skipped

    def hit_count(self, position: Position) -> int:
        """Return how many times the position was plotted."""
        if not self.in_bounds(position):
            return 0
        return int(self.counts[position.y - self.origin.y, position.x - self.origin.x])

    def filled(self) -> set[Position]:
        """Return the set of positions plotted at least once."""
        rows, cols = np.nonzero(self.counts)
        return {
            Position(int(col) + self.origin.x, int(row) + self.origin.y)
            for row, col in zip(rows, cols)
        }

    def to_text(self, filled_char: str = "#", empty_char: str = ".") -> str:
        """Render rows top to bottom, one character per cell."""
        lines = []
        for row in self.counts:
            lines.append("".join(filled_char if cell else empty_char for cell in row))
        return "\n".join(lines)
