"""Exception types raised by the rasterizers."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Shape parameters outside the domain of a rasterizer."""
