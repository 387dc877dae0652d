"""Text preview of rasterized shapes."""

from pixelraster.preview.canvas import PixelCanvas

__all__ = ["PixelCanvas"]
