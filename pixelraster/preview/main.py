"""Command line preview: rasterize one shape and print it as a text grid."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from pixelraster.core import (
    InvalidArgumentError,
    Position,
    Size,
    bezier,
    circle,
    ellipse,
    line,
    rectangle,
    rectangle2,
)
from pixelraster.infra.config import RasterConfig, load_default_env_files, load_raster_config
from pixelraster.infra.logging import setup_logging, shutdown_logging
from pixelraster.preview.canvas import PixelCanvas

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_ARGUMENT = 2


def build_parser(config: RasterConfig | None = None) -> argparse.ArgumentParser:
    config = config or RasterConfig()
    parser = argparse.ArgumentParser(
        prog="pixelraster-preview", description="Rasterize a shape and print its cells."
    )
    parser.add_argument(
        "--count", action="store_true", help="Print the number of emitted cells only."
    )
    parser.add_argument(
        "--margin",
        type=int,
        default=config.canvas_margin,
        help="Empty cells around the shape bounding box.",
    )
    shapes = parser.add_subparsers(dest="shape", required=True)

    line_parser = shapes.add_parser("line", help="Line between two points.")
    _add_ints(line_parser, "x0", "y0", "x1", "y1")

    bezier_parser = shapes.add_parser("bezier", help="Cubic Bezier from four control points.")
    _add_ints(bezier_parser, "x0", "y0", "x1", "y1", "x2", "y2", "x3", "y3")
    bezier_parser.add_argument(
        "--resolution",
        type=int,
        default=config.bezier_resolution,
        help="Number of line segments approximating the curve.",
    )

    rect_parser = shapes.add_parser("rectangle", help="Rectangle from size and origin.")
    _add_ints(rect_parser, "width", "height", "x", "y")

    rect2_parser = shapes.add_parser("rectangle2", help="Rectangle from opposite corners.")
    _add_ints(rect2_parser, "x0", "y0", "x1", "y1")

    ellipse_parser = shapes.add_parser("ellipse", help="Ellipse from semi-axes and center.")
    _add_ints(ellipse_parser, "width", "height", "cx", "cy")

    circle_parser = shapes.add_parser("circle", help="Circle around a center.")
    _add_ints(circle_parser, "diameter", "cx", "cy")
    return parser


def _add_ints(parser: argparse.ArgumentParser, *names: str) -> None:
    for name in names:
        parser.add_argument(name, type=int)


def rasterize(args: argparse.Namespace) -> list[Position]:
    """Dispatch parsed arguments to the matching rasterizer."""
    if args.shape == "line":
        return line(Position(args.x0, args.y0), Position(args.x1, args.y1))
    if args.shape == "bezier":
        return bezier(
            args.resolution,
            Position(args.x0, args.y0),
            Position(args.x1, args.y1),
            Position(args.x2, args.y2),
            Position(args.x3, args.y3),
        )
    if args.shape == "rectangle":
        return rectangle(Size(args.width, args.height), Position(args.x, args.y))
    if args.shape == "rectangle2":
        return rectangle2(Position(args.x0, args.y0), Position(args.x1, args.y1))
    if args.shape == "ellipse":
        return ellipse(Size(args.width, args.height), Position(args.cx, args.cy))
    if args.shape == "circle":
        return circle(args.diameter, Position(args.cx, args.cy))
    raise ValueError(f"unknown shape: {args.shape!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the preview command and return the process exit code."""
    load_default_env_files(override_existing=False)
    setup_logging()
    try:
        config = load_raster_config()
        args = build_parser(config).parse_args(argv)
        try:
            if args.margin < 0:
                raise InvalidArgumentError(f"margin must be non-negative, got {args.margin}")
            positions = rasterize(args)
        except InvalidArgumentError as exc:
            logger.error("invalid_shape_arguments shape=%s error=%s", args.shape, exc)
            return EXIT_INVALID_ARGUMENT

        logger.info("rasterized shape=%s cells=%d", args.shape, len(positions))
        if args.count:
            print(len(positions))
            return EXIT_OK
        canvas = PixelCanvas.fit(positions, margin=args.margin)
        print(canvas.to_text(config.filled_char, config.empty_char))
        return EXIT_OK
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
