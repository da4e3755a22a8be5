"""Command-line interface: render a series to a PNG sparkline."""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from sparkchart.config import DEFAULT_DENSITY, DEFAULT_SIZE, SparklineOptions
from sparkchart.logging_config import setup_logging

logger = logging.getLogger("sparkchart.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sparkchart",
        description="Render a sparkline coloured above/below its mean or a threshold.",
    )
    parser.add_argument("values", nargs="+", type=float, help="The series to plot.")
    parser.add_argument("--threshold", type=float, default=None,
                        help="Split at a fixed level instead of the series mean.")
    parser.add_argument("--smooth", action="store_true", help="Catmull-Rom smoothing.")
    parser.add_argument("--density", type=int, default=DEFAULT_DENSITY,
                        help="Interpolated points per segment when smoothing.")
    parser.add_argument("--width", type=float, default=DEFAULT_SIZE[0])
    parser.add_argument("--height", type=float, default=DEFAULT_SIZE[1])
    parser.add_argument("--output", "-o", default="sparkline.png")
    parser.add_argument("--debug", action="store_true", help="Verbose logging.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    try:
        if args.threshold is not None:
            options = SparklineOptions.with_threshold(args.threshold, smooth=args.smooth, density=args.density)
        else:
            options = SparklineOptions(smooth=args.smooth, density=args.density)
    except ValueError as e:
        logger.error(f"Invalid options: {e}")
        return 2

    # Deferred so that --help works without matplotlib
    from sparkchart.render.mpl_backend import render_png

    geometry = render_png(args.values, args.output, args.width, args.height, options=options)
    logger.info(f"Reference level {geometry.reference:g}: "
                f"{len(geometry.segments)} segments, {len(geometry.fills)} fills.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
