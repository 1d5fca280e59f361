"""Command line entry point."""

import argparse
import json
import logging
import random
import sys
from collections.abc import Callable

from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import box, mapping
from shapely.geometry.base import BaseGeometry

from shapegen.config import settings
from shapegen.shapes import (
    halton_points,
    random_line_string,
    random_points,
    random_points_in_grid,
    random_radial_points,
    random_rectilinear_walk,
    random_segments,
    random_segments_in_grid,
    random_segments_rectilinear,
    roberts_points,
    truchet_tiling,
)
from shapegen.shapes.types import RandomSource

logger = logging.getLogger(__name__)

RANDOM_KINDS: dict[str, Callable[[BaseGeometry | None, int, RandomSource], BaseGeometry]] = {
    "points": lambda g, n, rng: random_points(g, n, rng=rng),
    "grid": lambda g, n, rng: random_points_in_grid(g, n, rng=rng),
    "radial": lambda g, n, rng: random_radial_points(g, n, rng=rng),
    "segments": lambda g, n, rng: random_segments(g, n, rng=rng),
    "grid-segments": lambda g, n, rng: random_segments_in_grid(g, n, rng=rng),
    "rectilinear": lambda g, n, rng: random_segments_rectilinear(g, n, rng=rng),
    "linestring": lambda g, n, rng: random_line_string(g, n, rng=rng),
    "walk": lambda g, n, rng: random_rectilinear_walk(g, n, rng=rng),
}


def setup_logging() -> None:
    """Configure logging for the command line tool."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapegen",
        description="Generate synthetic test geometries.",
    )
    parser.add_argument("--format", choices=["wkt", "geojson"], default="wkt")
    parser.add_argument(
        "--extent",
        nargs=4,
        type=float,
        metavar=("MINX", "MINY", "MAXX", "MAXY"),
        help="Extent to generate in (default from settings)",
    )
    parser.add_argument("--seed", type=int, default=settings.seed)

    sub = parser.add_subparsers(dest="command", required=True)

    halton = sub.add_parser("halton", help="Halton low-discrepancy points")
    halton.add_argument("count", type=int)
    halton.add_argument("--bases", nargs=2, type=int, metavar=("B1", "B2"))

    roberts = sub.add_parser("roberts", help="Roberts R2 quasi-random points")
    roberts.add_argument("count", type=int)

    rand = sub.add_parser("random", help="Uniform random points or lines")
    rand.add_argument("count", type=int)
    rand.add_argument("--kind", choices=sorted(RANDOM_KINDS), default="points")

    truchet = sub.add_parser("truchet", help="Truchet tiling faces")
    truchet.add_argument("tile", help="WKT of the base tile lines")
    truchet.add_argument("n_side", type=int)
    truchet.add_argument("--randomness", type=float, default=0.0)

    return parser


def generate(args: argparse.Namespace) -> BaseGeometry:
    """Run the generator selected by parsed arguments."""
    extent_geom = box(*args.extent) if args.extent else None
    rng = random.Random(args.seed)

    if args.command == "halton":
        base1, base2 = args.bases or settings.halton_bases
        return halton_points(extent_geom, args.count, base1, base2)
    if args.command == "roberts":
        return roberts_points(extent_geom, args.count)
    if args.command == "random":
        return RANDOM_KINDS[args.kind](extent_geom, args.count, rng)
    if args.command == "truchet":
        tile = wkt.loads(args.tile)
        return truchet_tiling(tile, args.n_side, args.randomness, rng=rng)
    raise ValueError(f"Unknown command: {args.command}")


def format_geometry(geom: BaseGeometry, fmt: str) -> str:
    if fmt == "geojson":
        return json.dumps(mapping(geom))
    return geom.wkt


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool. Returns the process exit status."""
    setup_logging()
    args = build_parser().parse_args(argv)

    try:
        geom = generate(args)
    except ShapelyError as e:
        logger.error("Generation failed for %s: %s", args.command, e)
        return 1

    print(format_geometry(geom, args.format))
    return 0


def run() -> None:
    """Entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
