"""Uniform random point sets."""

import logging
import math

import shapely
from shapely.geometry import MultiPoint, Point
from shapely.geometry.base import BaseGeometry
from shapely.prepared import prep

from shapegen.shapes.types import Extent, RandomSource, default_rng, extent_or_default

logger = logging.getLogger(__name__)

# Attempts per requested point before polygon rejection sampling gives up
_MAX_ATTEMPTS_PER_POINT = 1000


def _random_in_extent(extent: Extent, rng: RandomSource) -> tuple[float, float]:
    return (
        extent.min_x + extent.width * rng.random(),
        extent.min_y + extent.height * rng.random(),
    )


def random_points(
    geom: BaseGeometry | None,
    count: int,
    rng: RandomSource | None = None,
) -> MultiPoint:
    """Create points uniformly distributed over the extent of a geometry."""
    rng = rng if rng is not None else default_rng()
    extent = extent_or_default(geom)
    return MultiPoint([_random_in_extent(extent, rng) for _ in range(max(count, 0))])


def random_points_in_polygon(
    geom: BaseGeometry | None,
    count: int,
    rng: RandomSource | None = None,
) -> MultiPoint:
    """Create points uniformly distributed inside a polygonal geometry.

    Candidates are drawn from the geometry's extent and kept only when the
    geometry contains them.

    Args:
        geom: Polygon or MultiPolygon. Non-areal or empty geometry gives an
            empty MultiPoint.
        count: Number of points.
        rng: Uniform random source.

    Returns:
        MultiPoint of up to ``count`` points. Fewer points are returned only
        if the polygon covers a vanishing fraction of its extent.
    """
    if geom is None or geom.is_empty or geom.area <= 0 or count <= 0:
        return MultiPoint()

    rng = rng if rng is not None else default_rng()
    extent = Extent.from_geometry(geom)
    target = prep(geom)

    points: list[tuple[float, float]] = []
    attempts = 0
    max_attempts = count * _MAX_ATTEMPTS_PER_POINT
    while len(points) < count and attempts < max_attempts:
        attempts += 1
        x, y = _random_in_extent(extent, rng)
        if target.contains(Point(x, y)):
            points.append((x, y))

    if len(points) < count:
        logger.warning(
            "Only placed %d of %d points after %d attempts",
            len(points), count, attempts,
        )
    return MultiPoint(points)


def random_points_in_grid(
    geom: BaseGeometry | None,
    count: int,
    constrained_to_circle: bool = False,
    gutter_fraction: float = 0.0,
    rng: RandomSource | None = None,
) -> MultiPoint:
    """Create one random point in each cell of a square grid over the extent.

    The grid has ``ceil(sqrt(count))`` cells per side, so the result may
    contain more than ``count`` points. This gives random points with
    limited clustering.

    Args:
        geom: Geometry whose extent is gridded.
        count: Approximate number of points.
        constrained_to_circle: Keep each point inside the circle inscribed
            in its cell.
        gutter_fraction: Fraction of the cell size (clamped to [0, 1]) kept
            free of points along the cell edges.
        rng: Uniform random source.

    Returns:
        MultiPoint with one point per grid cell.
    """
    if count <= 0:
        return MultiPoint()

    rng = rng if rng is not None else default_rng()
    extent = extent_or_default(geom)
    n_cells = math.ceil(math.sqrt(count))

    gutter = min(max(gutter_fraction, 0.0), 1.0)
    cell_w = extent.width / n_cells
    cell_h = extent.height / n_cells
    gutter_w = cell_w * gutter / 2
    gutter_h = cell_h * gutter / 2
    inner_w = cell_w - 2 * gutter_w
    inner_h = cell_h - 2 * gutter_h

    points: list[tuple[float, float]] = []
    for i in range(n_cells):
        for j in range(n_cells):
            origin_x = extent.min_x + i * cell_w + gutter_w
            origin_y = extent.min_y + j * cell_h + gutter_h
            if constrained_to_circle:
                points.append(_random_in_circle(origin_x, origin_y, inner_w, inner_h, rng))
            else:
                points.append(
                    (origin_x + inner_w * rng.random(), origin_y + inner_h * rng.random())
                )

    return MultiPoint(points)


def _random_in_circle(
    origin_x: float,
    origin_y: float,
    width: float,
    height: float,
    rng: RandomSource,
) -> tuple[float, float]:
    """Random point in the ellipse inscribed in a rectangle (uniform by area)."""
    r = math.sqrt(rng.random())
    angle = 2 * math.pi * rng.random()
    x = origin_x + width / 2 + (width / 2) * r * math.cos(angle)
    y = origin_y + height / 2 + (height / 2) * r * math.sin(angle)
    return x, y


def random_points_in_triangle(
    geom: BaseGeometry,
    count: int,
    rng: RandomSource | None = None,
) -> MultiPoint:
    """Create points uniformly distributed in a triangle.

    The triangle is given by the first three coordinates of ``geom``, in
    any geometry type (polygon ring, line string or multi-part).
    """
    coords = shapely.get_coordinates(geom)[:3].tolist()
    if len(coords) < 3 or count <= 0:
        return MultiPoint()

    rng = rng if rng is not None else default_rng()
    (x0, y0), (x1, y1), (x2, y2) = coords

    points: list[tuple[float, float]] = []
    for _ in range(count):
        s = rng.random()
        t = rng.random()
        # Fold the far half of the parallelogram back into the triangle
        if s + t > 1:
            s = 1.0 - s
            t = 1.0 - t
        a = 1 - (s + t)
        points.append((a * x0 + s * x1 + t * x2, a * y0 + s * y1 + t * y2))

    return MultiPoint(points)


def random_radial_points(
    geom: BaseGeometry | None,
    count: int,
    rng: RandomSource | None = None,
) -> MultiPoint:
    """Create points clustered around the center of the extent.

    The radius is ``r_max * u**2``, which concentrates points near the
    center; ``r_max`` is half the shorter side of the extent.
    """
    rng = rng if rng is not None else default_rng()
    extent = extent_or_default(geom)
    r_max = min(extent.width, extent.height) / 2.0
    cx, cy = extent.center

    points: list[tuple[float, float]] = []
    for _ in range(max(count, 0)):
        u = rng.random()
        r = r_max * u * u
        angle = 2 * math.pi * rng.random()
        points.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))

    return MultiPoint(points)
