"""Random segment sets and line strings."""

import math

from shapely.geometry import LineString, MultiLineString
from shapely.geometry.base import BaseGeometry

from shapegen.shapes.types import RandomSource, default_rng, extent_or_default

Segment = tuple[tuple[float, float], tuple[float, float]]


def _segment_in(
    min_x: float,
    min_y: float,
    width: float,
    height: float,
    rng: RandomSource,
) -> Segment:
    x0 = min_x + width * rng.random()
    y0 = min_y + height * rng.random()
    x1 = min_x + width * rng.random()
    y1 = min_y + height * rng.random()
    return (x0, y0), (x1, y1)


def random_segments(
    geom: BaseGeometry | None,
    count: int,
    rng: RandomSource | None = None,
) -> MultiLineString:
    """Create segments with both endpoints uniform over the extent."""
    rng = rng if rng is not None else default_rng()
    extent = extent_or_default(geom)
    return MultiLineString(
        [
            _segment_in(extent.min_x, extent.min_y, extent.width, extent.height, rng)
            for _ in range(max(count, 0))
        ]
    )


def random_segments_in_grid(
    geom: BaseGeometry | None,
    count: int,
    rng: RandomSource | None = None,
) -> MultiLineString:
    """Create one random segment inside each cell of a grid over the extent.

    The grid has ``int(sqrt(count)) + 1`` cells per side, so segments are
    short and evenly spread.
    """
    if count <= 0:
        return MultiLineString()

    rng = rng if rng is not None else default_rng()
    extent = extent_or_default(geom)
    n_cells = int(math.sqrt(count)) + 1
    cell_w = extent.width / n_cells
    cell_h = extent.height / n_cells

    segments: list[Segment] = []
    for i in range(n_cells):
        for j in range(n_cells):
            segments.append(
                _segment_in(
                    extent.min_x + i * cell_w,
                    extent.min_y + j * cell_h,
                    cell_w,
                    cell_h,
                    rng,
                )
            )
    return MultiLineString(segments)


def random_segments_rectilinear(
    geom: BaseGeometry | None,
    count: int,
    rng: RandomSource | None = None,
) -> MultiLineString:
    """Create random horizontal and vertical segments over the extent."""
    rng = rng if rng is not None else default_rng()
    extent = extent_or_default(geom)

    segments: list[Segment] = []
    for _ in range(max(count, 0)):
        if rng.random() < 0.5:
            # x fixed: vertical segment
            x = extent.min_x + extent.width * rng.random()
            y0 = extent.min_y + extent.height * rng.random()
            y1 = extent.min_y + extent.height * rng.random()
            segments.append(((x, y0), (x, y1)))
        else:
            y = extent.min_y + extent.height * rng.random()
            x0 = extent.min_x + extent.width * rng.random()
            x1 = extent.min_x + extent.width * rng.random()
            segments.append(((x0, y), (x1, y)))
    return MultiLineString(segments)


def _point_around(
    center: tuple[float, float],
    width: float,
    height: float,
    rng: RandomSource,
) -> tuple[float, float]:
    """Random point in the rectangle of the given size centered on ``center``."""
    return (
        center[0] + width * (rng.random() - 0.5),
        center[1] + height * (rng.random() - 0.5),
    )


def random_line_string(
    geom: BaseGeometry | None,
    count: int,
    rng: RandomSource | None = None,
) -> LineString:
    """Create a line string of random vertices around the extent center.

    Each vertex lies in a randomly sized rectangle centered on the extent
    center, so the line stays inside the extent.
    """
    if count < 2:
        return LineString()

    rng = rng if rng is not None else default_rng()
    extent = extent_or_default(geom)

    vertices = []
    for _ in range(count):
        width = extent.width * rng.random()
        height = extent.height * rng.random()
        vertices.append(_point_around(extent.center, width, height, rng))
    return LineString(vertices)


def random_rectilinear_walk(
    geom: BaseGeometry | None,
    count: int,
    rng: RandomSource | None = None,
) -> LineString:
    """Create a random walk alternating between x and y steps.

    The walk starts near the extent center. Step lengths are
    ``width * (u - 0.5)``, so the walk may leave the extent.
    """
    if count < 2:
        return LineString()

    rng = rng if rng is not None else default_rng()
    extent = extent_or_default(geom)

    vertices = [_point_around(extent.center, extent.width, extent.height, rng)]
    step_x = True
    for _ in range(count - 1):
        dist = extent.width * (rng.random() - 0.5)
        x, y = vertices[-1]
        if step_x:
            x += dist
        else:
            y += dist
        step_x = not step_x
        vertices.append((x, y))
    return LineString(vertices)
