"""Low-discrepancy point sets (Halton and Roberts R2 sequences).

Both sequences are deterministic, so the generated point sets are
reproducible across runs and platforms. Candidates are mapped into the
extent and rejected when the extent does not contain them, which only
happens through floating point effects at the upper bound.
"""

import logging
import time
from collections.abc import Iterator

from shapely.geometry import MultiPoint
from shapely.geometry.base import BaseGeometry

from shapegen.config import settings
from shapegen.shapes.types import Extent, extent_or_default

logger = logging.getLogger(__name__)

# Generalized golden ratio for two dimensions (real root of x^3 = x + 1)
PHI2 = 1.32471795724474602596


def halton_ordinate(index: int, base: int) -> float:
    """Return the van der Corput ordinate of an index in a base.

    The base-``base`` digits of ``index`` are mirrored about the radix
    point, e.g. index 6 = 110b gives 0.011b = 0.375 in base 2.
    """
    result = 0.0
    f = 1.0 / base
    i = index
    while i > 0:
        result += f * (i % base)
        i //= base
        f /= base
    return result


def _halton_sequence(base1: int, base2: int) -> Iterator[tuple[float, float]]:
    index = 1
    while True:
        yield halton_ordinate(index, base1), halton_ordinate(index, base2)
        index += 1


def _quasirandom_step(current: float, alpha: float) -> float:
    nxt = current + alpha
    if nxt < 1:
        return nxt
    return nxt - int(nxt)


def _roberts_sequence() -> Iterator[tuple[float, float]]:
    a1 = 1.0 / PHI2
    a2 = 1.0 / (PHI2 * PHI2)
    r1 = 0.5
    r2 = 0.5
    while True:
        r1 = _quasirandom_step(r1, a1)
        r2 = _quasirandom_step(r2, a2)
        yield r1, r2


def _sample_extent(
    extent: Extent,
    count: int,
    sequence: Iterator[tuple[float, float]],
) -> list[tuple[float, float]]:
    """Map unit-square samples into an extent, rejecting uncontained ones."""
    if extent.is_degenerate and count > 0:
        logger.warning(
            "Sampling %d points in degenerate extent %s will not terminate",
            count, extent,
        )

    points: list[tuple[float, float]] = []
    rejected = 0
    while len(points) < count:
        ox, oy = next(sequence)
        x = extent.min_x + extent.width * ox
        y = extent.min_y + extent.height * oy
        if not extent.contains(x, y):
            rejected += 1
            continue
        points.append((x, y))

    if rejected:
        logger.debug("Rejected %d candidates outside %s", rejected, extent)
    return points


def halton_points(
    geom: BaseGeometry | None,
    count: int,
    base1: int | None = None,
    base2: int | None = None,
) -> MultiPoint:
    """Create Halton points inside the extent of a geometry.

    Args:
        geom: Geometry whose extent bounds the points (default extent if None).
        count: Number of points. Zero or negative gives an empty MultiPoint.
        base1: Base for the x ordinates (default from settings, 2).
        base2: Base for the y ordinates (default from settings, 3).
            Bases should be coprime; non-coprime bases are accepted but
            cluster badly.

    Returns:
        MultiPoint of exactly ``max(count, 0)`` points.
    """
    default1, default2 = settings.halton_bases
    base1 = default1 if base1 is None else base1
    base2 = default2 if base2 is None else base2

    t0 = time.perf_counter()
    extent = extent_or_default(geom)
    points = _sample_extent(extent, count, _halton_sequence(base1, base2))

    logger.debug(
        "[Halton] %d points, bases (%d, %d) in %.1fms",
        len(points), base1, base2, (time.perf_counter() - t0) * 1000,
    )
    return MultiPoint(points)


def halton_points_57(geom: BaseGeometry | None, count: int) -> MultiPoint:
    """Create Halton points using bases 5 and 7."""
    return halton_points(geom, count, 5, 7)


def roberts_points(geom: BaseGeometry | None, count: int) -> MultiPoint:
    """Create quasi-random points using the Roberts R2 recurrence.

    The recurrence adds ``1/PHI2`` and ``1/PHI2**2`` to the x and y
    ordinates modulo 1, starting from (0.5, 0.5). It is non-periodic and
    clusters less than random or Halton points.

    Args:
        geom: Geometry whose extent bounds the points (default extent if None).
        count: Number of points. Zero or negative gives an empty MultiPoint.

    Returns:
        MultiPoint of exactly ``max(count, 0)`` points.
    """
    t0 = time.perf_counter()
    extent = extent_or_default(geom)
    points = _sample_extent(extent, count, _roberts_sequence())

    logger.debug(
        "[Roberts] %d points in %.1fms",
        len(points), (time.perf_counter() - t0) * 1000,
    )
    return MultiPoint(points)
