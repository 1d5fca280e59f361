"""Type definitions shared by the shape generators."""

import random
from dataclasses import dataclass
from typing import Protocol

from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry

from shapegen.config import settings


class RandomSource(Protocol):
    """Uniform random source. ``random.Random`` satisfies this."""

    def random(self) -> float:
        """Return a uniform float in [0, 1)."""
        ...


@dataclass(frozen=True)
class Extent:
    """An axis-aligned rectangle in world units."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_geometry(cls, geom: BaseGeometry) -> "Extent":
        """Create an extent from the bounds of a shapely geometry."""
        min_x, min_y, max_x, max_y = geom.bounds
        return cls(min_x, min_y, max_x, max_y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.min_x + self.width / 2, self.min_y + self.height / 2)

    @property
    def is_degenerate(self) -> bool:
        """True when the extent has zero width or height."""
        return self.width <= 0 or self.height <= 0

    def contains(self, x: float, y: float) -> bool:
        """Check a coordinate against the extent.

        The lower bounds are inclusive and the upper bounds exclusive, so
        tiling extents never share a point.
        """
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y

    def to_geometry(self) -> Polygon:
        """Return the extent as a rectangle polygon."""
        return box(self.min_x, self.min_y, self.max_x, self.max_y)


def extent_or_default(geom: BaseGeometry | None) -> Extent:
    """Return the extent of a geometry, or the configured default extent.

    Args:
        geom: Geometry whose bounds define the extent. May be None or empty.

    Returns:
        Extent of the geometry, or ``settings.default_extent``.
    """
    if geom is None or geom.is_empty:
        return Extent(*settings.default_extent)
    return Extent.from_geometry(geom)


def default_rng() -> random.Random:
    """Create the random source used when the caller injects none."""
    return random.Random(settings.seed)
