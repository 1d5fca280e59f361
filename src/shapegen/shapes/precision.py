"""Precision grid snapping and quarter-turn placement transforms.

Truchet tiles are placed by rotating a base tile about its center and
translating it to a grid cell. Rotation introduces sub-grid floating error,
so every placed tile is snapped back to a fixed precision grid. Two
coordinates closer than ``0.5 / scale`` land on the same grid point, which
makes the edges of adjacent tiles coincide exactly.
"""

import numpy as np
import shapely
from numpy.typing import NDArray
from shapely.affinity import affine_transform
from shapely.geometry.base import BaseGeometry

# (cos, sin) for rotations by 0, 90, 180 and 270 degrees
_QUARTER_TURNS: tuple[tuple[float, float], ...] = (
    (1.0, 0.0),
    (0.0, 1.0),
    (-1.0, 0.0),
    (0.0, -1.0),
)


def snap_to_grid(geom: BaseGeometry, scale: float) -> BaseGeometry:
    """Snap every coordinate of a geometry to a precision grid.

    Each ordinate becomes ``round(c * scale) / scale``. Snapping an already
    snapped geometry at the same scale returns an equal geometry.

    Exact halves round to even (``numpy.round``), so at scale 1 the
    ordinates 2.5 and 3.5 snap to 2.0 and 4.0. JTS ``PrecisionModel``
    rounds halves up and can differ by one grid cell on such ordinates.

    Args:
        geom: Geometry to snap. It is not modified.
        scale: Grid cells per unit (10000 gives a 0.0001 grid).

    Returns:
        A new geometry with snapped coordinates.
    """

    def _snap(coords: NDArray[np.float64]) -> NDArray[np.float64]:
        return np.round(coords * scale) / scale

    return shapely.transform(geom, _snap)


def placement_matrix(
    quarter_turns: int,
    center: tuple[float, float],
    offset: tuple[float, float],
) -> NDArray[np.float64]:
    """Build the 2x3 matrix rotating about a point then translating.

    Args:
        quarter_turns: Number of counter-clockwise 90 degree turns.
        center: Rotation center (x, y).
        offset: Translation (dx, dy) applied after the rotation.

    Returns:
        Matrix ``[[a, b, xoff], [d, e, yoff]]`` with
        ``x' = a*x + b*y + xoff`` and ``y' = d*x + e*y + yoff``.
    """
    cos_t, sin_t = _QUARTER_TURNS[quarter_turns % 4]
    cx, cy = center
    dx, dy = offset

    rotate_about = np.array(
        [
            [cos_t, -sin_t, cx - cos_t * cx + sin_t * cy],
            [sin_t, cos_t, cy - sin_t * cx - cos_t * cy],
            [0.0, 0.0, 1.0],
        ]
    )
    translate = np.array(
        [
            [1.0, 0.0, dx],
            [0.0, 1.0, dy],
            [0.0, 0.0, 1.0],
        ]
    )
    return (translate @ rotate_about)[:2]


def apply_matrix(geom: BaseGeometry, matrix: NDArray[np.float64]) -> BaseGeometry:
    """Apply a 2x3 affine matrix to a geometry, returning a new geometry."""
    (a, b, xoff), (d, e, yoff) = matrix.tolist()
    return affine_transform(geom, [a, b, d, e, xoff, yoff])
