"""Synthetic point sets, segment sets and tilings for exercising geometry code."""

from shapegen.shapes.precision import snap_to_grid
from shapegen.shapes.quasirandom import (
    halton_ordinate,
    halton_points,
    halton_points_57,
    roberts_points,
)
from shapegen.shapes.random_lines import (
    random_line_string,
    random_rectilinear_walk,
    random_segments,
    random_segments_in_grid,
    random_segments_rectilinear,
)
from shapegen.shapes.random_points import (
    random_points,
    random_points_in_grid,
    random_points_in_polygon,
    random_points_in_triangle,
    random_radial_points,
)
from shapegen.shapes.truchet import PlacedTile, TruchetTiler, truchet_tiling
from shapegen.shapes.types import Extent, RandomSource, extent_or_default

__all__ = [
    "Extent",
    "PlacedTile",
    "RandomSource",
    "TruchetTiler",
    "extent_or_default",
    "halton_ordinate",
    "halton_points",
    "halton_points_57",
    "random_line_string",
    "random_points",
    "random_points_in_grid",
    "random_points_in_polygon",
    "random_points_in_triangle",
    "random_radial_points",
    "random_rectilinear_walk",
    "random_segments",
    "random_segments_in_grid",
    "random_segments_rectilinear",
    "roberts_points",
    "snap_to_grid",
    "truchet_tiling",
]
