"""Truchet tiling from a base tile of lines.

The base (lower-left) tile is copied to every cell of an n x n grid and
rotated by a multiple of 90 degrees about its center. Tile coordinates are
snapped to a precision grid before and after placement so that line
endpoints on shared cell edges coincide. The placed tiles plus the tiling
boundary are unioned into a noded line network and polygonized.
"""

import logging
import math
import time
from collections.abc import Callable
from dataclasses import dataclass

from shapely.geometry import GeometryCollection
from shapely.geometry.base import BaseGeometry
from shapely.ops import polygonize, unary_union

from shapegen.config import settings
from shapegen.shapes.precision import apply_matrix, placement_matrix, snap_to_grid
from shapegen.shapes.types import Extent, RandomSource, default_rng

logger = logging.getLogger(__name__)


def checkerboard_orientation(i: int, j: int) -> int:
    """Default quarter-turn count for a cell, cycling along diagonals."""
    return (i + j) % 4


@dataclass
class PlacedTile:
    """A base tile copy placed in the tiling grid."""

    i: int
    j: int
    quarter_turns: int
    geometry: BaseGeometry


class TruchetTiler:
    """Builds a Truchet tiling from a base tile."""

    def __init__(
        self,
        tile_lines: BaseGeometry,
        n_side: int,
        randomness: float = 0.0,
        rng: RandomSource | None = None,
        scale: float | None = None,
        orientation: Callable[[int, int], int] = checkerboard_orientation,
    ) -> None:
        self.tile_lines = tile_lines
        self.n_side = n_side
        self.randomness = randomness
        self.rng = rng if rng is not None else default_rng()
        self.scale = scale if scale is not None else settings.snap_scale
        self.orientation = orientation

        self.tile_snap = snap_to_grid(tile_lines, self.scale)
        # Empty geometry has NaN bounds
        if self.tile_snap.is_empty:
            self.tile_extent = Extent(0.0, 0.0, 0.0, 0.0)
            self.side = 0
        else:
            self.tile_extent = Extent.from_geometry(self.tile_snap)
            self.side = math.ceil(max(self.tile_extent.width, self.tile_extent.height))

    @property
    def tiling_extent(self) -> Extent:
        """Extent of the full n_side x n_side tiling."""
        min_x = self.tile_extent.min_x
        min_y = self.tile_extent.min_y
        size = self.n_side * self.side
        return Extent(min_x, min_y, min_x + size, min_y + size)

    def _quarter_turns(self, i: int, j: int) -> int:
        turns = self.orientation(i, j)
        if self.rng.random() < self.randomness:
            turns = min(int(4 * self.rng.random()), 3)
        return turns

    def place_tiles(self) -> list[PlacedTile]:
        """Place a snapped copy of the base tile in every grid cell."""
        center = self.tile_extent.center
        tiles: list[PlacedTile] = []

        for i in range(self.n_side):
            for j in range(self.n_side):
                turns = self._quarter_turns(i, j)

                # Base tile stays where it is
                if i == 0 and j == 0:
                    placed = self.tile_snap
                else:
                    matrix = placement_matrix(
                        turns, center, (i * self.side, j * self.side)
                    )
                    placed = apply_matrix(self.tile_snap, matrix)

                tiles.append(
                    PlacedTile(
                        i=i,
                        j=j,
                        quarter_turns=turns,
                        geometry=snap_to_grid(placed, self.scale),
                    )
                )

        return tiles

    def generate(self) -> GeometryCollection:
        """Generate the tiling faces.

        Returns:
            GeometryCollection of the polygons enclosed by the noded tile
            lines and the tiling boundary. Empty when ``n_side <= 0`` or the
            base tile is empty.
        """
        if self.n_side <= 0 or self.tile_snap.is_empty:
            return GeometryCollection()

        t0 = time.perf_counter()

        tiles = self.place_tiles()
        boundary = self.tiling_extent.to_geometry().boundary
        network = unary_union([t.geometry for t in tiles] + [boundary])

        t_union = time.perf_counter()

        faces = list(polygonize(network))
        result = GeometryCollection(faces)

        logger.info(
            "[Truchet] %dx%d tiling complete in %.1fms (union %.1fms, %d faces)",
            self.n_side, self.n_side,
            (time.perf_counter() - t0) * 1000,
            (t_union - t0) * 1000,
            len(faces),
        )
        return result


def truchet_tiling(
    tile_lines: BaseGeometry,
    n_side: int,
    randomness: float,
    rng: RandomSource | None = None,
) -> GeometryCollection:
    """Create a Truchet tiling from lines defining the lower-left tile.

    Args:
        tile_lines: Lines of the base tile.
        n_side: Number of tiles per side of the tiling.
        randomness: Probability in [0, 1] that a cell gets a random
            rotation instead of the checkerboard default.
        rng: Uniform random source (default from settings).

    Returns:
        GeometryCollection of the tiling faces.
    """
    tiler = TruchetTiler(tile_lines, n_side, randomness, rng=rng)
    return tiler.generate()
