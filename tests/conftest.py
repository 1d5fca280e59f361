"""Pytest configuration and fixtures for shape generator tests."""

import random

import pytest
from shapely.geometry import LineString, MultiLineString, box


@pytest.fixture
def unit_square():
    """Unit square extent geometry."""
    return box(0.0, 0.0, 1.0, 1.0)


@pytest.fixture
def rng():
    """Seeded uniform random source."""
    return random.Random(42)


@pytest.fixture
def diagonal_tile():
    """Base tile: a single diagonal across the unit square."""
    return LineString([(0.0, 0.0), (1.0, 1.0)])


@pytest.fixture
def corner_tile():
    """Base tile cutting two opposite corners between edge midpoints.

    Every quarter-turn of this tile touches the four edge midpoints, so
    adjacent tiles always meet.
    """
    return MultiLineString(
        [
            [(0.0, 0.5), (0.5, 0.0)],
            [(0.5, 1.0), (1.0, 0.5)],
        ]
    )
