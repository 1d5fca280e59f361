"""Tests for low-discrepancy point generation."""

import pytest
from shapely.geometry import box

from shapegen.shapes import Extent, halton_ordinate, halton_points, halton_points_57, roberts_points
from shapegen.shapes.quasirandom import PHI2, _sample_extent


def _coords(multipoint):
    return [(p.x, p.y) for p in multipoint.geoms]


class TestHaltonOrdinate:
    """Tests for the van der Corput digit reversal."""

    def test_base_two(self):
        values = [halton_ordinate(i, 2) for i in range(1, 8)]
        assert values == [0.5, 0.25, 0.75, 0.125, 0.625, 0.375, 0.875]

    def test_base_three(self):
        values = [halton_ordinate(i, 3) for i in range(1, 5)]
        assert values == pytest.approx([1 / 3, 2 / 3, 1 / 9, 4 / 9])

    def test_zero_index(self):
        assert halton_ordinate(0, 2) == 0.0

    def test_values_in_unit_interval(self):
        for base in (2, 3, 5, 7):
            for i in range(1, 500):
                assert 0.0 <= halton_ordinate(i, base) < 1.0


class TestHaltonPoints:
    """Tests for Halton point sets."""

    def test_exact_count_inside_extent(self):
        geom = box(-10.0, 5.0, 30.0, 12.5)
        extent = Extent.from_geometry(geom)

        result = halton_points(geom, 500)

        assert len(result.geoms) == 500
        for x, y in _coords(result):
            assert extent.contains(x, y)

    def test_first_points_unit_square(self, unit_square):
        coords = _coords(halton_points(unit_square, 3))

        assert coords[0] == pytest.approx((0.5, 1 / 3))
        assert coords[1] == pytest.approx((0.25, 2 / 3))
        assert coords[2] == pytest.approx((0.75, 1 / 9))

    def test_deterministic(self):
        geom = box(0.0, 0.0, 17.0, 3.0)

        first = _coords(halton_points(geom, 200, 2, 3))
        second = _coords(halton_points(geom, 200, 2, 3))

        assert first == second

    def test_zero_count_is_empty(self, unit_square):
        result = halton_points(unit_square, 0)
        assert result.geom_type == "MultiPoint"
        assert result.is_empty

    def test_negative_count_is_empty(self, unit_square):
        assert halton_points(unit_square, -5).is_empty

    def test_default_extent_when_no_geometry(self):
        coords = _coords(halton_points(None, 1))
        assert coords[0] == pytest.approx((50.0, 100 / 3))

    def test_bases_five_seven(self, unit_square):
        coords = _coords(halton_points_57(unit_square, 2))
        assert coords[0] == pytest.approx((0.2, 1 / 7))
        assert coords[1] == pytest.approx((0.4, 2 / 7))

    def test_non_coprime_bases_accepted(self, unit_square):
        result = halton_points(unit_square, 50, 2, 4)
        assert len(result.geoms) == 50


class TestRobertsPoints:
    """Tests for Roberts R2 point sets."""

    def test_first_point(self, unit_square):
        coords = _coords(roberts_points(unit_square, 1))

        expected_x = 0.5 + 1 / PHI2 - 1
        expected_y = 0.5 + 1 / (PHI2 * PHI2) - 1
        assert coords[0] == pytest.approx((expected_x, expected_y))

    def test_exact_count_inside_extent(self):
        geom = box(100.0, 200.0, 150.0, 210.0)
        extent = Extent.from_geometry(geom)

        result = roberts_points(geom, 1000)

        assert len(result.geoms) == 1000
        for x, y in _coords(result):
            assert extent.contains(x, y)

    def test_deterministic(self, unit_square):
        assert _coords(roberts_points(unit_square, 300)) == _coords(roberts_points(unit_square, 300))

    def test_zero_count_is_empty(self, unit_square):
        result = roberts_points(unit_square, 0)
        assert result.geom_type == "MultiPoint"
        assert result.is_empty

    def test_no_quadrant_clustering(self, unit_square):
        """No quadrant of the unit square should hold more than 35% of points."""
        coords = _coords(roberts_points(unit_square, 1000))

        quadrants = [0, 0, 0, 0]
        for x, y in coords:
            quadrants[(x >= 0.5) + 2 * (y >= 0.5)] += 1

        assert sum(quadrants) == 1000
        assert max(quadrants) <= 350

    def test_halton_no_quadrant_clustering(self, unit_square):
        coords = _coords(halton_points(unit_square, 1000))

        quadrants = [0, 0, 0, 0]
        for x, y in coords:
            quadrants[(x >= 0.5) + 2 * (y >= 0.5)] += 1

        assert max(quadrants) <= 350


class TestSampleExtent:
    """Tests for mapping and rejecting sequence samples."""

    def test_rejected_candidate_advances_sequence(self):
        drawn = []

        def sequence():
            for sample in [(1.0, 0.5), (0.25, 0.5), (0.75, 0.75)]:
                drawn.append(sample)
                yield sample

        extent = Extent(0.0, 0.0, 4.0, 2.0)
        points = _sample_extent(extent, 1, sequence())

        # x = 4.0 sits on the exclusive upper bound and is discarded
        assert points == [(1.0, 1.0)]
        assert drawn == [(1.0, 0.5), (0.25, 0.5)]

    def test_zero_count_draws_nothing(self):
        drawn = []

        def sequence():
            while True:
                drawn.append(None)
                yield (0.5, 0.5)

        assert _sample_extent(Extent(0.0, 0.0, 1.0, 1.0), 0, sequence()) == []
        assert drawn == []
