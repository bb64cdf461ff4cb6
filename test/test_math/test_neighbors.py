"""Tests for clusterpad.math.neighbors module."""

import numpy as np

from clusterpad.math.neighbors import first_occurrence, region_query


class TestRegionQuery:
    """Test the radius neighbor query."""

    def test_includes_self(self):
        """The reference point is always its own neighbor."""
        points = np.array([[0.0, 0.0], [10.0, 10.0]])

        index = region_query(points, points[1], 1.0)

        assert list(index) == [1]

    def test_inclusive_boundary(self):
        """Points exactly at a distance eps are neighbors."""
        points = np.array([[0.0, 0.0], [3.0, 4.0], [0.0, 1.0]])

        assert list(region_query(points, points[0], 5.0)) == [0, 1, 2]
        assert list(region_query(points, points[0], 4.999)) == [0, 2]

    def test_scan_order(self):
        """Neighbors are returned in the order of the point set."""
        points = np.array([[2.0, 0.0], [0.0, 0.0], [1.0, 0.0], [9.0, 9.0]])

        index = region_query(points, points[2], 1.0)

        assert list(index) == [0, 1, 2]

    def test_external_reference_point(self):
        """The reference point does not have to belong to the set."""
        points = np.array([[0.0, 0.0], [1.0, 0.0]])

        index = region_query(points, np.array([5.0, 5.0]), 1.0)

        assert len(index) == 0

    def test_matches_distance_matrix(self, random_points):
        """Each neighborhood matches the thresholded distance matrix."""
        diffs = random_points[:, None, :] - random_points[None, :, :]
        dists = np.sqrt(np.sum(diffs**2, axis=-1))
        eps = 1.5
        for i in range(len(random_points)):
            index = region_query(random_points, random_points[i], eps)
            assert np.array_equal(index, np.where(dists[i] <= eps)[0])


class TestFirstOccurrence:
    """Test the coordinate-based duplicate resolution."""

    def test_unique_points(self):
        """Unique points map onto themselves."""
        points = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])

        assert list(first_occurrence(points)) == [0, 1, 2]

    def test_duplicate_points(self):
        """Duplicates map onto the first point with the same coordinates."""
        points = np.array(
            [[1.0, 1.0], [0.0, 0.0], [1.0, 1.0], [0.0, 0.0], [1.0, 0.0]]
        )

        assert list(first_occurrence(points)) == [0, 1, 0, 1, 4]
