"""Tests for clusterpad.io.read module."""

import numpy as np
import pytest

from clusterpad.io import read_points


class TestReadPoints:
    """Test the point file reader."""

    def test_csv_with_header(self, point_file, blobs):
        """Test reading a CSV file with an `x,y` header."""
        points = read_points(point_file)

        assert points.dtype == np.float64
        assert np.array_equal(points, blobs)

    def test_csv_without_header(self, tmp_path):
        """Test reading a CSV file without header."""
        path = tmp_path / "points.csv"
        path.write_text("1,2\n3.5,-4\n")

        points = read_points(str(path))

        assert np.array_equal(points, [[1.0, 2.0], [3.5, -4.0]])

    def test_whitespace_and_comments(self, tmp_path):
        """Test reading a whitespace-delimited file with comments."""
        path = tmp_path / "points.txt"
        path.write_text("# Clicked points\nx y\n1 2\n# Second click\n3 4\n")

        points = read_points(path)

        assert np.array_equal(points, [[1.0, 2.0], [3.0, 4.0]])

    def test_single_point(self, tmp_path):
        """Test that a single point still yields an (1, 2) array."""
        path = tmp_path / "points.csv"
        path.write_text("5,6\n")

        assert read_points(path).shape == (1, 2)

    def test_empty_file(self, tmp_path):
        """Test that an empty file yields an empty point set."""
        path = tmp_path / "points.csv"
        path.write_text("")

        assert read_points(path).shape == (0, 2)

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises an error."""
        with pytest.raises(FileNotFoundError):
            read_points(tmp_path / "missing.csv")

    def test_wrong_columns(self, tmp_path):
        """Test that files with more than two columns are rejected."""
        path = tmp_path / "points.csv"
        path.write_text("1,2,3\n4,5,6\n")

        with pytest.raises(ValueError):
            read_points(path)

    def test_non_numeric(self, tmp_path):
        """Test that non-numeric values are rejected."""
        path = tmp_path / "points.csv"
        path.write_text("1,2\n3,abc\n")

        with pytest.raises(ValueError):
            read_points(path)
