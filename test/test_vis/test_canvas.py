"""Tests for clusterpad.vis module."""

import numpy as np
import pytest

go = pytest.importorskip("plotly.graph_objs")

from clusterpad.math.cluster import NOISE, dbscan
from clusterpad.utils.globals import NOISE_COLOR, PALETTE
from clusterpad.vis.palette import cluster_color, label_colors


class TestPalette:
    """Test the label to color mapping."""

    def test_cluster_colors(self):
        """Test that cluster IDs index the palette."""
        assert cluster_color(0) == PALETTE[0]
        assert cluster_color(3) == PALETTE[3]

    def test_palette_wraps(self):
        """Test that cluster IDs cycle through the palette."""
        assert cluster_color(len(PALETTE)) == PALETTE[0]
        assert cluster_color(len(PALETTE) + 2) == PALETTE[2]

    def test_noise_color(self):
        """Test that noise gets its own fixed color."""
        assert cluster_color(NOISE) == NOISE_COLOR
        assert cluster_color(NOISE, noise_color="black") == "black"

    def test_label_colors(self):
        """Test the per-point color list."""
        colors = label_colors([0, 1, NOISE, 0], palette=["a", "b"], noise_color="n")

        assert colors == ["a", "b", "n", "a"]

    def test_empty_palette(self):
        """Test that an empty palette is rejected."""
        with pytest.raises(ValueError):
            label_colors([0], palette=[])


class TestCircles:
    """Test the neighborhood circles."""

    def test_circle_coords(self):
        """Test that sampled contour points lie on a closed circle."""
        from clusterpad.vis.circle import circle_coords

        coords = circle_coords(np.array([1.0, 2.0]), 3.0, num_samples=16)

        assert coords.shape == (17, 2)
        radii = np.linalg.norm(coords - np.array([1.0, 2.0]), axis=1)
        assert np.allclose(radii, 3.0)
        assert np.allclose(coords[0], coords[-1])

    def test_scatter_circles(self):
        """Test that all circles are combined in one trace."""
        from clusterpad.vis.circle import scatter_circles

        traces = scatter_circles([[0.0, 0.0], [5.0, 5.0]], 1.0, num_samples=8)

        assert len(traces) == 1
        assert len(traces[0].x) == 2 * (8 + 2)
        assert traces[0].line.color is None


class TestCanvas:
    """Test the labeled canvas drawing."""

    def test_scatter_labels(self, blobs):
        """Test one trace per cluster plus one for noise."""
        from clusterpad.vis import scatter_labels

        labels = dbscan(blobs, eps=1.0, min_pts=2)
        traces = scatter_labels(blobs, labels)

        assert len(traces) == 3
        assert [t.name for t in traces] == ["Cluster 0", "Cluster 1", "Noise"]
        assert traces[0].marker.color == PALETTE[0]
        assert traces[2].marker.color == NOISE_COLOR
        assert len(traces[2].x) == 1

    def test_scatter_labels_with_radius(self, blobs):
        """Test that radius circles are added, one trace per label group."""
        from clusterpad.vis import scatter_labels

        labels = dbscan(blobs, eps=1.0, min_pts=2)
        traces = scatter_labels(blobs, labels, eps=1.0, show_radius=True)

        assert len(traces) == 6
        assert all(t.mode == "lines" for t in traces[3:])
        assert traces[3].line.color == PALETTE[0]

    def test_radius_requires_eps(self, blobs):
        """Test that drawing the radius requires eps."""
        from clusterpad.vis import scatter_labels

        with pytest.raises(ValueError):
            scatter_labels(blobs, np.zeros(len(blobs), dtype=int), show_radius=True)

    def test_scatter_labels_palette(self, blobs):
        """Test that cluster colors cycle through a custom palette."""
        from clusterpad.vis import scatter_labels

        labels = dbscan(blobs, eps=1.0, min_pts=2)
        traces = scatter_labels(blobs, labels, palette=["red"], noise_color="black")

        assert [t.marker.color for t in traces] == ["red", "red", "black"]

        with pytest.raises(ValueError):
            scatter_labels(blobs, labels, palette=[])

    def test_length_mismatch(self, blobs):
        """Test that points and labels must match."""
        from clusterpad.vis import scatter_labels

        with pytest.raises(ValueError):
            scatter_labels(blobs, [0, 1])

    def test_draw_labels(self, blobs):
        """Test that a full figure is produced."""
        from clusterpad.vis import draw_labels

        labels = dbscan(blobs, eps=1.0, min_pts=2)
        fig = draw_labels(blobs, labels, eps=1.0, show_radius=True, screen_coords=True)

        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 6
        assert fig.layout.yaxis.autorange == "reversed"
        assert fig.layout.yaxis.scaleanchor == "x"

    def test_draw_empty(self):
        """Test that an empty point set can be drawn."""
        from clusterpad.vis import draw_labels

        fig = draw_labels(np.empty((0, 2)), np.empty(0, dtype=int))

        assert len(fig.data) == 0
