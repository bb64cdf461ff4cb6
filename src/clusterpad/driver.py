"""Contains the Driver class, which owns the state of a clustering session.

The driver holds the point set, the clustering parameters and the display
flag as the single source of truth. The label assignment is derived from
them: it is recomputed from scratch whenever one of the clustering inputs
changes, and never updated incrementally.
"""

import os

import numpy as np

from .io import read_points
from .math.cluster import (
    DBSCAN,
    as_points,
    check_parameters,
    count_clusters,
    count_noise,
    form_clusters,
)
from .utils.globals import DEFAULT_EPS, DEFAULT_MIN_PTS, NOISE_COLOR, PALETTE
from .utils.logger import logger

__all__ = ["Driver"]


class Driver:
    """Central class which ties the point source, the clustering engine
    and the renderer together.

    Typical usage:

    .. code-block:: python

        driver = Driver(eps=45, min_pts=3)
        driver.add_point(10, 20)
        driver.add_point(30, 25)
        labels = driver.labels
        fig = driver.draw()

    Attributes
    ----------
    show_radius : bool
        Whether to draw the neighborhood of each point
    palette : List[str]
        Colors cycled through by cluster ID
    noise_color : str
        Color of noise points
    marker_size : float
        Size of the point markers
    """

    def __init__(
        self,
        eps=DEFAULT_EPS,
        min_pts=DEFAULT_MIN_PTS,
        show_radius=True,
        points=None,
        lookup="index",
        palette=PALETTE,
        noise_color=NOISE_COLOR,
        marker_size=6,
    ):
        """Initialize the clustering session.

        Parameters
        ----------
        eps : float, default 45
            Neighborhood radius
        min_pts : int, default 3
            Minimum neighborhood size (including oneself) of a core point
        show_radius : bool, default True
            Whether to draw the neighborhood of each point
        points : array_like, optional
            (N, 2) Initial point set
        lookup : str, default 'index'
            Strategy used to resolve neighbors to point indexes
        palette : Sequence[str], default PALETTE
            Colors cycled through by cluster ID
        noise_color : str, default 'gray'
            Color of noise points
        marker_size : float, default 6
            Size of the point markers

        Raises
        ------
        InvalidParameterError
            If `eps`, `min_pts` or `lookup` is not valid
        ValueError
            If `points` is not shaped as (N, 2) or `palette` is empty
        """
        self._clusterer = DBSCAN(eps, min_pts, lookup)
        self._points = []
        if points is not None:
            self._points = [(float(x), float(y)) for x, y in as_points(points)]

        if not len(palette):
            raise ValueError("The color palette must contain at least one color.")

        self.show_radius = bool(show_radius)
        self.palette = list(palette)
        self.noise_color = noise_color
        self.marker_size = marker_size

        self._labels = None

    @classmethod
    def from_config(cls, cfg, parent_path=None):
        """Build a driver from a full configuration dictionary.

        Parameters
        ----------
        cfg : dict
            Configuration with `dbscan`, `display` and `points` blocks, as
            returned by :func:`clusterpad.config.load_config`
        parent_path : str, optional
            Directory of the configuration file, which a relative `points`
            path is resolved against

        Returns
        -------
        Driver
            Initialized driver
        """
        dbscan_cfg = cfg.get("dbscan", {})
        display_cfg = cfg.get("display", {})

        points = None
        if cfg.get("points") is not None:
            path = cfg["points"]
            if parent_path is not None and not os.path.isabs(path):
                path = os.path.join(parent_path, path)
            points = read_points(path)

        return cls(
            points=points,
            eps=dbscan_cfg.get("eps", DEFAULT_EPS),
            min_pts=dbscan_cfg.get("min_pts", DEFAULT_MIN_PTS),
            lookup=dbscan_cfg.get("lookup", "index"),
            show_radius=display_cfg.get("show_radius", True),
            palette=display_cfg.get("palette", PALETTE),
            noise_color=display_cfg.get("noise_color", NOISE_COLOR),
            marker_size=display_cfg.get("marker_size", 6),
        )

    @property
    def eps(self):
        """Neighborhood radius."""
        return self._clusterer.eps

    @property
    def min_pts(self):
        """Minimum neighborhood size of a core point."""
        return self._clusterer.min_pts

    @property
    def lookup(self):
        """Strategy used to resolve neighbors to point indexes."""
        return self._clusterer.lookup

    @property
    def points(self):
        """Current point set, as a read-only (N, 2) array."""
        points = np.array(self._points, dtype=np.float64).reshape(-1, 2)
        points.setflags(write=False)

        return points

    @property
    def stale(self):
        """Whether the inputs changed since the last label assignment."""
        return self._labels is None

    @property
    def labels(self):
        """Label assignment of the current point set.

        Recomputed from scratch if any clustering input changed since the
        last computation, otherwise returned from the cache.

        Returns
        -------
        np.ndarray
            (N) Read-only cluster label of each point, -1 for noise
        """
        if self._labels is None:
            self.run()

        return self._labels

    def __len__(self):
        return len(self._points)

    def add_point(self, x, y):
        """Adds a point at the end of the point set (e.g. a click).

        Parameters
        ----------
        x : float
            Point x coordinate
        y : float
            Point y coordinate

        Returns
        -------
        int
            Index of the new point
        """
        self._points.append((float(x), float(y)))
        self._invalidate(f"Added point {len(self._points) - 1} at ({x}, {y})")

        return len(self._points) - 1

    def clear(self):
        """Removes every point from the point set."""
        self._points = []
        self._invalidate("Cleared the point set")

    def set_eps(self, eps):
        """Updates the neighborhood radius.

        Parameters
        ----------
        eps : float
            New neighborhood radius
        """
        self._set_parameters(eps, self.min_pts)

    def set_min_pts(self, min_pts):
        """Updates the minimum neighborhood size.

        Parameters
        ----------
        min_pts : int
            New minimum neighborhood size
        """
        self._set_parameters(self.eps, min_pts)

    def set_show_radius(self, show_radius):
        """Toggles the drawing of point neighborhoods.

        This only affects the rendering, the labels are left untouched.

        Parameters
        ----------
        show_radius : bool
            Whether to draw the neighborhood of each point
        """
        self.show_radius = bool(show_radius)
        logger.debug("Set show_radius to %s", self.show_radius)

    def run(self):
        """Recomputes the full label assignment.

        Returns
        -------
        np.ndarray
            (N) Read-only cluster label of each point, -1 for noise
        """
        labels = self._clusterer.fit_predict(self.points)
        labels.setflags(write=False)
        self._labels = labels

        logger.info(
            "Clustered %d points (eps=%g, min_pts=%d): %d cluster(s), %d noise point(s)",
            len(labels),
            self.eps,
            self.min_pts,
            count_clusters(labels),
            count_noise(labels),
        )

        return labels

    def summary(self):
        """Returns summary counts of the current label assignment.

        Returns
        -------
        dict
            Number of points, clusters, noise points and points per cluster
        """
        labels = self.labels

        return {
            "num_points": len(labels),
            "num_clusters": count_clusters(labels),
            "num_noise": count_noise(labels),
            "cluster_sizes": [len(c) for c in form_clusters(labels)],
        }

    def draw(self, screen_coords=False):
        """Draws the current point set colored by label.

        Parameters
        ----------
        screen_coords : bool, default False
            If `True`, the y axis points down, as on a drawing surface

        Returns
        -------
        plotly.graph_objs.Figure
            Figure with the labeled points
        """
        # Plotly is an optional dependency, only needed to draw
        from .vis import draw_labels

        return draw_labels(
            self.points,
            self.labels,
            eps=self.eps,
            show_radius=self.show_radius,
            screen_coords=screen_coords,
            palette=self.palette,
            noise_color=self.noise_color,
            markersize=self.marker_size,
        )

    def _set_parameters(self, eps, min_pts):
        """Validates and stores new clustering parameters.

        The current state is left untouched if the parameters are invalid.
        """
        eps, min_pts = check_parameters(eps, min_pts, self.lookup)
        if eps == self.eps and min_pts == self.min_pts:
            return

        self._clusterer = DBSCAN(eps, min_pts, self.lookup)
        self._invalidate(f"Set eps={eps:g}, min_pts={min_pts}")

    def _invalidate(self, reason):
        """Marks the label assignment as stale."""
        logger.debug("%s, labels are stale", reason)
        self._labels = None
