"""Tools to draw circles around points."""

import numpy as np
import plotly.graph_objs as go

__all__ = ["circle_coords", "scatter_circles"]


def circle_coords(center, radius, num_samples=64):
    """Samples the contour of a circle.

    Parameters
    ----------
    center : np.ndarray
        (2) Coordinates of the circle center
    radius : float
        Circle radius
    num_samples : int, default 64
        Number of segments used to approximate the circle

    Returns
    -------
    np.ndarray
        (num_samples + 1, 2) Closed polyline of the circle contour
    """
    phi = np.linspace(0, 2 * np.pi, num_samples + 1)
    coords = np.empty((num_samples + 1, 2), dtype=np.float64)
    coords[:, 0] = center[0] + radius * np.cos(phi)
    coords[:, 1] = center[1] + radius * np.sin(phi)

    return coords


def scatter_circles(
    centers, radius, color=None, linewidth=1, num_samples=64, **kwargs
):
    """Draws a circle of fixed radius around each of a set of points.

    All circles are combined into a single line trace, with contours
    separated by gaps, so that they share one color and one legend entry.

    Parameters
    ----------
    centers : np.ndarray
        (N, 2) Coordinates of the circle centers
    radius : float
        Circle radius
    color : str, optional
        Line color
    linewidth : float, default 1
        Line width
    num_samples : int, default 64
        Number of segments used to approximate each circle
    **kwargs : dict, optional
        List of additional arguments to pass to plotly.graph_objs.Scatter

    Returns
    -------
    List[go.Scatter]
        (1) List with one line trace of all the circles
    """
    centers = np.asarray(centers, dtype=np.float64).reshape(-1, 2)
    x, y = [], []
    for center in centers:
        coords = circle_coords(center, radius, num_samples)
        x.extend(coords[:, 0].tolist() + [None])
        y.extend(coords[:, 1].tolist() + [None])

    return [
        go.Scatter(
            x=x,
            y=y,
            mode="lines",
            line={"width": linewidth, "color": color},
            hoverinfo="skip",
            **kwargs,
        )
    ]
