"""Draw a labeled point set the way the interactive canvas displays it."""

import numpy as np
import plotly.graph_objs as go

from clusterpad.utils.globals import NOISE_COLOR, PALETTE

from .circle import scatter_circles
from .palette import label_colors
from .point import scatter_points

__all__ = ["scatter_labels", "layout2d", "draw_labels"]


def scatter_labels(
    points,
    labels,
    eps=None,
    show_radius=False,
    palette=PALETTE,
    noise_color=NOISE_COLOR,
    markersize=6,
    linewidth=1,
):
    """Scatters points colored by cluster label.

    Each cluster gets its own trace, colored as `palette[id % len(palette)]`,
    followed by one trace for the noise points. If requested, a circle of
    radius `eps` is drawn around each point in the color of its label.

    Parameters
    ----------
    points : np.ndarray
        (N, 2) array of point coordinates
    labels : np.ndarray
        (N) Cluster label of each point, -1 for noise
    eps : float, optional
        Neighborhood radius, required if `show_radius` is `True`
    show_radius : bool, default False
        Whether to draw the neighborhood of each point
    palette : Sequence[str], default PALETTE
        Colors cycled through by cluster ID
    noise_color : str, default 'gray'
        Color of noise points
    markersize : float, default 6
        Marker size
    linewidth : float, default 1
        Width of the radius circles

    Returns
    -------
    List[go.Scatter]
        List of point traces, followed by the radius traces
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    labels = np.asarray(labels)
    if len(points) != len(labels):
        raise ValueError(
            f"Got {len(points)} points but {len(labels)} labels, must match."
        )
    if show_radius and eps is None:
        raise ValueError("Must provide `eps` to draw the point neighborhoods.")

    # Order the groups by cluster ID, noise last
    groups = [l for l in np.unique(labels) if l >= 0]
    if np.any(labels < 0):
        groups.append(-1)

    colors = label_colors(labels, palette, noise_color)
    traces, circles = [], []
    for label in groups:
        index = np.where(labels == label)[0] if label >= 0 else np.where(labels < 0)[0]
        color = colors[index[0]]
        name = f"Cluster {label}" if label >= 0 else "Noise"
        traces += scatter_points(
            points[index],
            color=color,
            markersize=markersize,
            hovertext=[f"Index: {i}<br>Label: {label}" for i in index],
            name=name,
            legendgroup=name,
        )
        if show_radius:
            circles += scatter_circles(
                points[index],
                eps,
                color=color,
                linewidth=linewidth,
                legendgroup=name,
                showlegend=False,
            )

    return traces + circles


def layout2d(screen_coords=False, **kwargs):
    """Builds a 2D layout with equal scales along both axes.

    Parameters
    ----------
    screen_coords : bool, default False
        If `True`, the y axis points down, as on a drawing surface
    **kwargs : dict, optional
        Additional layout parameters

    Returns
    -------
    dict
        Plotly layout dictionary
    """
    yaxis = {"scaleanchor": "x", "scaleratio": 1}
    if screen_coords:
        yaxis["autorange"] = "reversed"

    layout = {
        "xaxis": {"title": "x"},
        "yaxis": {"title": "y", **yaxis},
        "plot_bgcolor": "white",
        "legend": {"title": "Labels"},
    }
    layout.update(kwargs)

    return layout


def draw_labels(points, labels, eps=None, show_radius=False, screen_coords=False, **kwargs):
    """Draws a labeled point set in a plotly figure.

    Parameters
    ----------
    points : np.ndarray
        (N, 2) array of point coordinates
    labels : np.ndarray
        (N) Cluster label of each point, -1 for noise
    eps : float, optional
        Neighborhood radius, required if `show_radius` is `True`
    show_radius : bool, default False
        Whether to draw the neighborhood of each point
    screen_coords : bool, default False
        If `True`, the y axis points down, as on a drawing surface
    **kwargs : dict, optional
        Additional arguments passed to :func:`scatter_labels`

    Returns
    -------
    go.Figure
        Figure with the labeled points
    """
    traces = scatter_labels(points, labels, eps, show_radius, **kwargs)

    return go.Figure(data=traces, layout=layout2d(screen_coords))
