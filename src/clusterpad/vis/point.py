"""Tools to draw a (labeled) 2D point set."""

import numpy as np
import plotly.graph_objs as go

__all__ = ["scatter_points"]


def scatter_points(
    points,
    color=None,
    markersize=6,
    opacity=None,
    hovertext=None,
    hovertemplate=None,
    mode="markers",
    **kwargs,
):
    """Scatters 2D points with optional hover labels.

    Produces a :class:`plotly.graph_objs.Scatter` trace object to be drawn in
    plotly. The object is nested to be fed directly to a
    :class:`plotly.graph_objs.Figure`. All of the regular plotly parameters
    are available.

    Parameters
    ----------
    points : np.ndarray
        (N, 2) array of N points of (x, y) coordinate information
    color : Union[str, List[str]], optional
        Color of markers or (N) list of color of markers
    markersize : float, default 6
        Marker size
    opacity : float, optional
        Marker opacity
    hovertext : Union[List[str], List[int]], optional
        (N) List of labels associated with each marker
    hovertemplate : str, optional
        Hover information formatting
    mode : str, default 'markers'
        Drawing mode
    **kwargs : dict, optional
        List of additional arguments to pass to plotly.graph_objs.Scatter

    Returns
    -------
    List[go.Scatter]
        (1) List with one graph of the input points
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)

    # A scalar hover text is shared by every point, a list is per point
    if hovertemplate is None:
        lines = ["x: %{x}", "y: %{y}"]
        if hovertext is not None and np.isscalar(hovertext):
            lines.append(str(hovertext))
            hovertext = None
        elif hovertext is not None:
            lines.append("%{text}")
        hovertemplate = "<br>".join(lines)

    return [
        go.Scatter(
            x=points[:, 0],
            y=points[:, 1],
            mode=mode,
            marker={"size": markersize, "color": color, "opacity": opacity},
            text=hovertext,
            hovertemplate=hovertemplate,
            **kwargs,
        )
    ]
