"""Mapping from cluster labels to display colors."""

from clusterpad.utils.globals import NOISE_COLOR, PALETTE

__all__ = ["PALETTE", "NOISE_COLOR", "cluster_color", "label_colors"]


def cluster_color(label, palette=PALETTE, noise_color=NOISE_COLOR):
    """Returns the color of a single label.

    Parameters
    ----------
    label : int
        Cluster label, negative for noise
    palette : Sequence[str], default PALETTE
        Colors cycled through by cluster ID
    noise_color : str, default 'gray'
        Color of noise points

    Returns
    -------
    str
        Color of the label
    """
    if label < 0:
        return noise_color

    return palette[int(label) % len(palette)]


def label_colors(labels, palette=PALETTE, noise_color=NOISE_COLOR):
    """Returns the color of each point given its cluster label.

    Parameters
    ----------
    labels : np.ndarray
        (N) Cluster label of each point, -1 for noise
    palette : Sequence[str], default PALETTE
        Colors cycled through by cluster ID
    noise_color : str, default 'gray'
        Color of noise points

    Returns
    -------
    List[str]
        (N) Color of each point
    """
    if not len(palette):
        raise ValueError("The color palette must contain at least one color.")

    return [cluster_color(l, palette, noise_color) for l in labels]
