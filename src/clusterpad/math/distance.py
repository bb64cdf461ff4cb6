"""Numba JIT compiled implementation of distance computation routines.

This module is entirely dedicated to 2D points, which is the representation
of the interactively placed points this package clusters.
"""

import numba as nb
import numpy as np

__all__ = ["euclidean"]


@nb.njit(cache=True)
def euclidean(x: nb.float64[:], y: nb.float64[:]) -> nb.float64:
    """Compute the Euclidean distance (L2) between two 2D points.

    Parameters
    ----------
    x : np.ndarray
        (2) Coordinates of the first point
    y : np.ndarray
        (2) Coordinates of the second point

    Returns
    -------
    float
        Euclidean distance
    """
    return np.sqrt((y[0] - x[0]) ** 2 + (y[1] - x[1]) ** 2)

