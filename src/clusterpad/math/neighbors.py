"""Numba JIT compiled implementation of neighbor query routines.

In particular, this module supports:
- Radius-based neighbor queries (brute-force scan of the point set)
- Coordinate-based identification of duplicate points
"""

import numba as nb
import numpy as np

from .distance import euclidean

__all__ = ["region_query", "first_occurrence"]


@nb.njit(cache=True)
def region_query(
    x: nb.float64[:, :], point: nb.float64[:], eps: nb.float64
) -> nb.int64[:]:
    """Finds all the points within some radius of a reference point.

    The reference point itself is part of the output if it belongs to the
    point set, as its distance to itself is zero. The radius comparison is
    inclusive: points exactly at a distance `eps` are neighbors.

    Parameters
    ----------
    x : np.ndarray
        (N, 2) array of point coordinates
    point : np.ndarray
        (2) Coordinates of the reference point
    eps : float
        Neighborhood radius

    Returns
    -------
    np.ndarray
        (K) Indexes of the neighbors, in the order of the point set
    """
    index = np.empty(len(x), dtype=np.int64)
    count = 0
    for i in range(len(x)):
        if euclidean(x[i], point) <= eps:
            index[count] = i
            count += 1

    return index[:count]


@nb.njit(cache=True)
def first_occurrence(x: nb.float64[:, :]) -> nb.int64[:]:
    """Maps each point to the first point in the set with identical coordinates.

    Parameters
    ----------
    x : np.ndarray
        (N, 2) array of point coordinates

    Returns
    -------
    np.ndarray
        (N) Index of the first point which shares the coordinates of each point
    """
    num_points = len(x)
    index = np.arange(num_points)
    for i in range(num_points):
        for j in range(i):
            if x[j, 0] == x[i, 0] and x[j, 1] == x[i, 1]:
                index[i] = j
                break

    return index
