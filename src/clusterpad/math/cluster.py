"""Density-based clustering of 2D points (DBSCAN).

The neighborhood scans and the cluster expansion loop are Numba JIT compiled.
Parameter validation happens in Python, once per invocation, before any of
the compiled routines run.
"""

import numbers

import numba as nb
import numpy as np

from clusterpad.errors import InvalidParameterError

from .neighbors import first_occurrence, region_query

__all__ = [
    "DBSCAN",
    "dbscan",
    "expand_cluster",
    "check_parameters",
    "as_points",
    "form_clusters",
    "count_clusters",
    "count_noise",
    "NOISE",
    "LOOKUPS",
]

# Label given to points which do not belong to any cluster
NOISE = -1

# Label given to points which have not been processed yet (never returned)
UNLABELED = -2

# Supported strategies to resolve a neighbor back to its point index
LOOKUPS = ("index", "coords")


class DBSCAN:
    """Class-version of the :func:`dbscan` function.

    The parameters are validated once, when the object is built, so that an
    invalid clusterer can never be constructed.

    Attributes
    ----------
    eps : float
        Neighborhood radius
    min_pts : int
        Minimum number of neighbors (including oneself) for a point to
        seed a cluster
    lookup : str
        Strategy used to resolve neighbors to point indexes, one of
        'index' (per-point identity) or 'coords' (first point with
        identical coordinates)
    """

    name = "dbscan"

    def __init__(self, eps, min_pts=1, lookup="index"):
        """Initialize the DBSCAN parameters.

        Parameters
        ----------
        eps : float
            Neighborhood radius
        min_pts : int, default 1
            Minimum number of neighbors (including oneself) for a point to
            seed a cluster
        lookup : str, default 'index'
            Strategy used to resolve neighbors to point indexes
        """
        self.eps, self.min_pts = check_parameters(eps, min_pts, lookup)
        self.lookup = lookup

    @classmethod
    def from_config(cls, cfg):
        """Build a clusterer from a configuration block.

        Parameters
        ----------
        cfg : dict
            Configuration block with `eps` and optionally `min_pts`/`lookup`

        Returns
        -------
        DBSCAN
            Clusterer instance
        """
        unknown = set(cfg) - {"eps", "min_pts", "lookup"}
        if unknown:
            raise KeyError(
                f"Unrecognized DBSCAN configuration keys: {sorted(unknown)}"
            )

        return cls(**cfg)

    def fit_predict(self, x):
        """Runs DBSCAN on 2D points and returns the cluster labels.

        Parameters
        ----------
        x : array_like
            (N, 2) array of point coordinates

        Returns
        -------
        np.ndarray
            (N) Cluster label of each point, -1 for noise
        """
        return dbscan(x, self.eps, self.min_pts, self.lookup)

    def __repr__(self):
        return (
            f"DBSCAN(eps={self.eps!r}, min_pts={self.min_pts!r}, "
            f"lookup={self.lookup!r})"
        )


def dbscan(x, eps, min_pts=1, lookup="index"):
    """Runs DBSCAN on 2D points and returns the cluster labels.

    Points are scanned in input order. Each unlabeled point seeds an attempt
    to expand a new cluster; successful expansions consume a new cluster ID,
    starting at 0, while failed ones mark the seed as noise. A noise point
    may later be reclaimed as a border point of a cluster.

    Only the seed must meet the `min_pts` threshold: any point reached by an
    expansion before being scanned extends the cluster with its neighbors.
    The outcome therefore depends on the input order.

    Parameters
    ----------
    x : array_like
        (N, 2) array of point coordinates
    eps : float
        Neighborhood radius (inclusive)
    min_pts : int, default 1
        Minimum number of neighbors (including oneself) for a point to
        seed a cluster
    lookup : str, default 'index'
        Strategy used to resolve neighbors to point indexes, one of 'index'
        or 'coords'. With 'coords', points which share coordinates are
        conflated onto the first of them.

    Returns
    -------
    np.ndarray
        (N) Cluster label of each point, -1 for noise

    Raises
    ------
    InvalidParameterError
        If `eps`, `min_pts` or `lookup` is not valid
    """
    # Check the parameters before doing any work
    eps, min_pts = check_parameters(eps, min_pts, lookup)

    # Cast the input to a contiguous coordinate array
    x = as_points(x)

    # Build the map from neighbor index to resolved point index
    if lookup == "index":
        index_map = np.arange(len(x), dtype=np.int64)
    else:
        index_map = first_occurrence(x)

    return _dbscan(x, eps, min_pts, index_map)


def check_parameters(eps, min_pts, lookup="index"):
    """Checks that a set of DBSCAN parameters is valid.

    Parameters
    ----------
    eps : float
        Neighborhood radius, must be finite and strictly positive
    min_pts : int
        Minimum neighborhood size, must be an integer no smaller than 1
    lookup : str, default 'index'
        Neighbor resolution strategy, must be one of :data:`LOOKUPS`

    Returns
    -------
    float
        Validated neighborhood radius
    int
        Validated minimum neighborhood size

    Raises
    ------
    InvalidParameterError
        If any of the parameters is not valid
    """
    if isinstance(eps, bool) or not isinstance(eps, numbers.Real):
        raise InvalidParameterError("eps", eps, "must be a real number")
    if not np.isfinite(eps):
        raise InvalidParameterError("eps", eps, "must be finite")
    if eps <= 0:
        raise InvalidParameterError("eps", eps, "must be strictly positive")

    if isinstance(min_pts, bool) or not isinstance(min_pts, numbers.Integral):
        raise InvalidParameterError("min_pts", min_pts, "must be an integer")
    if min_pts < 1:
        raise InvalidParameterError("min_pts", min_pts, "must be at least 1")

    if lookup not in LOOKUPS:
        raise InvalidParameterError("lookup", lookup, f"must be one of {LOOKUPS}")

    return float(eps), int(min_pts)


def form_clusters(labels):
    """Groups point indexes by cluster label.

    Parameters
    ----------
    labels : np.ndarray
        (N) Cluster label of each point, -1 for noise

    Returns
    -------
    List[np.ndarray]
        (C) List of point indexes in each cluster, ordered by cluster ID
    """
    labels = np.asarray(labels)

    return [np.where(labels == c)[0] for c in range(count_clusters(labels))]


def count_clusters(labels):
    """Returns the number of clusters in a label assignment.

    Parameters
    ----------
    labels : np.ndarray
        (N) Cluster label of each point, -1 for noise

    Returns
    -------
    int
        Number of clusters
    """
    labels = np.asarray(labels)
    if not len(labels):
        return 0

    return int(max(labels.max() + 1, 0))


def count_noise(labels):
    """Returns the number of noise points in a label assignment.

    Parameters
    ----------
    labels : np.ndarray
        (N) Cluster label of each point, -1 for noise

    Returns
    -------
    int
        Number of noise points
    """
    return int(np.sum(np.asarray(labels) == NOISE))


def as_points(x):
    """Copies an array-like of 2D points to a contiguous float64 array.

    Parameters
    ----------
    x : array_like
        (N, 2) point coordinates, possibly empty

    Returns
    -------
    np.ndarray
        (N, 2) float64 copy of the coordinates

    Raises
    ------
    ValueError
        If the input is not empty and not shaped as (N, 2)
    """
    x = np.array(x, dtype=np.float64)
    if x.size == 0:
        return np.empty((0, 2), dtype=np.float64)

    if x.ndim != 2 or x.shape[1] != 2:
        raise ValueError(
            f"Expected an (N, 2) array of point coordinates, got shape {x.shape}."
        )

    return x


@nb.njit(cache=True)
def _dbscan(
    x: nb.float64[:, :],
    eps: nb.float64,
    min_pts: nb.int64,
    index_map: nb.int64[:],
) -> nb.int64[:]:
    # Scan the points in input order, expand a cluster from each unlabeled one
    labels = np.full(len(x), UNLABELED, dtype=np.int64)
    cluster_id = 0
    for i in range(len(x)):
        if labels[i] != UNLABELED:
            continue

        if expand_cluster(x, i, cluster_id, eps, min_pts, labels, index_map):
            cluster_id += 1

    return labels


@nb.njit(cache=True)
def expand_cluster(
    x: nb.float64[:, :],
    index: nb.int64,
    cluster_id: nb.int64,
    eps: nb.float64,
    min_pts: nb.int64,
    labels: nb.int64[:],
    index_map: nb.int64[:],
) -> nb.boolean:
    """Attempts to grow a cluster from a seed point.

    The frontier is a FIFO queue of point indexes. Each point is queued at
    most once per expansion, which leaves the outcome unchanged as a point
    which already carries the cluster label is a no-op when dequeued.

    Every point reached while still unlabeled extends the frontier with its
    own neighborhood, whatever its size. Points which were already marked as
    noise are reclaimed as border points and do not extend the frontier.

    Labels are written once per point, except for the noise to cluster
    transition of reclaimed points.

    Parameters
    ----------
    x : np.ndarray
        (N, 2) array of point coordinates
    index : int
        Index of the seed point
    cluster_id : int
        Candidate cluster ID
    eps : float
        Neighborhood radius
    min_pts : int
        Minimum neighborhood size of the seed
    labels : np.ndarray
        (N) Label assignment in progress, updated in place
    index_map : np.ndarray
        (N) Point index each neighbor index resolves to

    Returns
    -------
    bool
        `True` if a cluster was formed, `False` if the seed is noise
    """
    # If the seed is not a core point, it is noise (for now)
    seeds = region_query(x, x[index], eps)
    if len(seeds) < min_pts:
        labels[index] = NOISE
        return False

    labels[index] = cluster_id

    # Initialize the frontier with the seed neighborhood
    num_points = len(x)
    frontier = np.empty(num_points, dtype=np.int64)
    queued = np.zeros(num_points, dtype=np.bool_)
    tail = 0
    for j in seeds:
        k = index_map[j]
        if not queued[k]:
            queued[k] = True
            frontier[tail] = k
            tail += 1

    # Process the frontier until it is exhausted
    head = 0
    while head < tail:
        k = frontier[head]
        head += 1

        if labels[k] == UNLABELED:
            # Newly discovered point, its whole neighborhood joins the frontier
            labels[k] = cluster_id
            for j in region_query(x, x[k], eps):
                m = index_map[j]
                if not queued[m] and labels[m] < 0:
                    queued[m] = True
                    frontier[tail] = m
                    tail += 1

        elif labels[k] == NOISE:
            # Reclaim a noise point as a border point, without expanding it
            labels[k] = cluster_id

    return True
