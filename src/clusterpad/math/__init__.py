"""Module with fast, Numba-accelerated, compiled math routines.

This includes multiple submodules:
- `distance.py` includes distance functions, as found in scipy.distance
- `neighbors.py` includes radius neighbor queries
- `cluster.py` includes the DBSCAN clustering engine, as found in sklearn.cluster
"""

# Expose submodules
from . import cluster, distance, neighbors

# Expose the clustering engine directly
from .cluster import DBSCAN, NOISE, dbscan
