"""Top-level module of the clusterpad source code."""

# Import main workflow entry point
from .driver import Driver
from .version import __version__

# Import the clustering engine
from .math.cluster import DBSCAN, NOISE, dbscan
from .errors import ClusterError, InvalidParameterError
