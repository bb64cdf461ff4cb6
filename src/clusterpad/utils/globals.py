"""Global constants shared across the clusterpad package."""

# Colors assigned to clusters, cycled through by cluster ID
PALETTE = (
    "red",
    "blue",
    "green",
    "orange",
    "purple",
    "pink",
    "brown",
    "cyan",
    "magenta",
    "yellow",
)

# Color assigned to noise points
NOISE_COLOR = "gray"

# Default clustering parameters
DEFAULT_EPS = 45.0
DEFAULT_MIN_PTS = 3
