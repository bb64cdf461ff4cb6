"""Input of point sets.

- `read`: Point file readers
"""

from .read import read_points
