"""Readers which load point sets from text files."""

from pathlib import Path
from typing import Union

import numpy as np

from clusterpad.utils.logger import logger

__all__ = ["read_points"]


def read_points(path: Union[str, Path]) -> np.ndarray:
    """Load a point set from a delimited text file.

    The file lists one point per line as two columns. Columns may be separated
    by commas or whitespace, and the file may start with an `x,y` header line.
    Lines starting with `#` are ignored.

    Parameters
    ----------
    path : Union[str, Path]
        Path to the point file

    Returns
    -------
    np.ndarray
        (N, 2) float64 array of point coordinates, in file order

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValueError
        If the file does not contain exactly two numeric columns
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Point file not found: {path}")

    # Sniff the delimiter and the presence of a header from the first line
    with open(path, "r", encoding="utf-8") as f:
        first, first_idx = "", 0
        for first_idx, line in enumerate(f):
            if line.strip() and not line.lstrip().startswith("#"):
                first = line.strip()
                break

    if not first:
        logger.debug("Point file %s is empty.", path)
        return np.empty((0, 2), dtype=np.float64)

    delimiter = "," if "," in first else None
    tokens = first.split(delimiter)
    skip_header = 0
    try:
        [float(t) for t in tokens]
    except ValueError:
        skip_header = first_idx + 1

    arr = np.genfromtxt(
        str(path),
        delimiter=delimiter,
        skip_header=skip_header,
        comments="#",
        dtype=float,
        ndmin=2,
    )
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)

    if arr.shape[1] != 2:
        raise ValueError(
            f"Point file {path} must have exactly 2 columns, found {arr.shape[1]}."
        )
    if np.isnan(arr).any():
        raise ValueError(f"Point file {path} contains non-numeric values.")

    logger.debug("Loaded %d points from %s.", len(arr), path)

    return arr.astype(np.float64)
