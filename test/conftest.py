"""Sets up fixtures general to the entire test suite of this package.

This file is read during the collection phase of pytest when running anything
inside this directory.
"""

import numpy as np
import pytest


def pytest_addoption(parser):
    """Defines testing command line arguments that can be passed to any
    test scripts inside the general test directory.
    """
    # Optional command line argument to specify one or several point set sizes
    parser.addoption(
        "--num-points",
        type=int,
        nargs="+",
        action="store",
        default=[50],
        help="Size of the random point sets (default: 50)",
    )


def pytest_generate_tests(metafunc):
    """Appends general parameters to all tests."""
    # If a test requires the fixture num_points, use the command line option.
    if "num_points" in metafunc.fixturenames:
        metafunc.parametrize("num_points", metafunc.config.getoption("--num-points"))


@pytest.fixture(name="blobs")
def fixture_blobs():
    """Two well separated dense groups of points followed by an outlier.

    With `eps=1` and `min_pts=2`, the first three points form cluster 0,
    the next three form cluster 1 and the last point is noise.
    """
    return np.array(
        [
            [0.0, 0.0],
            [0.5, 0.0],
            [0.0, 0.5],
            [10.0, 10.0],
            [10.5, 10.0],
            [10.0, 10.5],
            [50.0, -50.0],
        ]
    )


@pytest.fixture(name="random_points")
def fixture_random_points(num_points):
    """Reproducible random point set in a 10x10 box.

    Parameters
    ----------
    num_points : int
        Number of points to generate
    """
    rng = np.random.default_rng(seed=42)

    return rng.uniform(0.0, 10.0, size=(num_points, 2))


@pytest.fixture(name="point_file")
def fixture_point_file(tmp_path, blobs):
    """Writes the `blobs` point set to a CSV file with an `x,y` header.

    Parameters
    ----------
    tmp_path : pathlib.Path
       Generic pytest fixture used to handle temporary test files
    blobs : np.ndarray
       Point set to write
    """
    path = tmp_path / "points.csv"
    lines = ["x,y"] + [f"{x},{y}" for x, y in blobs]
    path.write_text("\n".join(lines) + "\n")

    return path
