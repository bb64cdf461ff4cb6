#!/usr/bin/env python3
"""Command-line entry point which clusters a point file."""

import argparse
import importlib
import os
import sys
from typing import List, Optional

from clusterpad.config import apply_defaults, load_config_file
from clusterpad.config.loader import resolve_config_path
from clusterpad.config.operations import parse_value, set_nested_value
from clusterpad.utils.logger import logger


def main(
    config: Optional[str] = None,
    source: Optional[str] = None,
    eps: Optional[float] = None,
    min_pts: Optional[int] = None,
    show_radius: Optional[bool] = None,
    lookup: Optional[str] = None,
    config_overrides: Optional[List[str]] = None,
    output: Optional[str] = None,
    screen_coords: bool = False,
):
    """Main driver for a clustering run.

    Performs these basic functions:
    - Update the configuration with the command-line arguments
    - Cluster the point set and report the labels
    - Optionally draw the labeled point set to an HTML file

    Parameters
    ----------
    config : str, optional
        Path to the configuration file
    source : str, optional
        Path to the point file
    eps : float, optional
        Neighborhood radius
    min_pts : int, optional
        Minimum neighborhood size of a core point
    show_radius : bool, optional
        Whether to draw the neighborhood of each point
    lookup : str, optional
        Strategy used to resolve neighbors to point indexes
    config_overrides : List[str], optional
        List of config overrides in the form "key.path=value"
    output : str, optional
        Path to the output HTML figure
    screen_coords : bool, default False
        If `True`, the y axis of the figure points down

    Returns
    -------
    np.ndarray
        (N) Cluster label of each point, -1 for noise
    """
    # Load the configuration file, if provided
    cfg, parent_path = {}, None
    if config is not None:
        cfg_file = resolve_config_path(config, current_dir=os.getcwd())
        cfg = load_config_file(cfg_file)
        parent_path = os.path.dirname(cfg_file)

    # A point file given on the command line is relative to the caller
    if source is not None:
        source = os.path.abspath(source)

    # Override the configuration with the command-line information
    arg_mapping = {
        "points": source,
        "dbscan.eps": eps,
        "dbscan.min_pts": min_pts,
        "dbscan.lookup": lookup,
        "display.show_radius": show_radius,
    }
    for key_path, value in arg_mapping.items():
        if value is not None:
            set_nested_value(cfg, key_path, value)

    # Apply any generic config overrides from --set arguments
    for override in config_overrides or []:
        if "=" not in override:
            raise ValueError(
                f"Invalid --set format: '{override}'. "
                f"Expected format: 'key.path=value'"
            )

        key_path, value_str = override.split("=", 1)
        set_nested_value(cfg, key_path.strip(), parse_value(value_str.strip()))

    # Fill in the defaults
    cfg = apply_defaults(cfg)

    # Import the driver here to keep the CLI light when only asking for help
    from clusterpad.driver import Driver

    driver = Driver.from_config(cfg, parent_path=parent_path)
    labels = driver.labels

    # Report the labels
    points = driver.points
    logger.info("%8s %12s %12s %8s", "index", "x", "y", "label")
    for i, (point, label) in enumerate(zip(points, labels)):
        logger.info("%8d %12g %12g %8d", i, point[0], point[1], label)

    summary = driver.summary()
    logger.info(
        "Summary: %d point(s), %d cluster(s), %d noise point(s)",
        summary["num_points"],
        summary["num_clusters"],
        summary["num_noise"],
    )

    # Draw the output, if requested
    if output is not None:
        fig = driver.draw(screen_coords=screen_coords)
        fig.write_html(output)
        logger.info("Wrote figure to %s", output)

    return labels


def cli(argv: Optional[List[str]] = None):
    """Main CLI entry point.

    Parameters
    ----------
    argv : List[str], optional
        Command-line arguments (defaults to `sys.argv[1:]`)
    """
    parser = argparse.ArgumentParser(
        description="clusterpad - DBSCAN clustering of 2D point sets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  clusterpad --version                           Show version information
  clusterpad --info                              Show dependency info
  clusterpad -s points.csv                       Cluster with default parameters
  clusterpad -c config.yaml --eps 30 --min-pts 4 Override the parameters
  clusterpad -c config.yaml --set dbscan.eps=30  Override config parameters
  clusterpad -s points.csv -o labels.html        Draw the labeled points

For drawing functionality, ensure Plotly is installed:
  pip install clusterpad[viz]
""",
    )

    # Add a version command
    parser.add_argument(
        "--version", "-v", action="version", version=f"clusterpad {get_version()}"
    )

    # Add basic info command
    parser.add_argument(
        "--info",
        "-i",
        action="store_true",
        help="Show system and dependency information",
    )

    # Add config and point file arguments
    parser.add_argument("-c", "--config", help="Path to the configuration file")
    parser.add_argument("-s", "--source", help="Path to the point file")

    # Add clustering parameter arguments
    parser.add_argument("--eps", type=float, help="Neighborhood radius")
    parser.add_argument(
        "--min-pts", type=int, help="Minimum neighborhood size of a core point"
    )
    parser.add_argument(
        "--lookup",
        choices=["index", "coords"],
        help="Strategy used to resolve neighbors to point indexes",
    )

    # Add display arguments
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--show-radius",
        dest="show_radius",
        action="store_true",
        default=None,
        help="Draw the neighborhood of each point",
    )
    group.add_argument(
        "--hide-radius",
        dest="show_radius",
        action="store_false",
        help="Do not draw the neighborhood of each point",
    )
    parser.add_argument(
        "--screen-coords",
        action="store_true",
        help="Draw with the y axis pointing down, as on a drawing surface",
    )

    # Add output argument
    parser.add_argument("-o", "--output", help="Path to the output HTML figure")

    # Add option to dynamically override any config parameter using dot notation
    parser.add_argument(
        "--set",
        action="append",
        dest="config_overrides",
        metavar="KEY=VALUE",
        help="Override any config parameter using dot notation "
        "(e.g., --set dbscan.eps=30). "
        "Can be used multiple times for multiple overrides.",
    )

    # Add logging level
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )

    # Parse the arguments
    argv = sys.argv[1:] if argv is None else argv
    args = parser.parse_args(argv)

    # If no arguments provided, show help
    if len(argv) == 0:
        parser.print_help()
        return None

    if args.info:
        show_info()
        return None

    logger.setLevel(args.log_level)

    return main(
        config=args.config,
        source=args.source,
        eps=args.eps,
        min_pts=args.min_pts,
        show_radius=args.show_radius,
        lookup=args.lookup,
        config_overrides=args.config_overrides,
        output=args.output,
        screen_coords=args.screen_coords,
    )


# Import name and display name of each dependency reported by `--info`
DEPENDENCIES = {
    "numpy": "numpy",
    "numba": "numba",
    "yaml": "pyyaml",
    "plotly": "plotly",
}


def get_version():
    """Returns the package version, or 'unknown' if it cannot be read."""
    try:
        from clusterpad.version import __version__
    except ImportError:
        return "unknown"

    return __version__


def check_dependencies():
    """Returns the installed version of each dependency.

    Returns
    -------
    Dict[str, Optional[str]]
        Version of each dependency, `None` if it is not installed
    """
    versions = {}
    for module, name in DEPENDENCIES.items():
        try:
            versions[name] = importlib.import_module(module).__version__
        except ImportError:
            versions[name] = None

    return versions


def show_info():
    """Prints the package version and the status of its dependencies."""
    versions = check_dependencies()

    print(f"clusterpad v{get_version()} (DBSCAN clustering of 2D point sets)")
    print(f"Python {sys.version.split()[0]}\n")
    print("Dependencies:")
    for name, version in versions.items():
        print(f"  {name:10} {version or 'not installed'}")

    if versions["plotly"] is None:
        print("\nDrawing is disabled, install it with: pip install clusterpad[viz]")


if __name__ == "__main__":
    cli()
