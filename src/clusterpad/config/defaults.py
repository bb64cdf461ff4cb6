"""Default configuration and validation of configuration blocks."""

from copy import deepcopy
from typing import Any, Dict

from clusterpad.utils.globals import DEFAULT_EPS, DEFAULT_MIN_PTS, NOISE_COLOR, PALETTE

from .errors import ConfigValidationError
from .operations import deep_merge

__all__ = ["DEFAULT_CONFIG", "apply_defaults"]

DEFAULT_CONFIG = {
    "dbscan": {
        "eps": DEFAULT_EPS,
        "min_pts": DEFAULT_MIN_PTS,
        "lookup": "index",
    },
    "display": {
        "show_radius": True,
        "palette": list(PALETTE),
        "noise_color": NOISE_COLOR,
        "marker_size": 6,
    },
    "points": None,
}


def apply_defaults(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Fills a configuration with defaults and checks its structure.

    Parameters
    ----------
    cfg : Dict[str, Any]
        Loaded configuration

    Returns
    -------
    Dict[str, Any]
        Configuration with every block and key populated

    Raises
    ------
    ConfigValidationError
        If the configuration contains unknown blocks or keys, or an empty palette
    """
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ConfigValidationError(
            f"Configuration must be a dictionary, got {type(cfg).__name__}."
        )

    for key, value in cfg.items():
        if key not in DEFAULT_CONFIG:
            raise ConfigValidationError(
                f"Unknown configuration block `{key}`. Must be one of "
                f"{list(DEFAULT_CONFIG)}."
            )

        default = DEFAULT_CONFIG[key]
        if isinstance(default, dict):
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ConfigValidationError(
                    f"Configuration block `{key}` must be a dictionary."
                )
            unknown = set(value) - set(default)
            if unknown:
                raise ConfigValidationError(
                    f"Unknown keys in the `{key}` block: {sorted(unknown)}."
                )

    cfg = {k: v for k, v in cfg.items() if v is not None}
    cfg = deep_merge(deepcopy(DEFAULT_CONFIG), cfg)

    palette = cfg["display"]["palette"]
    if not isinstance(palette, list) or not palette:
        raise ConfigValidationError(
            "`display.palette` must be a non-empty list of colors, "
            f"got {palette!r}."
        )

    return cfg
