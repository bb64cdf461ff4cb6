"""YAML loader for clusterpad configuration files.

A configuration file holds up to three blocks (`dbscan`, `display` and
`points`) along with loader directives:

.. code-block:: yaml

    include: [display.yaml, local]   # merged first, in order
    dbscan:
      eps: 30                        # takes precedence over the includes
    points: !path data/clicks.csv    # resolved relative to this file
    override:
      display.marker_size: 8         # applied once everything is merged
    remove: display.palette          # falls back to the default palette

Inline blocks can be loaded from another file with `display: !include
display.yaml`. Included files are looked up next to the including file,
then in the directories listed in the `CLUSTERPAD_CONFIG_PATH` environment
variable, with or without a `.yaml`/`.yml` extension.

Each included file is merged with its own overrides and removals applied
before the content of the including file is merged on top of it. The
defaults of every block are filled in last, by :func:`load_config`.
"""

import os
from typing import Any, Dict, List, Optional, TextIO, Tuple, cast

import yaml

from clusterpad.utils.logger import logger

from .defaults import apply_defaults
from .errors import ConfigCycleError, ConfigIncludeError, ConfigOperationError
from .operations import (
    deep_merge,
    parse_value,
    remove_nested_value,
    set_nested_value,
    split_directives,
)

__all__ = [
    "load_config",
    "load_config_file",
    "resolve_config_path",
    "apply_overrides",
    "ConfigLoader",
]

# Environment variable listing extra directories to search configurations in
CONFIG_PATH_ENV = "CLUSTERPAD_CONFIG_PATH"

# Extensions tried when a file name is given without one
CONFIG_EXTENSIONS = (".yaml", ".yml")


def _search_dirs(current_dir, search_paths):
    """Lists the directories to look for a file in, in priority order."""
    if search_paths is None:
        env = os.environ.get(CONFIG_PATH_ENV, "")
        search_paths = [p.strip() for p in env.split(os.pathsep) if p.strip()]

    return [current_dir, *search_paths]


def resolve_config_path(
    filename: str, current_dir: str, search_paths: Optional[List[str]] = None
) -> str:
    """Finds the file a configuration refers to.

    Parameters
    ----------
    filename : str
        Name or path of the file, absolute or relative
    current_dir : str
        Directory of the configuration which refers to the file
    search_paths : List[str], optional
        Additional directories to search, `CLUSTERPAD_CONFIG_PATH` by default

    Returns
    -------
    str
        Absolute path to the file

    Raises
    ------
    ConfigIncludeError
        If the file cannot be found
    """
    if os.path.isabs(filename):
        if not os.path.exists(filename):
            raise ConfigIncludeError(f"Configuration file not found: {filename}")
        return filename

    dirs = _search_dirs(current_dir, search_paths)
    for directory in dirs:
        base = os.path.join(directory, filename)
        candidates = [base]
        if not filename.endswith(CONFIG_EXTENSIONS):
            candidates += [base + ext for ext in CONFIG_EXTENSIONS]

        for candidate in candidates:
            if os.path.exists(candidate):
                return os.path.abspath(candidate)

    raise ConfigIncludeError(
        f"Could not find '{filename}' in any of: " + ", ".join(dirs)
    )


class ConfigLoader(yaml.SafeLoader):
    """Safe YAML loader which understands the `!include` and `!path` tags.

    Both tags resolve their argument relative to the directory of the file
    being loaded.
    """

    def __init__(self, stream: TextIO) -> None:
        self._root = os.path.dirname(os.path.abspath(stream.name))
        super().__init__(stream)

    def include(self, node: yaml.Node) -> Any:
        """Replaces the node with the content of another YAML file."""
        filename = self.construct_scalar(cast(yaml.ScalarNode, node))
        path = resolve_config_path(filename, self._root)
        logger.debug("Including configuration block from: %s", path)

        with open(path, "r", encoding="utf-8") as f:
            return yaml.load(f, Loader=ConfigLoader)

    def resolve_path(self, node: yaml.Node) -> str:
        """Replaces the node with the absolute path of an existing file."""
        filename = self.construct_scalar(cast(yaml.ScalarNode, node))

        return resolve_config_path(filename, self._root)


ConfigLoader.add_constructor("!include", ConfigLoader.include)
ConfigLoader.add_constructor("!path", ConfigLoader.resolve_path)


def apply_overrides(
    config: Dict[str, Any],
    overrides: Dict[str, Any],
    removals: Optional[List[str]] = None,
    strict: str = "error",
) -> Dict[str, Any]:
    """Applies dot-notation removals, then overrides, to a configuration.

    Parameters
    ----------
    config : Dict[str, Any]
        Configuration dictionary, modified in place
    overrides : Dict[str, Any]
        Map from dot-separated key path to value (strings are YAML-parsed)
    removals : List[str], optional
        Dot-separated key paths to remove
    strict : str, default 'error'
        What to do when a removal targets a missing path, see
        :func:`clusterpad.config.operations.remove_nested_value`

    Returns
    -------
    Dict[str, Any]
        Modified configuration
    """
    for key_path in removals or []:
        remove_nested_value(config, key_path, strict=strict)

    for key_path, value in overrides.items():
        set_nested_value(config, key_path, parse_value(value))

    return config


def _read_yaml(path: str) -> Any:
    """Parses one configuration file, without processing its directives."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.load(f, Loader=ConfigLoader)
    except FileNotFoundError as exc:
        raise ConfigIncludeError(f"Configuration file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigIncludeError(f"Could not parse {path}: {exc}") from exc


def _load_tree(
    path: str, stack: Tuple[str, ...] = ()
) -> Tuple[Dict[str, Any], Dict[str, Any], List[str]]:
    """Loads a file and, depth-first, every file it includes.

    Parameters
    ----------
    path : str
        Path to the configuration file
    stack : Tuple[str, ...], default ()
        Files currently being loaded, outermost first

    Returns
    -------
    Dict[str, Any]
        Merged content of the file and its includes
    Dict[str, Any]
        Overrides of the file itself, not applied yet
    List[str]
        Removals of the file itself, not applied yet

    Raises
    ------
    ConfigCycleError
        If the file includes itself, directly or not
    """
    path = os.path.abspath(path)
    if path in stack:
        raise ConfigCycleError([*stack, path])
    stack = (*stack, path)

    loaded = _read_yaml(path)
    if loaded is None:
        return {}, {}, []

    directives = split_directives(loaded)
    if not isinstance(directives.content, dict):
        raise ConfigOperationError(
            f"Configuration file {path} must contain a mapping at the top level."
        )

    config = {}
    for name in directives.includes:
        include_path = resolve_config_path(name, os.path.dirname(path))
        logger.debug("Including configuration file: %s", include_path)

        content, overrides, removals = _load_tree(include_path, stack)
        config = apply_overrides(deep_merge(config, content), overrides, removals)

    config = deep_merge(config, directives.content)

    return config, directives.overrides, directives.removals


def load_config_file(cfg_path: str) -> Dict[str, Any]:
    """Loads a configuration file and its includes, without defaults.

    Parameters
    ----------
    cfg_path : str
        Path to the configuration file

    Returns
    -------
    Dict[str, Any]
        Merged configuration, with every directive applied
    """
    config, overrides, removals = _load_tree(cfg_path)

    return apply_overrides(config, overrides, removals)


def load_config(cfg_path: str) -> Dict[str, Any]:
    """Loads a clusterpad configuration file.

    Parameters
    ----------
    cfg_path : str
        Path to the configuration file

    Returns
    -------
    Dict[str, Any]
        Merged configuration, with every block and key populated

    Raises
    ------
    ConfigCycleError
        If the includes form a cycle
    ConfigIncludeError
        If a file cannot be found or parsed
    ConfigOperationError
        If a directive is malformed
    ConfigPathError
        If a removal targets a path which does not exist
    ConfigValidationError
        If the configuration contains unknown blocks or keys

    Examples
    --------
    >>> cfg = load_config("config/example.yaml")
    >>> cfg["dbscan"]["eps"]
    45
    """
    return apply_defaults(load_config_file(cfg_path))
