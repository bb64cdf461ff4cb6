"""Dictionary operations used to assemble a configuration.

Configurations are plain nested dictionaries. Keys deeper than the top
level are addressed with dot-separated paths, e.g. `dbscan.eps`.
"""

import warnings
from copy import deepcopy
from typing import Any, Dict, List, NamedTuple

import yaml

from .errors import ConfigOperationError, ConfigPathError, ConfigTypeError

__all__ = [
    "Directives",
    "deep_merge",
    "parse_value",
    "set_nested_value",
    "remove_nested_value",
    "split_directives",
]

# Top-level keys which instruct the loader rather than configure clustering
DIRECTIVE_KEYS = ("include", "override", "remove")


class Directives(NamedTuple):
    """Loader directives found at the top of a configuration file.

    Attributes
    ----------
    includes : List[str]
        Files to merge before the content, in order
    overrides : Dict[str, Any]
        Map from dot-separated key path to value
    removals : List[str]
        Dot-separated key paths to delete
    content : Any
        Remaining configuration content
    """

    includes: List[str]
    overrides: Dict[str, Any]
    removals: List[str]
    content: Any


def deep_merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    """Merges two configuration dictionaries, block by block.

    Parameters
    ----------
    base : Dict[str, Any]
        Dictionary to start from
    update : Dict[str, Any]
        Dictionary whose values take precedence

    Returns
    -------
    Dict[str, Any]
        New merged dictionary, neither input is modified
    """
    merged = deepcopy(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = deepcopy(value)

    return merged


def parse_value(value: Any) -> Any:
    """Interprets a command-line or override string as a YAML scalar.

    Non-string values and blank strings are returned unchanged, as are
    strings which are not valid YAML.
    """
    if not isinstance(value, str) or not value.strip():
        return value

    try:
        return yaml.safe_load(value)
    except yaml.YAMLError:
        return value


def _parent_block(config, keys, create):
    """Walks down to the dictionary which holds the last key of a path.

    Returns `None` if a block is missing and `create` is `False`.
    """
    block = config
    for depth, key in enumerate(keys[:-1]):
        child = block.get(key)
        if child is None:
            if not create:
                return None
            child = block[key] = {}
        elif not isinstance(child, dict):
            path = ".".join(keys[: depth + 1])
            raise ConfigTypeError(
                f"Cannot address '{'.'.join(keys)}': '{path}' is a "
                f"{type(child).__name__}, not a block."
            )
        block = child

    return block


def set_nested_value(config: Dict[str, Any], key_path: str, value: Any) -> Dict[str, Any]:
    """Sets a value at a dot-separated path, creating missing blocks.

    Parameters
    ----------
    config : Dict[str, Any]
        Configuration dictionary, modified in place
    key_path : str
        Dot-separated path (e.g. "dbscan.eps")
    value : Any
        Value to set

    Returns
    -------
    Dict[str, Any]
        Modified configuration

    Raises
    ------
    ConfigTypeError
        If the path goes through a value which is not a block
    """
    keys = key_path.split(".")
    _parent_block(config, keys, create=True)[keys[-1]] = value

    return config


def remove_nested_value(
    config: Dict[str, Any], key_path: str, strict: str = "error"
) -> bool:
    """Deletes the value at a dot-separated path.

    Parameters
    ----------
    config : Dict[str, Any]
        Configuration dictionary, modified in place
    key_path : str
        Dot-separated path (e.g. "display.marker_size")
    strict : str, default 'error'
        What to do if the path does not exist: 'error' raises, 'warn' emits a
        warning and anything else silently skips the removal

    Returns
    -------
    bool
        Whether a value was removed

    Raises
    ------
    ConfigPathError
        If the path does not exist and `strict` is 'error'
    ConfigTypeError
        If the path goes through a value which is not a block
    """
    keys = key_path.split(".")
    block = _parent_block(config, keys, create=False)
    if block is not None and keys[-1] in block:
        del block[keys[-1]]
        return True

    if strict == "error":
        raise ConfigPathError(f"Cannot remove '{key_path}': the path does not exist.")
    if strict == "warn":
        warnings.warn(f"Key '{key_path}' not found, skipping removal.")

    return False


def _as_path_list(name, value):
    """Normalizes a directive which takes one or more paths."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)

    raise ConfigOperationError(
        f"'{name}' must be a string or a list of strings, got {type(value).__name__}."
    )


def split_directives(loaded: Any) -> Directives:
    """Separates the loader directives from the content of a file.

    Parameters
    ----------
    loaded : Any
        Parsed YAML document

    Returns
    -------
    Directives
        Includes, overrides, removals and the remaining content

    Raises
    ------
    ConfigOperationError
        If a directive does not have the expected type
    """
    if not isinstance(loaded, dict):
        return Directives([], {}, [], loaded)

    overrides = loaded.get("override", {})
    if not isinstance(overrides, dict):
        raise ConfigOperationError(
            f"'override' must be a dictionary, got {type(overrides).__name__}."
        )

    return Directives(
        includes=_as_path_list("include", loaded.get("include", [])),
        overrides=overrides,
        removals=_as_path_list("remove", loaded.get("remove", [])),
        content={k: v for k, v in loaded.items() if k not in DIRECTIVE_KEYS},
    )
