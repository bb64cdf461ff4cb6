"""clusterpad configuration loading system.

This package provides a configuration loading system with:
- Hierarchical file includes with cycle detection
- Override and removal semantics with dot-notation
- Default values for every configuration block

Main Entry Point
----------------
load_config : Load a clusterpad configuration file

See the loader module docstring for the full configuration language.
"""

from .defaults import DEFAULT_CONFIG, apply_defaults
from .errors import (
    ConfigCycleError,
    ConfigError,
    ConfigIncludeError,
    ConfigOperationError,
    ConfigPathError,
    ConfigTypeError,
    ConfigValidationError,
)
from .loader import apply_overrides, load_config, load_config_file

__all__ = [
    "load_config",
    "load_config_file",
    "apply_overrides",
    "apply_defaults",
    "DEFAULT_CONFIG",
    "ConfigError",
    "ConfigIncludeError",
    "ConfigCycleError",
    "ConfigPathError",
    "ConfigTypeError",
    "ConfigOperationError",
    "ConfigValidationError",
]
