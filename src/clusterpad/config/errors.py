"""Exceptions raised while loading a configuration."""

from typing import List

__all__ = [
    "ConfigError",
    "ConfigIncludeError",
    "ConfigCycleError",
    "ConfigPathError",
    "ConfigTypeError",
    "ConfigOperationError",
    "ConfigValidationError",
]


class ConfigError(Exception):
    """Base class of every configuration error."""


class ConfigIncludeError(ConfigError):
    """A configuration file, or a file it refers to, is missing or unreadable."""


class ConfigCycleError(ConfigError):
    """A configuration file includes itself, directly or through other files.

    Attributes
    ----------
    cycle_path : List[str]
        Files along the cycle, starting and ending with the same file
    """

    def __init__(self, cycle_path: List[str]):
        self.cycle_path = cycle_path
        super().__init__("Include cycle: " + " -> ".join(cycle_path))


class ConfigPathError(ConfigError):
    """A dot-separated key path does not exist."""


class ConfigTypeError(ConfigError):
    """A dot-separated key path goes through a value which is not a block."""


class ConfigOperationError(ConfigError):
    """An `include`, `override` or `remove` directive is malformed."""


class ConfigValidationError(ConfigError):
    """A configuration block contains unknown or invalid entries."""
