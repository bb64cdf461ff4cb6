"""Typed exceptions raised by the clustering engine."""

__all__ = ["ClusterError", "InvalidParameterError"]


class ClusterError(Exception):
    """Base exception for all clustering errors."""


class InvalidParameterError(ClusterError, ValueError):
    """Raised when a clustering parameter is out of its valid domain."""

    def __init__(self, name: str, value, reason: str):
        """Initialize with the offending parameter.

        Parameters
        ----------
        name : str
            Name of the parameter which failed validation
        value : object
            Value provided for the parameter
        reason : str
            Human-readable description of the expected domain
        """
        self.name = name
        self.value = value
        super().__init__(f"Invalid `{name}` value ({value!r}): {reason}")
