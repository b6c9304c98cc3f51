"""
Exception classes raised by the simulation core.
"""


class SheepdogError(Exception):
    """Base class for all simulation errors."""


class ConfigurationError(SheepdogError, ValueError):
    """Raised when simulation parameters are invalid or missing."""

    def __init__(self, param_name: str = None, reason: str = None):
        # Either ConfigurationError("message") or ConfigurationError("flockSize", "must be positive")
        if param_name and reason:
            message = f"Invalid configuration for '{param_name}': {reason}"
            self.param_name = param_name
        else:
            message = param_name if param_name else "Invalid configuration"
            self.param_name = None
        super().__init__(message)


class MissingFlockError(SheepdogError, ValueError):
    """Raised when a sheep is created without the flock it belongs to."""

    def __init__(self, message: str = "cannot be None, sheep are designed to move in a flock"):
        super().__init__(f"flock {message}")
