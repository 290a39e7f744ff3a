"""Exception types raised by nanoprint configuration calls."""


class NanoprintError(Exception):
    """Base class for all nanoprint errors."""


class ConfigurationError(NanoprintError):
    """Raised synchronously when a configuration setter is misused."""


class AlreadyInitializedError(ConfigurationError, RuntimeError):
    """Raised when writing a value that has already been latched by a read."""


class InvalidIndexError(ConfigurationError, ValueError):
    """Raised when a stack index is outside its allowed range."""
