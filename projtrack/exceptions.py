"""
Custom exceptions for the projtrack CLI application.
"""


class ProjtrackError(Exception):
    """Base exception for all projtrack-related errors."""
    pass


class ValidationError(ProjtrackError):
    """Raised when user input fails validation."""
    pass


class NotFoundError(ProjtrackError):
    """Raised when a requested project is not found."""
    pass


class StorageError(ProjtrackError):
    """Raised when the data file cannot be read, parsed or written."""
    pass


class ConfigurationError(ProjtrackError):
    """Raised when the config file is unreadable or invalid."""
    pass
