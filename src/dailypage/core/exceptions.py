"""
dailypage exception hierarchy.

All dailypage exceptions inherit from DailypageError, making it easy for
consumers to catch library-level errors while still distinguishing specific
failure modes.
"""


class DailypageError(Exception):
    """Base exception class for all dailypage errors."""


class ConfigurationError(DailypageError):
    """Raised for configuration errors (missing keys, invalid values)."""


class APIError(DailypageError):
    """Raised for API communication errors."""


class RemoteUnavailableError(APIError):
    """Raised when the remote entry store cannot be reached or rejects a request."""


class AuthenticationError(DailypageError):
    """Raised for authentication errors."""


class NotAuthenticatedError(AuthenticationError):
    """Raised when an operation needs a signed-in user and none is available."""


class CacheError(DailypageError):
    """Raised for caching errors."""


class CacheCorruptError(CacheError):
    """Raised when a cached value cannot be decoded."""
