"""Custom exception classes for release-generator."""

from typing import Optional


class ReleaseGeneratorError(Exception):
    """Base exception for release-generator errors."""

    pass


class InvalidVersionError(ReleaseGeneratorError, ValueError):
    """Raised when a string is not a valid semantic version."""

    pass


class InvalidRequestError(ReleaseGeneratorError, ValueError):
    """Raised when a webhook request body cannot be decoded into parameters."""

    pass


class ConfigurationError(ReleaseGeneratorError, ValueError):
    """Raised when an environment variable holds an unusable value."""

    pass


class GitHubFetchError(ReleaseGeneratorError, RuntimeError):
    """Raised when tags cannot be fetched from GitHub."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
