"""Contains the exception taxonomy shared across the application."""


class ReleaseOpsError(Exception):
    """Base class for all errors raised by the release operations manager."""

    pass


class ConfigurationError(ReleaseOpsError):
    """Raised when a configuration value is unrecognized or invalid."""

    pass


class NotFoundError(ReleaseOpsError):
    """Raised when a required prior tag or tracker version does not exist."""

    pass


class NetworkError(ReleaseOpsError):
    """Raised when the issue tracker is unreachable or returns a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initializes the exception with an optional HTTP status code."""
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ReleaseOpsError):
    """Raised when an issue tracker response is missing expected fields."""

    pass


class InvalidPatchSegmentError(ReleaseOpsError, ValueError):
    """Raised when a patch segment contains characters outside the lowercase alphabet."""

    pass
