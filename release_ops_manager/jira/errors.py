"""Converts issue tracker exceptions into failure results."""

from release_ops_manager.exceptions import MalformedResponseError, NetworkError, NotFoundError, ReleaseOpsError
from release_ops_manager.jira.models import ErrorDetail, ReleaseCompilationFailure, TrackerErrorKind


def failure_from_exception(exc: ReleaseOpsError) -> ReleaseCompilationFailure:
    """Build a failure result describing a tracker exception."""
    if isinstance(exc, NetworkError):
        return ReleaseCompilationFailure(error=ErrorDetail(kind=TrackerErrorKind.NETWORK, message=str(exc), status_code=exc.status_code))
    if isinstance(exc, NotFoundError):
        return ReleaseCompilationFailure(error=ErrorDetail(kind=TrackerErrorKind.NOT_FOUND, message=str(exc)))
    if isinstance(exc, MalformedResponseError):
        return ReleaseCompilationFailure(error=ErrorDetail(kind=TrackerErrorKind.MALFORMED_RESPONSE, message=str(exc)))
    raise TypeError(f"Unsupported tracker exception type: {type(exc).__name__}")
