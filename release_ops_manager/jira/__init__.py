"""Jira release compilation module."""

from .client import JiraClient, JiraCredentials
from .compiler import IssueCompiler, compile_release
from .flatten import flatten_release_notes
from .models import (
    ErrorDetail,
    IssueRecord,
    NoteEntry,
    ReleaseCompilationFailure,
    ReleaseCompilationResult,
    ReleaseCompilationSuccess,
    TrackerErrorKind,
)
from .resolver import VersionResolver

__all__ = [
    "JiraClient",
    "JiraCredentials",
    "VersionResolver",
    "IssueCompiler",
    "compile_release",
    "flatten_release_notes",
    "NoteEntry",
    "IssueRecord",
    "ErrorDetail",
    "TrackerErrorKind",
    "ReleaseCompilationSuccess",
    "ReleaseCompilationFailure",
    "ReleaseCompilationResult",
]
