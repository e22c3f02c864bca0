"""Data models for Jira responses and release compilation results."""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class JiraVersion(BaseModel):
    """A Jira project version (fix version)."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str | None = None
    released: bool | None = None


class JiraIssueType(BaseModel):
    """The type of a Jira issue."""

    model_config = ConfigDict(extra="ignore")

    name: str


class JiraIssueFields(BaseModel):
    """The subset of Jira issue fields used to compile a release."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    summary: str
    issue_type: JiraIssueType = Field(validation_alias=AliasChoices("issuetype", "issueType"))


class JiraIssue(BaseModel):
    """A Jira issue as returned by the search endpoint."""

    model_config = ConfigDict(extra="ignore")

    key: str
    fields: JiraIssueFields


class JiraSearchResponse(BaseModel):
    """The body of a Jira issue search response."""

    model_config = ConfigDict(extra="ignore")

    issues: list[JiraIssue]


class NoteEntry(BaseModel):
    """A single plain-text release note entry."""

    text: str


class IssueRecord(BaseModel):
    """An issue linked to a release, with its flattened release notes."""

    title: str
    external_key: str
    issue_type: str
    release_notes: list[NoteEntry] = []


class TrackerErrorKind(str, Enum):
    """Enum for the kinds of issue tracker failures."""

    NETWORK = "network"
    MALFORMED_RESPONSE = "malformed_response"
    NOT_FOUND = "not_found"


class ErrorDetail(BaseModel):
    """Details of an issue tracker failure."""

    kind: TrackerErrorKind
    message: str
    status_code: int | None = None


class ReleaseCompilationSuccess(BaseModel):
    """A successfully compiled release."""

    status: Literal["success"] = "success"
    version_id: int
    issues: list[IssueRecord]


class ReleaseCompilationFailure(BaseModel):
    """A release compilation that failed at the issue tracker."""

    status: Literal["failure"] = "failure"
    error: ErrorDetail


ReleaseCompilationResult = Annotated[ReleaseCompilationSuccess | ReleaseCompilationFailure, Field(discriminator="status")]


def raw_field(fields: JiraIssueFields, name: str) -> Any:
    """Return a raw extra field (e.g. a custom field) from the issue fields, if present."""
    extra = fields.model_extra or {}
    return extra.get(name)
