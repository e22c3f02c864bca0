"""Compiles the issues and release notes of a Jira release."""

import structlog

from release_ops_manager.exceptions import MalformedResponseError, NetworkError
from release_ops_manager.jira.client import JiraClient, JiraCredentials
from release_ops_manager.jira.errors import failure_from_exception
from release_ops_manager.jira.flatten import flatten_release_notes
from release_ops_manager.jira.models import (
    IssueRecord,
    JiraIssue,
    ReleaseCompilationFailure,
    ReleaseCompilationResult,
    ReleaseCompilationSuccess,
    raw_field,
)
from release_ops_manager.jira.resolver import VersionResolver

logger = structlog.get_logger(__name__)

DEFAULT_RELEASE_NOTES_FIELD = "customfield_10000"


class IssueCompiler:
    """Lists the issues of a Jira release and assembles them into a compilation result."""

    def __init__(self, client: JiraClient, release_notes_field: str = DEFAULT_RELEASE_NOTES_FIELD) -> None:
        """Initialize with a Jira client and the custom field holding release notes."""
        self.client = client
        self.release_notes_field = release_notes_field
        self.resolver = VersionResolver(client)

    def build_issue_record(self, issue: JiraIssue) -> IssueRecord:
        """Build an issue record from a Jira issue."""
        return IssueRecord(
            title=issue.fields.summary,
            external_key=issue.key,
            issue_type=issue.fields.issue_type.name,
            release_notes=flatten_release_notes(raw_field(issue.fields, self.release_notes_field)),
        )

    async def list_issues_for_version(self, project_key: str, version_id: int) -> ReleaseCompilationResult:
        """List the issues whose fix version is the given version, in tracker order."""
        try:
            search_response = await self.client.search_issues(project_key, version_id)
        except (NetworkError, MalformedResponseError) as exc:
            logger.warning(
                "Failed to list Jira issues for version",
                project_key=project_key,
                version_id=version_id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return failure_from_exception(exc)

        issues = [self.build_issue_record(issue) for issue in search_response.issues]
        logger.info("Compiled Jira issues for version", project_key=project_key, version_id=version_id, issue_count=len(issues))
        return ReleaseCompilationSuccess(version_id=version_id, issues=issues)

    async def compile_release(self, project_key: str) -> ReleaseCompilationResult:
        """Resolve the project's release version, then compile its issues.

        Issues are never listed unless the version resolved successfully.
        """
        resolution = await self.resolver.resolve_version_id(project_key)
        if isinstance(resolution, ReleaseCompilationFailure):
            return resolution
        return await self.list_issues_for_version(project_key, resolution)


async def compile_release(
    tracker_url: str,
    credentials: JiraCredentials,
    project_key: str,
    release_notes_field: str = DEFAULT_RELEASE_NOTES_FIELD,
) -> ReleaseCompilationResult:
    """Compile the release of a Jira project using a short-lived client."""
    try:
        client = JiraClient.create(tracker_url, credentials)
    except NetworkError as exc:
        logger.warning("Failed to create Jira client", tracker_url=tracker_url, error=str(exc))
        return failure_from_exception(exc)
    async with client:
        compiler = IssueCompiler(client, release_notes_field=release_notes_field)
        return await compiler.compile_release(project_key)
