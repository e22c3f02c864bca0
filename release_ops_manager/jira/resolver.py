"""Resolves the release version of a Jira project."""

import structlog

from release_ops_manager.exceptions import MalformedResponseError, NetworkError, NotFoundError
from release_ops_manager.jira.client import JiraClient
from release_ops_manager.jira.errors import failure_from_exception
from release_ops_manager.jira.models import ReleaseCompilationFailure

logger = structlog.get_logger(__name__)


class VersionResolver:
    """Resolves the target fix version of a Jira project."""

    def __init__(self, client: JiraClient) -> None:
        """Initialize with a Jira client."""
        self.client = client

    async def resolve_version_id(self, project_key: str) -> int | ReleaseCompilationFailure:
        """Resolve the identifier of the project's target release version.

        The last version in the list returned by Jira wins; no date or
        semantic comparison is made.

        Args:
            project_key: The Jira project key, e.g. "PROJ"

        Returns:
            The version identifier, or a failure when no version exists or
            the request fails.
        """
        try:
            versions = await self.client.list_versions(project_key)
            if not versions:
                raise NotFoundError(f"No versions found for Jira project {project_key}")
        except (NetworkError, MalformedResponseError, NotFoundError) as exc:
            logger.warning("Failed to resolve Jira version", project_key=project_key, error=str(exc), error_type=type(exc).__name__)
            return failure_from_exception(exc)

        version = versions[-1]
        logger.info("Resolved Jira fix version", project_key=project_key, version_id=version.id, version_name=version.name)
        return version.id
