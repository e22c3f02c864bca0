"""Sets up the authenticated HTTP client for the Jira REST API."""

import base64
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Self

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from release_ops_manager.exceptions import MalformedResponseError, NetworkError
from release_ops_manager.jira.models import JiraSearchResponse, JiraVersion

logger = structlog.get_logger(__name__)

JIRA_API_PREFIX = "/rest/api/3"

_versions_adapter: TypeAdapter[list[JiraVersion]] = TypeAdapter(list[JiraVersion])


@dataclass(frozen=True)
class JiraCredentials:
    """Credentials for Jira basic authentication."""

    user: str
    api_key: str

    def authorization_header(self) -> str:
        """Build the value of the Authorization header."""
        token = base64.b64encode(f"{self.user}:{self.api_key}".encode("utf-8")).decode("ascii")
        return f"Basic {token}"

    def __repr__(self) -> str:
        """Hide the API key from logs and tracebacks."""
        return f"JiraCredentials(user={self.user!r}, api_key='***')"


class JiraClient:
    """Thin async client for the Jira REST endpoints used to compile releases.

    Every method performs exactly one request. Transport failures and
    non-success statuses raise NetworkError; undecodable or unexpected
    payloads raise MalformedResponseError.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        """Initialize the client with an already-configured httpx client."""
        self.http_client = http_client

    @classmethod
    def create(cls, tracker_url: str, credentials: JiraCredentials, transport: httpx.AsyncBaseTransport | None = None) -> Self:
        """Create a client for a Jira instance.

        Args:
            tracker_url: Base URL of the Jira instance, e.g. https://example.atlassian.net
            credentials: User and API key used for basic authentication
            transport: Optional transport, used to substitute a fake tracker

        Raises:
            NetworkError: If the tracker URL cannot be parsed

        Returns:
            Configured JiraClient instance
        """
        base_url = tracker_url.rstrip("/") + JIRA_API_PREFIX
        logger.debug("Creating client for Jira instance", base_url=base_url, user=credentials.user)
        try:
            http_client = httpx.AsyncClient(
                base_url=base_url,
                headers={
                    "Authorization": credentials.authorization_header(),
                    "Accept": "application/json",
                },
                transport=transport,
            )
        except httpx.InvalidURL as exc:
            logger.error("Invalid Jira URL", tracker_url=tracker_url, error=str(exc))
            raise NetworkError(f"Invalid Jira URL {tracker_url!r}: {exc}") from exc
        return cls(http_client)

    async def __aenter__(self) -> Self:
        """Enter the async context."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """Close the underlying HTTP client."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.http_client.aclose()

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Issue a GET request and decode its JSON body."""
        try:
            response = await self.http_client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("Jira request returned an error status", path=path, status_code=exc.response.status_code)
            raise NetworkError(
                f"Jira request to {path} failed with status {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.error("Jira request failed", path=path, error=str(exc))
            raise NetworkError(f"Jira request to {path} failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"Jira response from {path} is not valid JSON") from exc

    async def list_versions(self, project_key: str) -> list[JiraVersion]:
        """List the versions of a project, in the order Jira returns them."""
        path = f"/project/{project_key}/version"
        payload = await self._get_json(path)
        try:
            versions = _versions_adapter.validate_python(payload)
        except ValidationError as exc:
            raise MalformedResponseError(f"Unexpected Jira versions response for project {project_key}: {exc}") from exc
        logger.debug("Fetched Jira versions", project_key=project_key, count=len(versions))
        return versions

    async def search_issues(self, project_key: str, version_id: int) -> JiraSearchResponse:
        """Search the issues of a project whose fix version is the given version."""
        jql = f"project={project_key} and fixVersion = {version_id}"
        payload = await self._get_json("/search", params={"jql": jql})
        try:
            search_response = JiraSearchResponse.model_validate(payload)
        except ValidationError as exc:
            raise MalformedResponseError(f"Unexpected Jira search response for project {project_key}: {exc}") from exc
        logger.debug("Fetched Jira issues", project_key=project_key, version_id=version_id, count=len(search_response.issues))
        return search_response
