"""GitHub release client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import Release

from release_ops_manager.exceptions import NotFoundError

from .abc import GitHubReleaseClientBase
from .client import GitHubClient, get_github_token_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                try:
                    error_data = exc.response.json()
                except Exception:
                    error_data = {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    status_code=422,
                )
                raise ValueError(f"GitHub 422 error in {func.__name__}: {message} | errors: {errors}") from exc
            raise

    return wrapper  # type: ignore


class GitHubKitAdapter(GitHubReleaseClientBase):
    """GitHub release client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(cls, owner: str, repo_name: str, github_token: str, github_api_url: str = "https://api.github.com") -> Self:
        """Create a new GitHub client adapter.

        Args:
            owner: Owner of the repository
            repo_name: Name of the repository
            github_token: Token used to authenticate against GitHub
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_token_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client, owner, repo_name)

    @handle_github_422
    async def create_release(
        self,
        tag_name: str,
        name: str | None = None,
        body: str | None = None,
        draft: bool = False,
        prerelease: bool = False,
        target_commitish: str | None = None,
        **kwargs: Any,
    ) -> Release:
        """Create a release for the repository."""
        params = self._omit_null_parameters(
            name=name,
            body=body,
            target_commitish=target_commitish,
            **kwargs,
        )
        logger.info("Creating release", owner=self.owner, repo=self.repo_name, tag_name=tag_name, draft=draft, prerelease=prerelease)
        response: Response[Release] = await self.client.rest.repos.async_create_release(
            owner=self.owner,
            repo=self.repo_name,
            tag_name=tag_name,
            draft=draft,
            prerelease=prerelease,
            **params,
        )
        return response.parsed_data

    async def get_latest_release(self) -> Release:
        """Get the latest published release for the repository.

        Raises:
            NotFoundError: If the repository has no published release.
        """
        try:
            response: Response[Release] = await self.client.rest.repos.async_get_latest_release(
                owner=self.owner,
                repo=self.repo_name,
            )
        except RequestFailed as exc:
            if exc.response.status_code == 404:
                raise NotFoundError(f"No published release found for {self.owner}/{self.repo_name}") from exc
            raise
        return response.parsed_data
