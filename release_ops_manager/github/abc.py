"""Base ABC for GitHub release clients."""

from abc import ABC, abstractmethod
from typing import Any


class GitHubReleaseClientBase(ABC):
    """Base ABC for GitHub release clients."""

    @abstractmethod
    async def create_release(
        self,
        tag_name: str,
        name: str | None = None,
        body: str | None = None,
        draft: bool = False,
        prerelease: bool = False,
        target_commitish: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Create a release for a repository."""
        pass

    @abstractmethod
    async def get_latest_release(self) -> Any:
        """Get the latest release for a repository."""
        pass
