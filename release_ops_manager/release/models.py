"""Data models for release creation."""

from pydantic import BaseModel

from release_ops_manager.jira.models import ReleaseCompilationFailure, ReleaseCompilationSuccess


class CreateReleaseResult(BaseModel):
    """Result of the create-release workflow."""

    id: int
    html_url: str
    upload_url: str
    tag_name: str
    compilation: ReleaseCompilationSuccess | ReleaseCompilationFailure | None = None

    def outputs(self) -> dict[str, str]:
        """Return the outputs published for downstream workflow steps."""
        return {
            "id": str(self.id),
            "html_url": self.html_url,
            "upload_url": self.upload_url,
        }
