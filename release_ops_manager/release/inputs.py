"""Resolves the tag, name and body of the release to create."""

from pathlib import Path

import structlog

from release_ops_manager.exceptions import ConfigurationError
from release_ops_manager.utils.constants import TAG_REF_PREFIX
from release_ops_manager.versioning.hotfix import create_hotfix_tag
from release_ops_manager.versioning.models import VersioningStrategy

logger = structlog.get_logger(__name__)


def strip_tag_ref(ref: str) -> str:
    """Remove the refs/tags/ prefix, e.g. from 'refs/tags/v1.10.15' to 'v1.10.15'."""
    return ref.removeprefix(TAG_REF_PREFIX)


def resolve_tag(tag_name: str | None, hotfix: bool, latest_tag: str | None, versioning: VersioningStrategy) -> str:
    """Resolve the tag of the release.

    Hotfix releases derive their tag from the latest tag; other releases use
    the given tag name.

    Raises:
        NotFoundError: If a hotfix is requested without a latest tag.
        ConfigurationError: If a regular release has no tag name.
    """
    if hotfix:
        return create_hotfix_tag(latest_tag or "", versioning)
    if not tag_name:
        raise ConfigurationError("A tag name is required unless creating a hotfix release.")
    return strip_tag_ref(tag_name)


def resolve_release_name(release_name: str | None) -> str | None:
    """Resolve the release name, stripping any refs/tags/ prefix."""
    if not release_name:
        return None
    return strip_tag_ref(release_name)


def read_body_file(body_path: Path) -> str:
    """Read the release body from a file.

    Raises:
        ConfigurationError: If the file cannot be read.
    """
    try:
        return body_path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to read release body file", body_path=str(body_path), error=str(exc))
        raise ConfigurationError(f"Unable to read release body file {body_path}: {exc}") from exc


def load_body_file(body_path: Path | None) -> str | None:
    """Read the release body file when one is configured, returning None for an empty or absent file."""
    if body_path is None:
        return None
    return read_body_file(body_path) or None


def resolve_body(body: str | None, body_file_content: str | None, compiled_body: str | None = None) -> str | None:
    """Resolve the release body.

    The body file content takes precedence, then the body compiled from Jira, then the plain body.
    """
    if body_file_content:
        return body_file_content
    if compiled_body:
        return compiled_body
    return body or None
