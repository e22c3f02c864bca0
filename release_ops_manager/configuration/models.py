"""Reconciled configuration for release operations."""

from dataclasses import dataclass
from pathlib import Path

from release_ops_manager.jira.client import JiraCredentials
from release_ops_manager.versioning.models import VersioningStrategy


@dataclass
class JiraConfig:
    """Configuration for compiling release bodies from Jira."""

    url: str
    credentials: JiraCredentials
    project_key: str
    release_notes_field: str


@dataclass
class ReleaseConfig:
    """Configuration class for the create-release command."""

    debug: bool
    github_api_url: str
    github_token: str
    owner: str
    repo: str
    tag_name: str | None
    release_name: str | None
    body: str | None
    body_path: Path | None
    draft: bool
    prerelease: bool
    commitish: str | None
    hotfix: bool
    latest_tag: str | None
    versioning: VersioningStrategy
    jira: JiraConfig | None
    github_output: Path | None = None
