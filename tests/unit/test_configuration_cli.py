"""Unit tests for the command line interface."""

from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from release_ops_manager.configuration.cli import typer_app
from release_ops_manager.jira.models import (
    ErrorDetail,
    IssueRecord,
    ReleaseCompilationFailure,
    ReleaseCompilationSuccess,
    TrackerErrorKind,
)
from release_ops_manager.release.models import CreateReleaseResult

runner = CliRunner()

CLEAN_ENV: dict[str, str | None] = {
    "GITHUB_TOKEN": None,
    "GITHUB_REPOSITORY": None,
    "GITHUB_SHA": None,
    "GITHUB_OUTPUT": None,
    "LATEST_TAG": None,
    "VERSIONING": None,
    "TAG_NAME": None,
    "HOTFIX": None,
    "JIRA_URL": None,
    "JIRA_USER": None,
    "JIRA_API_KEY": None,
    "JIRA_PROJECT_KEY": None,
}

JIRA_OPTIONS = [
    "--jira-url",
    "https://example.atlassian.net",
    "--jira-user",
    "bot",
    "--jira-api-key",
    "key",
    "--jira-project-key",
    "PROJ",
]


@pytest.fixture(autouse=True)
def skip_logging_configuration() -> Generator[None, None, None]:
    """Keep the CLI from reconfiguring logging during tests."""
    with patch("release_ops_manager.configuration.cli.configure_logging"):
        yield


def test_next_tag_numeric() -> None:
    """Test that next-tag prints the next numeric hotfix tag."""
    result = runner.invoke(typer_app, ["next-tag", "v1.0.3"], env=CLEAN_ENV)
    assert result.exit_code == 0
    assert "v1.0.4" in result.stdout.splitlines()


def test_next_tag_alphanumeric() -> None:
    """Test that next-tag prints the next alphanumeric hotfix tag."""
    result = runner.invoke(typer_app, ["next-tag", "v1.0.3z", "--versioning", "alphanumeric"], env=CLEAN_ENV)
    assert result.exit_code == 0
    assert "v1.0.3aa" in result.stdout.splitlines()


def test_next_tag_unknown_versioning() -> None:
    """Test that next-tag fails for an unknown versioning strategy."""
    result = runner.invoke(typer_app, ["next-tag", "v1.0.3", "--versioning", "semver"], env=CLEAN_ENV)
    assert result.exit_code == 1
    assert "versioning must be one of" in result.output


def test_compile_notes_requires_jira_configuration() -> None:
    """Test that compile-notes fails without Jira configuration."""
    result = runner.invoke(typer_app, ["compile-notes"], env=CLEAN_ENV)
    assert result.exit_code == 1
    assert "Jira configuration is required" in result.output


def test_compile_notes_prints_body() -> None:
    """Test that compile-notes prints the rendered release body."""
    compilation = ReleaseCompilationSuccess(
        version_id=1,
        issues=[IssueRecord(title="Fix login timeout", external_key="PROJ-7", issue_type="Bug")],
    )
    with patch("release_ops_manager.configuration.cli.compile_release", new=AsyncMock(return_value=compilation)):
        result = runner.invoke(typer_app, ["compile-notes", *JIRA_OPTIONS], env=CLEAN_ENV)
    assert result.exit_code == 0
    assert "- [PROJ-7] Fix login timeout (Bug)" in result.stdout


def test_compile_notes_failure() -> None:
    """Test that compile-notes exits with an error when compilation fails."""
    failure = ReleaseCompilationFailure(error=ErrorDetail(kind=TrackerErrorKind.NOT_FOUND, message="No versions found"))
    with patch("release_ops_manager.configuration.cli.compile_release", new=AsyncMock(return_value=failure)):
        result = runner.invoke(typer_app, ["compile-notes", *JIRA_OPTIONS], env=CLEAN_ENV)
    assert result.exit_code == 1
    assert "not_found" in result.output


def test_create_release_writes_outputs(tmp_path: Path) -> None:
    """Test that create-release runs the workflow and publishes its outputs."""
    github_output = tmp_path / "github_output"
    release = CreateReleaseResult(
        id=7,
        html_url="https://github.com/octocat/Hello-World/releases/tag/v1.0.4",
        upload_url="https://uploads.github.com/repos/octocat/Hello-World/releases/7/assets",
        tag_name="v1.0.4",
    )
    env = {
        **CLEAN_ENV,
        "GITHUB_TOKEN": "token",
        "GITHUB_REPOSITORY": "octocat/Hello-World",
        "GITHUB_OUTPUT": str(github_output),
    }
    with patch("release_ops_manager.configuration.cli.run_create_release_workflow", new=AsyncMock(return_value=release)) as mock_workflow:
        result = runner.invoke(typer_app, ["create-release", "--hotfix", "--latest-tag", "v1.0.3"], env=env)

    assert result.exit_code == 0
    config = mock_workflow.await_args.args[0]
    assert config.hotfix is True
    assert config.latest_tag == "v1.0.3"
    assert (config.owner, config.repo) == ("octocat", "Hello-World")
    assert "id=7" in result.stdout.splitlines()
    assert github_output.read_text(encoding="utf-8").splitlines()[0] == "id=7"


def test_create_release_unknown_versioning() -> None:
    """Test that create-release fails fast for an unknown versioning strategy."""
    env = {**CLEAN_ENV, "GITHUB_TOKEN": "token", "GITHUB_REPOSITORY": "octocat/Hello-World"}
    with patch("release_ops_manager.configuration.cli.run_create_release_workflow", new=AsyncMock()) as mock_workflow:
        result = runner.invoke(typer_app, ["create-release", "--tag-name", "v1.0.0", "--versioning", "calendar"], env=env)

    assert result.exit_code == 1
    assert "versioning must be one of" in result.output
    mock_workflow.assert_not_awaited()
