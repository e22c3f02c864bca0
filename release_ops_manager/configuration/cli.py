"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from release_ops_manager.configuration.env import get_settings
from release_ops_manager.configuration.reconcile import reconcile_create_release_configuration, reconcile_jira_configuration
from release_ops_manager.exceptions import ConfigurationError, NotFoundError, ReleaseOpsError
from release_ops_manager.jira.compiler import compile_release
from release_ops_manager.jira.models import ReleaseCompilationFailure
from release_ops_manager.release.outputs import write_outputs
from release_ops_manager.release.render import render_release_body
from release_ops_manager.release.workflow import run_create_release_workflow
from release_ops_manager.utils.logging import configure_logging
from release_ops_manager.versioning.hotfix import create_hotfix_tag

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.command(name="next-tag")
def next_tag_cli(
    latest_tag: Annotated[str, Argument(envvar="LATEST_TAG", help="Latest existing tag, e.g. v1.0.3 or v1.0.3a.")],
    versioning: Annotated[str, Option(envvar="VERSIONING", help="Versioning strategy (numeric or alphanumeric).")] = "numeric",
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Print the hotfix tag that follows the latest tag."""
    configure_logging(debug)
    try:
        hotfix_tag = create_hotfix_tag(latest_tag, versioning)
    except (ConfigurationError, NotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    typer.echo(hotfix_tag)


@typer_app.command(name="compile-notes")
def compile_notes_cli(
    jira_url: Annotated[str | None, Option(envvar="JIRA_URL", help="Jira base URL.")] = None,
    jira_user: Annotated[str | None, Option(envvar="JIRA_USER", help="Jira user.")] = None,
    jira_api_key: Annotated[str | None, Option(envvar="JIRA_API_KEY", help="Jira API key.")] = None,
    jira_project_key: Annotated[str | None, Option(envvar="JIRA_PROJECT_KEY", help="Jira project key.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Print the release body compiled from the issues of the project's Jira release."""
    configure_logging(debug)
    settings = get_settings()
    try:
        jira = asyncio.run(
            reconcile_jira_configuration(
                url=jira_url,
                user=jira_user,
                api_key=jira_api_key,
                project_key=jira_project_key,
                release_notes_field=settings.JIRA_RELEASE_NOTES_FIELD,
            )
        )
    except ConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    if jira is None:
        typer.echo("Jira configuration is required: provide --jira-url, --jira-user, --jira-api-key and --jira-project-key.", err=True)
        raise typer.Exit(1)

    result = asyncio.run(
        compile_release(
            tracker_url=jira.url,
            credentials=jira.credentials,
            project_key=jira.project_key,
            release_notes_field=jira.release_notes_field,
        )
    )
    if isinstance(result, ReleaseCompilationFailure):
        typer.echo(f"Failed to compile release notes ({result.error.kind.value}): {result.error.message}", err=True)
        raise typer.Exit(1)
    typer.echo(render_release_body(result) or "", nl=False)


@typer_app.command(name="create-release")
def create_release_cli(
    tag_name: Annotated[str | None, Option(envvar="TAG_NAME", help="Tag name, e.g. refs/tags/v1.10.15.")] = None,
    release_name: Annotated[str | None, Option(envvar="RELEASE_NAME", help="Release name.")] = None,
    body: Annotated[str | None, Option(envvar="BODY", help="Release body.")] = None,
    body_path: Annotated[Path | None, Option(envvar="BODY_PATH", help="Path to a file holding the release body.")] = None,
    draft: Annotated[bool, Option(envvar="DRAFT", help="Create a draft release.")] = False,
    prerelease: Annotated[bool, Option(envvar="PRERELEASE", help="Create a prerelease.")] = False,
    commitish: Annotated[str | None, Option(envvar="COMMITISH", help="Commit-ish the tag is created from. Defaults to GITHUB_SHA.")] = None,
    owner: Annotated[str | None, Option(envvar="OWNER", help="Repository owner. Defaults to the owner in GITHUB_REPOSITORY.")] = None,
    repo: Annotated[str | None, Option(envvar="REPO", help="Repository name. Defaults to the name in GITHUB_REPOSITORY.")] = None,
    hotfix: Annotated[bool, Option(envvar="HOTFIX", help="Derive the tag from the latest tag.")] = False,
    latest_tag: Annotated[str | None, Option(envvar="LATEST_TAG", help="Latest tag used to derive the hotfix tag.")] = None,
    versioning: Annotated[str, Option(envvar="VERSIONING", help="Versioning strategy (numeric or alphanumeric).")] = "numeric",
    github_token: Annotated[str | None, Option(envvar="GITHUB_TOKEN", help="GitHub token.")] = None,
    jira_url: Annotated[str | None, Option(envvar="JIRA_URL", help="Jira base URL.")] = None,
    jira_user: Annotated[str | None, Option(envvar="JIRA_USER", help="Jira user.")] = None,
    jira_api_key: Annotated[str | None, Option(envvar="JIRA_API_KEY", help="Jira API key.")] = None,
    jira_project_key: Annotated[str | None, Option(envvar="JIRA_PROJECT_KEY", help="Jira project key.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Create a GitHub release, optionally with a hotfix tag and a body compiled from Jira."""
    configure_logging(debug)
    settings = get_settings()

    try:
        config = asyncio.run(
            reconcile_create_release_configuration(
                settings=settings,
                cli_debug=debug,
                cli_github_token=github_token,
                cli_owner=owner,
                cli_repo=repo,
                cli_tag_name=tag_name,
                cli_release_name=release_name,
                cli_body=body,
                cli_body_path=body_path,
                cli_draft=draft,
                cli_prerelease=prerelease,
                cli_commitish=commitish,
                cli_hotfix=hotfix,
                cli_latest_tag=latest_tag,
                cli_versioning=versioning,
                cli_jira_url=jira_url,
                cli_jira_user=jira_user,
                cli_jira_api_key=jira_api_key,
                cli_jira_project_key=jira_project_key,
            )
        )
        result = asyncio.run(run_create_release_workflow(config))
    except (ReleaseOpsError, ValueError) as exc:
        typer.echo(f"Failed to create release: {exc}", err=True)
        sys.exit(1)

    write_outputs(result.outputs(), config.github_output)


if __name__ == "__main__":
    typer_app()
