"""Reconciles configuration between CLI arguments and environment variables."""

from pathlib import Path

import structlog

from release_ops_manager.configuration.env import Settings
from release_ops_manager.configuration.exceptions import IncompleteJiraConfigurationError, RequiredConfigurationElementError
from release_ops_manager.configuration.models import JiraConfig, ReleaseConfig
from release_ops_manager.exceptions import ConfigurationError
from release_ops_manager.jira.client import JiraCredentials
from release_ops_manager.utils.github import split_repository_in_configuration
from release_ops_manager.versioning.hotfix import parse_versioning_strategy

logger = structlog.get_logger(__name__)


async def reconcile_jira_configuration(
    url: str | None,
    user: str | None,
    api_key: str | None,
    project_key: str | None,
    release_notes_field: str,
) -> JiraConfig | None:
    """Reconciles the Jira configuration.

    Jira integration is optional, but once any Jira setting is provided all
    of them are required.

    Args:
        url (str | None): The base URL of the Jira instance.
        user (str | None): The Jira user.
        api_key (str | None): The Jira API key.
        project_key (str | None): The Jira project key.
        release_notes_field (str): The custom field holding release notes.

    Raises:
        IncompleteJiraConfigurationError: If the Jira configuration is partially defined.

    Returns:
        JiraConfig | None: The Jira configuration, or None when Jira is not used.
    """
    provided = {
        "url": url,
        "user": user,
        "api_key": api_key,
        "project_key": project_key,
    }
    if not any(provided.values()):
        return None

    missing: list[RequiredConfigurationElementError] = []
    if not url:
        missing.append(RequiredConfigurationElementError("Jira URL", "--jira-url", "JIRA_URL"))
    if not user:
        missing.append(RequiredConfigurationElementError("Jira user", "--jira-user", "JIRA_USER"))
    if not api_key:
        missing.append(RequiredConfigurationElementError("Jira API key", "--jira-api-key", "JIRA_API_KEY"))
    if not project_key:
        missing.append(RequiredConfigurationElementError("Jira project key", "--jira-project-key", "JIRA_PROJECT_KEY"))
    if missing:
        raise IncompleteJiraConfigurationError(missing)

    return JiraConfig(
        url=url,
        credentials=JiraCredentials(user=user, api_key=api_key),
        project_key=project_key,
        release_notes_field=release_notes_field,
    )


async def reconcile_create_release_configuration(
    settings: Settings,
    cli_debug: bool = False,
    cli_github_token: str | None = None,
    cli_owner: str | None = None,
    cli_repo: str | None = None,
    cli_tag_name: str | None = None,
    cli_release_name: str | None = None,
    cli_body: str | None = None,
    cli_body_path: Path | None = None,
    cli_draft: bool = False,
    cli_prerelease: bool = False,
    cli_commitish: str | None = None,
    cli_hotfix: bool = False,
    cli_latest_tag: str | None = None,
    cli_versioning: str = "numeric",
    cli_jira_url: str | None = None,
    cli_jira_user: str | None = None,
    cli_jira_api_key: str | None = None,
    cli_jira_project_key: str | None = None,
) -> ReleaseConfig:
    """Reconciles the create-release configuration from CLI values and settings.

    CLI values take precedence over settings. The versioning strategy is
    validated here, before any tag is built.
    """
    github_token = cli_github_token or settings.GITHUB_TOKEN
    if not github_token:
        raise RequiredConfigurationElementError("GitHub token", "--github-token", "GITHUB_TOKEN")

    versioning = parse_versioning_strategy(cli_versioning or "numeric")

    owner, repo = cli_owner, cli_repo
    if not (owner and repo):
        if not settings.GITHUB_REPOSITORY:
            raise RequiredConfigurationElementError("Repository (owner/repo)", "--owner/--repo", "GITHUB_REPOSITORY")
        try:
            current_owner, current_repo = await split_repository_in_configuration(settings.GITHUB_REPOSITORY)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        owner = owner or current_owner
        repo = repo or current_repo

    if not cli_hotfix and not cli_tag_name:
        raise RequiredConfigurationElementError("Tag name", "--tag-name", "TAG_NAME")

    jira = await reconcile_jira_configuration(
        url=cli_jira_url or settings.JIRA_URL,
        user=cli_jira_user or settings.JIRA_USER,
        api_key=cli_jira_api_key or settings.JIRA_API_KEY,
        project_key=cli_jira_project_key or settings.JIRA_PROJECT_KEY,
        release_notes_field=settings.JIRA_RELEASE_NOTES_FIELD,
    )

    config = ReleaseConfig(
        debug=cli_debug or settings.DEBUG,
        github_api_url=settings.GITHUB_API_URL,
        github_token=github_token,
        owner=owner,
        repo=repo,
        tag_name=cli_tag_name,
        release_name=cli_release_name,
        body=cli_body,
        body_path=cli_body_path,
        draft=cli_draft,
        prerelease=cli_prerelease,
        commitish=cli_commitish or settings.GITHUB_SHA,
        hotfix=cli_hotfix,
        latest_tag=cli_latest_tag,
        versioning=versioning,
        jira=jira,
        github_output=Path(settings.GITHUB_OUTPUT) if settings.GITHUB_OUTPUT else None,
    )
    logger.debug("Reconciled create-release configuration", owner=owner, repo=repo, hotfix=cli_hotfix, versioning=versioning.value, jira=jira is not None)
    return config
