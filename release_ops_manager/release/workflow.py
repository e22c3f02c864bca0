"""Runs the create-release workflow."""

import structlog

from release_ops_manager.configuration.models import JiraConfig, ReleaseConfig
from release_ops_manager.github.adapter import GitHubKitAdapter
from release_ops_manager.jira.compiler import compile_release
from release_ops_manager.jira.models import ReleaseCompilationFailure, ReleaseCompilationSuccess
from release_ops_manager.release.inputs import load_body_file, resolve_body, resolve_release_name, resolve_tag
from release_ops_manager.release.models import CreateReleaseResult
from release_ops_manager.release.render import render_release_body

logger = structlog.get_logger(__name__)


async def compile_jira_body(jira: JiraConfig) -> tuple[ReleaseCompilationSuccess | ReleaseCompilationFailure, str | None]:
    """Compile the Jira release and render it, logging failures instead of raising."""
    result = await compile_release(
        tracker_url=jira.url,
        credentials=jira.credentials,
        project_key=jira.project_key,
        release_notes_field=jira.release_notes_field,
    )
    if isinstance(result, ReleaseCompilationFailure):
        logger.warning(
            "Jira compilation failed, continuing without an enriched body",
            project_key=jira.project_key,
            error_kind=result.error.kind.value,
            error=result.error.message,
        )
        return result, None
    return result, render_release_body(result)


async def run_create_release_workflow(config: ReleaseConfig, adapter: GitHubKitAdapter | None = None) -> CreateReleaseResult:
    """Create a GitHub release from the reconciled configuration.

    Steps run in order: resolve the tag, read the body file, compile the Jira
    body (skipped when the body file has content), then create the release.
    """
    if adapter is None:
        adapter = await GitHubKitAdapter.create(
            owner=config.owner,
            repo_name=config.repo,
            github_token=config.github_token,
            github_api_url=config.github_api_url,
        )

    latest_tag = config.latest_tag
    if config.hotfix and not latest_tag:
        logger.info("No latest tag provided, using the latest published release", owner=config.owner, repo=config.repo)
        latest_release = await adapter.get_latest_release()
        latest_tag = latest_release.tag_name

    tag = resolve_tag(config.tag_name, config.hotfix, latest_tag, config.versioning)
    release_name = resolve_release_name(config.release_name)

    body_file_content = load_body_file(config.body_path)

    compilation: ReleaseCompilationSuccess | ReleaseCompilationFailure | None = None
    compiled_body: str | None = None
    if config.jira is not None and body_file_content is None:
        compilation, compiled_body = await compile_jira_body(config.jira)
    elif config.jira is not None:
        logger.info("Release body file provided, skipping Jira compilation", body_path=str(config.body_path))

    body = resolve_body(config.body, body_file_content, compiled_body)

    release = await adapter.create_release(
        tag_name=tag,
        name=release_name,
        body=body,
        draft=config.draft,
        prerelease=config.prerelease,
        target_commitish=config.commitish,
    )
    logger.info("Created release", tag_name=tag, release_id=release.id, html_url=release.html_url)
    return CreateReleaseResult(
        id=release.id,
        html_url=release.html_url,
        upload_url=release.upload_url,
        tag_name=tag,
        compilation=compilation,
    )
