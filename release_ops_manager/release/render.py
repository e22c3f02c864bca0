"""Renders compiled Jira releases as release bodies."""

import structlog

from release_ops_manager.jira.models import ReleaseCompilationFailure, ReleaseCompilationSuccess
from release_ops_manager.utils.constants import RELEASE_BODY_TEMPLATE
from release_ops_manager.utils.templates import TEMPLATES_DIRECTORY, construct_jinja2_template_from_file, render_template_with_model

logger = structlog.get_logger(__name__)


def render_release_body(result: ReleaseCompilationSuccess | ReleaseCompilationFailure) -> str | None:
    """Render a compiled release as a markdown body, or None if compilation failed."""
    if isinstance(result, ReleaseCompilationFailure):
        logger.debug("Skipping release body rendering for failed compilation", error_kind=result.error.kind.value)
        return None
    template = construct_jinja2_template_from_file(TEMPLATES_DIRECTORY / RELEASE_BODY_TEMPLATE)
    return render_template_with_model(model=result, template=template)
