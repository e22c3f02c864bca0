"""Release creation module."""

from .inputs import load_body_file, resolve_body, resolve_release_name, resolve_tag, strip_tag_ref
from .models import CreateReleaseResult
from .outputs import write_outputs
from .render import render_release_body
from .workflow import run_create_release_workflow

__all__ = [
    "CreateReleaseResult",
    "strip_tag_ref",
    "resolve_tag",
    "resolve_release_name",
    "load_body_file",
    "resolve_body",
    "render_release_body",
    "write_outputs",
    "run_create_release_workflow",
]
