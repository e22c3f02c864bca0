"""Release tag versioning module."""

from .hotfix import create_hotfix_tag, parse_versioning_strategy
from .increment import increment_alphanumeric, increment_numeric
from .models import PatchSegment, VersioningStrategy
from .parser import separate_patch_segment

__all__ = [
    "VersioningStrategy",
    "PatchSegment",
    "separate_patch_segment",
    "increment_numeric",
    "increment_alphanumeric",
    "create_hotfix_tag",
    "parse_versioning_strategy",
]
