"""Data models for release tag versioning."""

from dataclasses import dataclass
from enum import Enum


class VersioningStrategy(str, Enum):
    """Enum for the patch segment increment strategies."""

    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"


@dataclass(frozen=True)
class PatchSegment:
    """The final dot-separated component of a version tag.

    The numeric part may be empty. The alphabetic part is never empty and
    defaults to "a" when the segment holds no letters.
    """

    number: str
    alpha: str = "a"
