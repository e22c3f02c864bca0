"""Utility modules for shared functionality."""

from .constants import RELEASE_BODY_TEMPLATE, TAG_REF_PREFIX
from .logging import configure_logging

__all__ = [
    "TAG_REF_PREFIX",
    "RELEASE_BODY_TEMPLATE",
    "configure_logging",
]
