"""Shared constants used across the application."""

TAG_REF_PREFIX = "refs/tags/"
"""Prefix of fully qualified tag references, stripped from tag and release names."""

RELEASE_BODY_TEMPLATE = "release_body.j2"
"""Template used to render a compiled Jira release as a release body."""
