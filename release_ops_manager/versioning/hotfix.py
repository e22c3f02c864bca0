"""Builds the next release tag from the latest existing tag."""

import structlog

from release_ops_manager.exceptions import ConfigurationError, NotFoundError
from release_ops_manager.versioning.increment import increment_alphanumeric, increment_numeric
from release_ops_manager.versioning.models import VersioningStrategy

logger = structlog.get_logger(__name__)


def parse_versioning_strategy(strategy: VersioningStrategy | str) -> VersioningStrategy:
    """Parse a versioning strategy name, rejecting anything but the known strategies."""
    if isinstance(strategy, VersioningStrategy):
        return strategy
    try:
        return VersioningStrategy(strategy)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in VersioningStrategy)
        raise ConfigurationError(f"versioning must be one of: {allowed} (got '{strategy}')") from exc


def create_hotfix_tag(latest_tag: str, strategy: VersioningStrategy | str) -> str:
    """Create the hotfix tag that follows the latest tag.

    Only the last dot-separated segment is incremented, e.g. "v1.0.3" becomes
    "v1.0.4" with the numeric strategy and "v1.0.3z" becomes "v1.0.3aa" with
    the alphanumeric strategy.

    Args:
        latest_tag: The latest existing tag, e.g. "v1.0.3".
        strategy: The versioning strategy used to increment the patch segment.

    Raises:
        ConfigurationError: If the strategy is not recognized.
        NotFoundError: If there is no latest tag to increment.

    Returns:
        The next release tag.
    """
    versioning = parse_versioning_strategy(strategy)
    if not latest_tag or not latest_tag.strip():
        raise NotFoundError("A latest tag is required to create a hotfix tag.")

    segments = latest_tag.strip().split(".")
    if versioning is VersioningStrategy.NUMERIC:
        segments[-1] = increment_numeric(segments[-1])
    elif versioning is VersioningStrategy.ALPHANUMERIC:
        segments[-1] = increment_alphanumeric(segments[-1])
    else:
        raise ConfigurationError(f"Unhandled versioning strategy: {versioning}")

    hotfix_tag = ".".join(segments)
    logger.info("Created hotfix tag", latest_tag=latest_tag, hotfix_tag=hotfix_tag, versioning=versioning.value)
    return hotfix_tag
