"""Splits version tag segments into their numeric and alphabetic parts."""

import re

from release_ops_manager.versioning.models import PatchSegment

NUMBER_RUN_PATTERN = re.compile(r"\d+")
ALPHA_RUN_PATTERN = re.compile(r"[a-z]+")


def separate_patch_segment(segment: str) -> PatchSegment:
    """Separate a patch segment into its first digit run and first lowercase letter run.

    Both runs are located independently, so "2a3b" yields number "2" and alpha
    "a" while the remaining characters are ignored. This function never fails.

    Args:
        segment: The patch segment, e.g. "15ba", "3" or "zz".

    Returns:
        The separated patch segment, with alpha defaulting to "a".
    """
    number_match = NUMBER_RUN_PATTERN.search(segment)
    alpha_match = ALPHA_RUN_PATTERN.search(segment)

    number = number_match.group(0) if number_match else ""
    alpha = alpha_match.group(0) if alpha_match else "a"

    return PatchSegment(number=number, alpha=alpha)
