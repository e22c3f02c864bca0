"""Patch segment increment strategies."""

import re

import structlog

from release_ops_manager.exceptions import InvalidPatchSegmentError
from release_ops_manager.versioning.parser import NUMBER_RUN_PATTERN, separate_patch_segment

logger = structlog.get_logger(__name__)

UPPERCASE_PATTERN = re.compile(r"[A-Z]")


def increment_numeric(segment: str) -> str:
    """Increment a purely numeric patch segment by one.

    Any non-numeric remainder is discarded. A segment without digits counts as zero.
    """
    number_match = NUMBER_RUN_PATTERN.search(segment)
    current = int(number_match.group(0)) if number_match else 0
    return str(current + 1)


def increment_alpha_sequence(alpha: str) -> str:
    """Increment a lowercase letter sequence like a spreadsheet column name.

    "a" -> "b", "z" -> "aa", "az" -> "ba", "zz" -> "aaa".
    """
    characters = list(alpha)
    index = len(characters) - 1
    while index >= 0:
        if characters[index] == "z":
            characters[index] = "a"
            index -= 1
        else:
            characters[index] = chr(ord(characters[index]) + 1)
            return "".join(characters)
    # Carry ran past the leftmost character
    return "a" + "".join(characters)


def increment_alphanumeric(segment: str) -> str:
    """Increment the alphabetic part of a patch segment, keeping its numeric part.

    Args:
        segment: The patch segment, e.g. "15z".

    Raises:
        InvalidPatchSegmentError: If the segment contains uppercase letters.

    Returns:
        The incremented patch segment, e.g. "15aa".
    """
    if UPPERCASE_PATTERN.search(segment):
        raise InvalidPatchSegmentError(f"Patch segment '{segment}' contains uppercase letters; only lowercase a-z can be incremented.")
    patch_segment = separate_patch_segment(segment)
    incremented = patch_segment.number + increment_alpha_sequence(patch_segment.alpha)
    logger.debug("Incremented alphanumeric patch segment", segment=segment, incremented=incremented)
    return incremented
