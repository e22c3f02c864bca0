"""Flattens Jira rich-text release notes into plain note entries."""

from collections.abc import Mapping, Sequence
from typing import Any

from release_ops_manager.jira.models import NoteEntry


def _node_text(node: Any) -> str:
    """Extract the plain text of a rich-text sub-element, depth first."""
    parts: list[str] = []
    stack: list[Any] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, str):
            parts.append(current)
        elif isinstance(current, Mapping):
            text = current.get("text")
            if isinstance(text, str):
                parts.append(text)
            else:
                stack.extend(reversed(_children(current)))
        elif current is not None:
            parts.append(str(current))
    return "".join(parts)


def _children(block: Any) -> list[Any]:
    """Return the ordered sub-elements of a content block."""
    if isinstance(block, Mapping):
        content = block.get("content")
    else:
        content = block
    if isinstance(content, Sequence) and not isinstance(content, (str, bytes)):
        return list(content)
    return []


def flatten_release_notes(blocks: Any) -> list[NoteEntry]:
    """Flatten rich-text content blocks into one note entry per sub-element.

    Entries keep block order, then sub-element order. A document node whose
    "content" holds the blocks is accepted as well. Missing or malformed
    input yields an empty list.
    """
    if blocks is None:
        return []
    if isinstance(blocks, Mapping):
        blocks = blocks.get("content")
    if not isinstance(blocks, Sequence) or isinstance(blocks, (str, bytes)):
        return []

    entries: list[NoteEntry] = []
    for block in blocks:
        for sub_element in _children(block):
            entries.append(NoteEntry(text=_node_text(sub_element)))
    return entries
