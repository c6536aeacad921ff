"""Heading path resolution.

A heading path is walked one element at a time from the synthetic root.
For each element:

1. the current node's children are searched in document order, looking
   through level-1 "chapter" headings into their children;
2. failing that, the current node's whole subtree is searched in
   pre-order and the first match wins.

Matching is case-insensitive and exact on the trimmed heading text. When
two nodes share a name the first in document order always wins.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from mdrun.lib.errors import ResolutionError
from mdrun.lib.node import CommandNode

log = logging.getLogger(__name__)

CHAPTER_LEVEL = 1


def candidate_children(node: CommandNode) -> Iterator[CommandNode]:
    """Children of `node`, with level-1 chapters replaced by their own children."""
    for child in node.children:
        if child.level == CHAPTER_LEVEL:
            yield from candidate_children(child)
        else:
            yield child


def find_child(node: CommandNode, name: str) -> Optional[CommandNode]:
    """Find the first node named `name` below `node`, or None."""
    for child in candidate_children(node):
        if child.matches(name):
            return child

    for descendant in node.descendants():
        if descendant.matches(name):
            log.debug(f"'{name}' matched nested heading at level {descendant.level}")
            return descendant

    return None


def resolve(root: CommandNode, path: Sequence[str]) -> CommandNode:
    """Walk `path` from `root` and return the addressed node.

    An empty path resolves to `root`. Raises `ResolutionError` naming the
    first element that matches nothing; later elements are not examined.
    """
    current = root
    for element in path:
        found = find_child(current, element)
        if found is None:
            raise ResolutionError(element, path)
        log.debug(f"Resolved '{element}' -> {' > '.join(found.heading_path())}")
        current = found
    return current
