"""Command tree nodes built from markdown headings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block with its language tag."""

    language: str
    source: str


@dataclass(eq=False)
class CommandNode:
    """One heading of the document, or the synthetic root (level 0).

    Children are owned by their node and kept in document order. The
    parent link is a plain back-reference and is excluded from repr to
    avoid walking the tree in both directions.
    """

    level: int = 0
    name: str = ""
    description: Optional[str] = None
    code_blocks: list[CodeBlock] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    children: list["CommandNode"] = field(default_factory=list, repr=False)
    parent: Optional["CommandNode"] = field(default=None, repr=False)

    @property
    def is_root(self) -> bool:
        return self.parent is None and self.level == 0

    def add_child(self, child: "CommandNode") -> "CommandNode":
        """Append `child` as the last child and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def add_code_block(self, language: str, source: str) -> None:
        self.code_blocks.append(CodeBlock(language=language, source=source))

    def add_env_var(self, key: str, value: str) -> None:
        """Insert or overwrite a pair in this node's own env map."""
        self.env[key] = value

    def matches(self, name: str) -> bool:
        """Case-insensitive exact match on the heading text."""
        return not self.is_root and self.name.casefold() == name.casefold()

    def ancestors(self) -> list["CommandNode"]:
        """Nodes from the root down to (and including) this node."""
        chain: list[CommandNode] = []
        node: Optional[CommandNode] = self
        while node is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain

    def descendants(self) -> Iterator["CommandNode"]:
        """Yield all descendants in pre-order (document order)."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def heading_path(self) -> list[str]:
        return [n.name for n in self.ancestors() if not n.is_root]

    def count(self) -> int:
        """Number of heading nodes below this node."""
        return sum(1 for _ in self.descendants())
