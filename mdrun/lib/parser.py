"""Markdown parser - compiles a document into a command tree.

Only the line-oriented subset the runner consumes is recognised:

- ATX headings (``#`` to ``######`` followed by whitespace)
- fenced code blocks delimited by triple backticks
- pipe tables, read as two-column key/value pairs

Everything else is plain text. The first plain line under a heading
(before any fence or table) becomes that heading's description.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path
from typing import NamedTuple, Optional

from mdrun.lib.languages import LanguageRegistry
from mdrun.lib.node import CommandNode

log = logging.getLogger(__name__)

FENCE = "```"

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")
_SEPARATOR_ROW_RE = re.compile(r"^[\s|:=-]+$")
_SEPARATOR_CELL_RE = re.compile(r"^[\s:=-]+$")


class LineKind(Enum):
    HEADING = "heading"
    FENCE = "fence"
    TABLE = "table"
    BLANK = "blank"
    TEXT = "text"


class Line(NamedTuple):
    """A classified line. `level` is only set for headings."""

    kind: LineKind
    level: int = 0
    text: str = ""


def classify_line(line: str) -> Line:
    """Classify one line of input, outside of a code fence."""
    stripped = line.strip()
    if not stripped:
        return Line(LineKind.BLANK)

    if stripped.startswith(FENCE):
        return Line(LineKind.FENCE, text=stripped[len(FENCE) :].strip())

    match = _HEADING_RE.match(stripped)
    if match:
        return Line(
            LineKind.HEADING, level=len(match.group(1)), text=match.group(2).strip()
        )

    if stripped.startswith("|"):
        return Line(LineKind.TABLE, text=stripped)

    return Line(LineKind.TEXT, text=stripped)


def split_lines(text: str) -> list[str]:
    """Split on line feeds only, dropping one trailing carriage return per line.

    Other line-break characters (form feed, U+2028, ...) are kept verbatim.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_separator_row(row: str) -> bool:
    """True for table separator rows such as ``|---|:---:|`` or ``|===|===|``."""
    return bool(_SEPARATOR_ROW_RE.match(row)) and ("-" in row or "=" in row)


def parse_table_row(node: CommandNode, row: str) -> bool:
    """Decode one table row into `node`'s env. Returns True if a pair was added.

    The first cell is the key and the second the value. Rows with a
    missing cell, a separator-only cell, or the literal ``| key | value |``
    header are rejected.
    """
    stripped = row.strip()
    if not stripped.startswith("|"):
        return False

    cells = [cell.strip() for cell in stripped[1:].split("|")]
    if len(cells) < 2:
        log.debug(f"Skipping table row without a value cell: {row!r}")
        return False

    key, value = cells[0], cells[1]
    if not key or not value:
        log.debug(f"Skipping table row with an empty cell: {row!r}")
        return False
    if _SEPARATOR_CELL_RE.match(key) or _SEPARATOR_CELL_RE.match(value):
        return False
    if key.lower() == "key" and value.lower() == "value":
        return False

    node.add_env_var(key, value)
    return True


class _OpenFence:
    """Accumulates the body of a code fence until it is closed."""

    def __init__(self, tag: str, lineno: int):
        self.tag = tag
        self.lineno = lineno
        self.lines: list[str] = []

    def source(self) -> str:
        # each line is followed by a newline; the final one is dropped
        return "\n".join(self.lines)


class DocumentCompiler:
    """Compiles markdown text into a `CommandNode` tree.

    A compiler instance holds the line-by-line state of a single pass;
    `compile` may be called repeatedly and resets it each time.
    """

    def __init__(self, registry: Optional[LanguageRegistry] = None):
        if registry is None:
            registry = LanguageRegistry.default()
        self.registry = registry
        self._reset()

    def _reset(self) -> None:
        self.root = CommandNode()
        self.current = self.root
        self.fence: Optional[_OpenFence] = None
        self.in_table = False
        # description may only be set before the first fence/table of a node
        self.description_locked = False

    def compile(self, text: str) -> CommandNode:
        """Parse `text` and return the synthetic root of the command tree."""
        self._reset()

        for lineno, line in enumerate(split_lines(text), start=1):
            if self.fence is not None:
                self._feed_fence(line)
                continue

            classified = classify_line(line)
            if classified.kind is LineKind.HEADING:
                self._open_heading(classified.level, classified.text)
            elif classified.kind is LineKind.FENCE:
                self.in_table = False
                self.description_locked = True
                self.fence = _OpenFence(classified.text, lineno)
            elif classified.kind is LineKind.TABLE:
                self._feed_table(classified.text)
            elif classified.kind is LineKind.BLANK:
                self.in_table = False
            else:
                self.in_table = False
                if not self.description_locked and not self.current.is_root:
                    self.current.description = classified.text
                    self.description_locked = True

        if self.fence is not None:
            log.debug(
                f"Discarding unterminated code fence opened on line {self.fence.lineno}"
            )
            self.fence = None

        root = self.root
        log.debug(f"Parsed {root.count()} headings")
        return root

    def _open_heading(self, level: int, text: str) -> None:
        parent = self.current
        while not parent.is_root and parent.level >= level:
            assert parent.parent is not None
            parent = parent.parent

        self.current = parent.add_child(CommandNode(level=level, name=text))
        self.in_table = False
        self.description_locked = False

    def _feed_fence(self, line: str) -> None:
        assert self.fence is not None
        if not line.lstrip().startswith(FENCE):
            self.fence.lines.append(line)
            return

        fence, self.fence = self.fence, None
        if fence.tag and fence.tag in self.registry:
            self.current.add_code_block(fence.tag, fence.source())
        else:
            log.debug(
                f"Discarding code block with unsupported language {fence.tag!r} "
                f"(line {fence.lineno})"
            )

    def _feed_table(self, row: str) -> None:
        self.description_locked = True
        if not self.in_table:
            # header row
            self.in_table = True
            return
        if is_separator_row(row):
            return
        parse_table_row(self.current, row)


def parse_markdown(
    text: str, registry: Optional[LanguageRegistry] = None
) -> CommandNode:
    """Parse markdown text into a command tree and return its root."""
    return DocumentCompiler(registry).compile(text)


def parse_markdown_file(
    path: str | Path, registry: Optional[LanguageRegistry] = None
) -> CommandNode:
    """Read a markdown document from disk and parse it."""
    p = Path(path)
    text = p.read_bytes().decode("utf-8", errors="surrogateescape")
    return parse_markdown(text, registry)
