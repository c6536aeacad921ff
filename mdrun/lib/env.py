"""Environment composition for a resolved node."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from mdrun.lib.node import CommandNode

RUNNER_PATH_VAR = "MD_EXE"
DOCUMENT_PATH_VAR = "MD_FILE"


def compose_env(node: CommandNode) -> dict[str, str]:
    """Merge env tables from the root down to `node`.

    Ancestors are applied first so that a key declared deeper in the tree
    overrides the same key declared above it. Key order follows first
    declaration, root first.
    """
    overlay: dict[str, str] = {}
    for ancestor in node.ancestors():
        overlay.update(ancestor.env)
    return overlay


def build_process_env(
    node: CommandNode,
    runner_path: Optional[str] = None,
    document_path: Optional[str] = None,
    base: Optional[Mapping[str, str]] = None,
) -> dict[str, str]:
    """Full environment for a child process.

    Starts from `base` (the inherited environment by default), publishes
    the runner and document paths, then applies the node's overlay.
    """
    env = dict(os.environ if base is None else base)
    if runner_path is not None:
        env[RUNNER_PATH_VAR] = runner_path
    if document_path is not None:
        env[DOCUMENT_PATH_VAR] = document_path
    env.update(compose_env(node))
    return env
