"""Run command - resolve a heading path and execute its code blocks"""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Sequence

from mdrun.lib.env import build_process_env
from mdrun.lib.executor import Executor
from mdrun.lib.languages import LanguageRegistry
from mdrun.lib.node import CommandNode
from mdrun.lib.resolver import resolve

from .utils import console

log = logging.getLogger(__name__)


def run_command(
    root: CommandNode,
    path: Sequence[str],
    args: Sequence[str],
    registry: LanguageRegistry,
    runner_path: str,
    document: Path,
    dry_run: bool = False,
) -> int:
    """Resolve `path` under `root` and run the node's blocks.

    Raises ResolutionError before anything is spawned if the path does
    not resolve, NoCodeBlocksError if the node has nothing to run, and
    ExecutionError on the first failing block.
    """
    node = resolve(root, path)
    log.info(f"Running {' > '.join(node.heading_path())} from {document}")

    env = build_process_env(
        node, runner_path=runner_path, document_path=str(document)
    )

    def on_command(argv: list[str]) -> None:
        if dry_run:
            console.print(shlex.join(argv), markup=False, highlight=False)

    executor = Executor(registry, env=env, dry_run=dry_run, on_command=on_command)
    return executor.run(node, args)
