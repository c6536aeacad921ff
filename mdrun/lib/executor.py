"""Executor - runs a node's code blocks through their interpreters"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable
from typing import Mapping, Optional, Sequence

from mdrun.lib.errors import (
    ExecutionError,
    NoCodeBlocksError,
    UnsupportedLanguageError,
)
from mdrun.lib.languages import LanguageRegistry
from mdrun.lib.node import CodeBlock, CommandNode

log = logging.getLogger(__name__)


class Executor:
    """Runs code blocks sequentially, one child process at a time.

    Children inherit stdin/stdout/stderr so interactive blocks work. The
    first failing block aborts the run with an `ExecutionError` carrying
    the child's exit status.
    """

    def __init__(
        self,
        registry: LanguageRegistry,
        env: Optional[Mapping[str, str]] = None,
        dry_run: bool = False,
        on_command: Callable[[list[str]], None] | None = None,
    ):
        """Initialize the executor.

        Args:
            registry: Language registry used to build each block's argv.
            env: Full environment for children. None inherits ours as is.
            dry_run: Report commands through `on_command` without spawning.
            on_command: Optional callback invoked with each argv before it runs.
        """
        self.registry = registry
        self.env = dict(env) if env is not None else None
        self.dry_run = dry_run
        self.on_command = on_command

    def build_argv(self, block: CodeBlock, args: Sequence[str] = ()) -> list[str]:
        language = self.registry.get(block.language)
        if language is None:
            raise UnsupportedLanguageError(block.language)
        return language.build_argv(block.source, args)

    def run_block(self, block: CodeBlock, args: Sequence[str] = ()) -> int:
        """Run a single block and return its exit code (0 on success)."""
        argv = self.build_argv(block, args)
        command = shlex.join(argv)

        if self.on_command:
            self.on_command(argv)
        if self.dry_run:
            return 0

        log.debug(f"Running {block.language} block: {command}")
        try:
            result = subprocess.run(argv, env=self.env)
        except FileNotFoundError:
            raise ExecutionError(command, reason=f"{argv[0]}: command not found")
        except OSError as e:
            raise ExecutionError(command, reason=str(e))

        if result.returncode < 0:
            raise ExecutionError(
                command, reason=f"terminated by signal {-result.returncode}"
            )
        if result.returncode != 0:
            raise ExecutionError(command, exit_code=result.returncode)

        log.debug(f"{argv[0]} exited with status 0")
        return 0

    def run(self, node: CommandNode, args: Sequence[str] = ()) -> int:
        """Run every code block of `node` in document order.

        Raises NoCodeBlocksError if the node has none.
        """
        if not node.code_blocks:
            raise NoCodeBlocksError(" > ".join(node.heading_path()) or node.name)
        for block in node.code_blocks:
            self.run_block(block, args)
        return 0
