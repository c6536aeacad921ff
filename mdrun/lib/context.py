"""CLI runtime context."""

from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class CLIContext:
    """Runtime context from the command line, outside of typer's parsing."""

    program: str = "mdrun"
    runner_path: str = "mdrun"
    trailing_args: list[str] = field(default_factory=list)


def split_args(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first literal ``--``.

    Returns (head, trailing); the separator itself is dropped.
    """
    args = list(argv)
    if "--" in args:
        i = args.index("--")
        return args[:i], args[i + 1 :]
    return args, []
