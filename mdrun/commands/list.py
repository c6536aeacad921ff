"""List command - show the runnable headings of a document"""

from __future__ import annotations

from mdrun.lib.node import CommandNode
from mdrun.lib.tree import build_command_tree

from .utils import console


def list_command(root: CommandNode, verbose: bool = False) -> None:
    """Print the command tree."""
    trees = build_command_tree(root, verbose=verbose)
    if not trees:
        console.print("[yellow]No headings found[/yellow]")
        return

    for tree in trees:
        console.print(tree)
