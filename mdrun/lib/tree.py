"""Command listing rendered as rich trees."""

from __future__ import annotations

from rich.markup import escape
from rich.tree import Tree

from mdrun.lib.node import CommandNode


def is_runnable(node: CommandNode) -> bool:
    """Nodes worth listing: they run something or contain something that does."""
    return bool(node.code_blocks or node.children)


def node_label(node: CommandNode, verbose: bool = False) -> str:
    parts = [f"[green]{escape(node.name.lower())}[/green]"]
    if node.description:
        parts.append(f"  [dim]{escape(node.description)}[/dim]")

    if verbose:
        for key, value in node.env.items():
            parts.append(f"\n[blue]{escape(key)}={escape(value)}[/blue]")
        for block in node.code_blocks:
            parts.append(f"\n```{escape(block.language)}\n{escape(block.source)}\n```")

    return "".join(parts)


def _add_children(branch: Tree, node: CommandNode, verbose: bool) -> None:
    for child in node.children:
        if is_runnable(child):
            _add_children(branch.add(node_label(child, verbose)), child, verbose)


def build_command_tree(root: CommandNode, verbose: bool = False) -> list[Tree]:
    """One tree per top-level heading, holding its runnable descendants."""
    trees: list[Tree] = []
    for top in root.children:
        tree = Tree(node_label(top, verbose))
        _add_children(tree, top, verbose)
        trees.append(tree)
    return trees
