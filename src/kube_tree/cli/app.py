"""Root Typer application."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="kubectl-tree",
    help="kubectl-tree - Show the ownerReference tree of Kubernetes objects.",
    add_completion=False,
)


def _register_commands() -> None:
    from kube_tree.cli.commands.tree_cmd import tree

    # Single command: invoked as `kubectl tree ...` without a sub-command name
    app.command(name="tree", no_args_is_help=True)(tree)


_register_commands()


def main() -> None:
    app()
