"""Indented text rendering of ownership trees."""

from __future__ import annotations

from kube_tree.models.objects import LiveObject
from kube_tree.models.tree import TreeNode


def format_object(obj: LiveObject, show_api_version: bool = False) -> str:
    # Namespace is printed even when empty so every line has the same fields
    line = f"{obj.kind} {obj.name} -n {obj.namespace}"
    if show_api_version:
        line = f"{obj.api_version} {line}"
    return line


def render(node: TreeNode, show_api_version: bool = False, indent_width: int = 4) -> list[str]:
    """Render *node* and its owners pre-order, one line per node."""
    lines: list[str] = []
    _render(node, 0, lines, show_api_version, indent_width)
    return lines


def _render(
    node: TreeNode, depth: int, lines: list[str], show_api_version: bool, indent_width: int,
) -> None:
    lines.append(" " * (depth * indent_width) + format_object(node.object, show_api_version))
    for owner in node.owners:
        _render(owner, depth + 1, lines, show_api_version, indent_width)
