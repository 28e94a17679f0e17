"""Tests for the indented text renderer and terminal output."""

from __future__ import annotations

from kube_tree.core.errors import NotFound
from kube_tree.models.objects import LiveObject
from kube_tree.models.tree import TreeNode
from kube_tree.output.formatters import output_error, output_tree
from kube_tree.output.renderer import format_object, render


def _node(kind: str, name: str, namespace: str = "", api_version: str = "v1", *owners: TreeNode) -> TreeNode:
    return TreeNode(LiveObject(api_version, kind, name, namespace), tuple(owners))


def test_single_line_without_owners() -> None:
    assert render(_node("Pod", "foo", "default")) == ["Pod foo -n default"]


def test_empty_namespace_is_printed() -> None:
    assert format_object(LiveObject("v1", "Node", "worker-1")) == "Node worker-1 -n "
    assert format_object(LiveObject("v1", "Node", "worker-1"), show_api_version=True) == "v1 Node worker-1 -n "


def test_indent_width_is_configurable() -> None:
    tree = _node("Pod", "p", "ns", "v1", _node("ReplicaSet", "rs", "ns", "apps/v1"))

    assert render(tree, indent_width=2) == ["Pod p -n ns", "  ReplicaSet rs -n ns"]


def test_pre_order_with_siblings() -> None:
    tree = _node(
        "Pod", "p", "ns", "v1",
        _node("ReplicaSet", "a", "ns", "apps/v1", _node("Deployment", "d", "ns", "apps/v1")),
        _node("Node", "n1"),
    )

    assert render(tree, show_api_version=True) == [
        "v1 Pod p -n ns",
        "    apps/v1 ReplicaSet a -n ns",
        "        apps/v1 Deployment d -n ns",
        "    v1 Node n1 -n ",
    ]


def test_rendering_is_idempotent() -> None:
    tree = _node("Pod", "p", "ns", "v1", _node("ReplicaSet", "rs", "ns", "apps/v1"))

    assert render(tree) == render(tree)
    assert "\n".join(render(tree, True)) == "\n".join(render(tree, True))


def test_output_tree_writes_lines_verbatim(capsys) -> None:
    output_tree(["Pod [bold]odd[/bold] -n :smile:", "    ReplicaSet rs -n ns"])

    assert capsys.readouterr().out == "Pod [bold]odd[/bold] -n :smile:\n    ReplicaSet rs -n ns\n"


def test_output_error_goes_to_stderr(capsys) -> None:
    output_error(NotFound("fetch", "replicasets.v1.apps/bar -n default"), subject="Pod/foo -n default")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err
    assert "fetch replicasets.v1.apps/bar -n default: not found" in captured.err
