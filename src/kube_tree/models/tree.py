"""Ownership tree models."""

from __future__ import annotations

from dataclasses import dataclass

from kube_tree.config.settings import settings
from kube_tree.models.objects import LiveObject


@dataclass(frozen=True)
class TreeNode:
    object: LiveObject
    owners: tuple[TreeNode, ...] = ()


@dataclass(frozen=True)
class TreeOptions:
    """Per-run options passed explicitly to the builder and renderer."""

    show_api_version: bool = False
    max_depth: int = settings.max_depth
    max_fetches: int = settings.max_fetches
    indent_width: int = settings.indent_width
