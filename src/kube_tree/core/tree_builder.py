"""Walk ownerReferences from a starting object and build its ownership tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kube_tree.core.errors import CycleDetected, DepthExceeded, FetchLimitExceeded
from kube_tree.core.fetcher import ObjectFetcher
from kube_tree.core.resolver import ScopeClassifier, TypeResolver
from kube_tree.models import GroupKind, ResourceType
from kube_tree.models.objects import LiveObject, ObjectRef
from kube_tree.models.tree import TreeNode, TreeOptions

logger = logging.getLogger(__name__)

# (group, resource, namespace, name); the same object served at two versions is one key
ObjectKey = tuple[str, str, str, str]


@dataclass
class _Walk:
    fetches: int = 0


def _object_key(resource_type: ResourceType, namespace: str, name: str) -> ObjectKey:
    return (resource_type.group, resource_type.resource, namespace, name)


def _format_key(key: ObjectKey) -> str:
    group, resource, namespace, name = key
    ref = f"{resource}.{group}/{name}" if group else f"{resource}/{name}"
    return f"{ref} -n {namespace}" if namespace else ref


class TreeBuilder:
    """Builds one independent ``TreeNode`` per starting object.

    Every owner edge costs one fetch. Owners shared by several paths are
    fetched and represented again on each path. Only the current recursion
    path is remembered, to reject cycles.
    """

    def __init__(
        self,
        resolver: TypeResolver,
        classifier: ScopeClassifier,
        fetcher: ObjectFetcher,
        options: TreeOptions | None = None,
    ):
        self.resolver = resolver
        self.classifier = classifier
        self.fetcher = fetcher
        self.options = options or TreeOptions()

    def build(self, obj: LiveObject) -> TreeNode:
        resource_type = obj.resource_type
        if resource_type is None:
            resource_type = self.resolver.resolve(GroupKind(obj.api_group, obj.kind))
        key = _object_key(resource_type, obj.namespace, obj.name)
        return self._build(obj, path=(key,), walk=_Walk())

    def _build(self, obj: LiveObject, path: tuple[ObjectKey, ...], walk: _Walk) -> TreeNode:
        owners: list[TreeNode] = []
        for ref in obj.owner_refs:
            owner, key = self._fetch_owner(obj, ref, path, walk)
            owners.append(self._build(owner, path + (key,), walk))
        return TreeNode(object=obj, owners=tuple(owners))

    def _fetch_owner(
        self,
        child: LiveObject,
        ref: ObjectRef,
        path: tuple[ObjectKey, ...],
        walk: _Walk,
    ) -> tuple[LiveObject, ObjectKey]:
        resource_type = self.resolver.resolve(GroupKind(ref.api_group, ref.kind, ref.api_version))
        # A cluster-scoped owner never lives in the child's namespace
        namespaced = self.classifier.is_namespaced(resource_type.group, ref.kind)
        namespace = child.namespace if namespaced else ""
        key = _object_key(resource_type, namespace, ref.name)

        if key in path:
            cycle = " -> ".join(_format_key(k) for k in path + (key,))
            raise CycleDetected("walk", str(ref), reason=f"owner references form a cycle: {cycle}")
        depth = len(path)
        if depth > self.options.max_depth:
            raise DepthExceeded(
                "walk", str(ref),
                reason=f"owner chain is deeper than --max-depth={self.options.max_depth}",
            )
        if walk.fetches >= self.options.max_fetches:
            raise FetchLimitExceeded(
                "walk", str(ref),
                reason=f"more than --max-fetches={self.options.max_fetches} owner reads",
            )

        walk.fetches += 1
        owner = self.fetcher.get(resource_type, namespace, ref.name)
        logger.debug("%s is owned by %s (depth %d)", child, owner, depth)
        return owner, key
