"""Turn command-line targets into the starting set of live objects."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from kube_tree.core.errors import SelectionError
from kube_tree.core.fetcher import ObjectFetcher
from kube_tree.core.k8s_client import K8sClient
from kube_tree.core.resolver import TypeResolver
from kube_tree.models import GroupKind, split_api_version
from kube_tree.models.discovery import RESTMapping
from kube_tree.models.objects import LiveObject
from kube_tree.utils.manifest_parser import parse_manifest

logger = logging.getLogger(__name__)


class ResourceSelector:
    """Resolves ``TYPE NAME...``, ``TYPE/NAME...``, ``TYPE[,TYPE]`` and manifest files.

    ``all_namespaces`` only widens listings; it has no say in how owners are
    looked up later.
    """

    def __init__(
        self,
        k8s: K8sClient,
        resolver: TypeResolver,
        namespace: str,
        all_namespaces: bool = False,
    ):
        self.k8s = k8s
        self.resolver = resolver
        self.fetcher = ObjectFetcher(k8s)
        self.namespace = namespace
        self.all_namespaces = all_namespaces

    def select(self, args: list[str], filenames: list[str] | None = None) -> list[LiveObject]:
        objects: list[LiveObject] = []
        for filename in filenames or []:
            objects.extend(self._from_file(filename))
        if args:
            objects.extend(self._from_args(args))
        elif not filenames:
            raise SelectionError("select", "", reason="you must specify the type of resource to get")
        return objects

    def _from_args(self, args: list[str]) -> list[LiveObject]:
        with_slash = [a for a in args if "/" in a]
        if with_slash:
            if len(with_slash) != len(args):
                raise SelectionError(
                    "select", " ".join(args),
                    reason="arguments in resource/name form must all have a resource type",
                )
            pairs = []
            for arg in args:
                type_name, _, name = arg.partition("/")
                if not type_name or not name:
                    raise SelectionError("select", arg, reason="expected TYPE/NAME")
                pairs.append((type_name, name))
            return [self._get_named(type_name, name) for type_name, name in pairs]

        types = [t for t in args[0].split(",") if t]
        names = args[1:]
        if not types:
            raise SelectionError("select", args[0], reason="you must specify the type of resource to get")
        if names:
            if len(types) > 1:
                raise SelectionError(
                    "select", args[0], reason="only a single resource type may be given with names",
                )
            return [self._get_named(types[0], name) for name in names]

        objects: list[LiveObject] = []
        for type_name in types:
            objects.extend(self._list(self.resolver.mapping(type_name)))
        return objects

    def _get_named(self, type_name: str, name: str) -> LiveObject:
        if self.all_namespaces:
            raise SelectionError(
                "select", f"{type_name}/{name}",
                reason="a resource cannot be retrieved by name across all namespaces",
            )
        mapping = self.resolver.mapping(type_name)
        namespace = self.namespace if mapping.namespaced else ""
        return self.fetcher.get(mapping.resource_type, namespace, name)

    def _list(self, mapping: RESTMapping) -> list[LiveObject]:
        namespace = None
        if mapping.namespaced and not self.all_namespaces:
            namespace = self.namespace
        items = self.k8s.list_objects(mapping.resource_type, namespace)
        logger.debug("Listed %d %s", len(items), mapping.resource_type)
        return [LiveObject.from_dict(item, resource_type=mapping.resource_type) for item in items]

    def _from_file(self, filename: str) -> list[LiveObject]:
        try:
            text = sys.stdin.read() if filename == "-" else Path(filename).read_text()
        except OSError as e:
            raise SelectionError("read", filename, reason=e.strerror or str(e)) from e

        objects: list[LiveObject] = []
        for res in parse_manifest(text):
            if not res.kind or not res.name:
                raise SelectionError("read", filename, reason="object is missing kind or metadata.name")
            group, version = split_api_version(res.api_version)
            mapping = self.resolver.mapping(GroupKind(group, res.kind, version))
            namespace = (res.namespace or self.namespace) if mapping.namespaced else ""
            objects.append(self.fetcher.get(mapping.resource_type, namespace, res.name))
        return objects
