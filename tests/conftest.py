"""Shared fixtures: an in-memory cluster standing in for ``K8sClient``.

The fake answers discovery from a fixed list of ``APIResource`` records and
serves point reads and listings from a dict, recording every call so tests
can assert on namespaces and fetch counts.
"""

from __future__ import annotations

import pytest

from kube_tree.core.errors import NotFound
from kube_tree.core.fetcher import ObjectFetcher
from kube_tree.core.resolver import ScopeClassifier, TypeResolver
from kube_tree.core.rest_mapper import RESTMapper
from kube_tree.core.tree_builder import TreeBuilder
from kube_tree.models import ResourceType, split_api_version
from kube_tree.models.discovery import APIResource
from kube_tree.models.tree import TreeOptions

# ---------------------------------------------------------------------------
# Discovery data
# ---------------------------------------------------------------------------

PODS = ResourceType("", "v1", "pods")
CONFIGMAPS = ResourceType("", "v1", "configmaps")
NODES = ResourceType("", "v1", "nodes")
REPLICASETS = ResourceType("apps", "v1", "replicasets")
DEPLOYMENTS = ResourceType("apps", "v1", "deployments")
TENANTS = ResourceType("example.io", "v1alpha1", "tenants")

API_RESOURCES = [
    APIResource("", "v1", "Pod", "pods", True, "pod", ("po",), True),
    APIResource("", "v1", "ConfigMap", "configmaps", True, "configmap", ("cm",), True),
    APIResource("", "v1", "Node", "nodes", False, "node", ("no",), True),
    APIResource("", "v1", "Namespace", "namespaces", False, "namespace", ("ns",), True),
    APIResource("", "v1", "Event", "events", True, "event", ("ev",), True),
    APIResource("apps", "v1", "ReplicaSet", "replicasets", True, "replicaset", ("rs",), True),
    APIResource("apps", "v1", "Deployment", "deployments", True, "deployment", ("deploy",), True),
    APIResource("autoscaling", "v1", "HorizontalPodAutoscaler", "horizontalpodautoscalers", True,
                "horizontalpodautoscaler", ("hpa",), False),
    APIResource("autoscaling", "v2", "HorizontalPodAutoscaler", "horizontalpodautoscalers", True,
                "horizontalpodautoscaler", ("hpa",), True),
    APIResource("events.k8s.io", "v1", "Event", "events", True, "event", ("ev",), True),
    APIResource("example.io", "v1alpha1", "Tenant", "tenants", False, "tenant", (), True),
]


# ---------------------------------------------------------------------------
# Object factory
# ---------------------------------------------------------------------------


def make_object(
    kind: str,
    name: str,
    namespace: str = "",
    api_version: str = "v1",
    owners: list[tuple[str, str, str]] | None = None,
) -> dict:
    """Build an object dict; *owners* are ``(apiVersion, kind, name)`` triples."""
    metadata: dict = {"name": name}
    if namespace:
        metadata["namespace"] = namespace
    if owners:
        metadata["ownerReferences"] = [
            {"apiVersion": av, "kind": k, "name": n, "uid": f"uid-{n}", "controller": True}
            for av, k, n in owners
        ]
    return {"apiVersion": api_version, "kind": kind, "metadata": metadata}


class FakeCluster:
    """Read-only in-memory API server."""

    def __init__(self, resources: list[APIResource] | None = None):
        self.resources = list(resources if resources is not None else API_RESOURCES)
        self.objects: dict[tuple[ResourceType, str, str], dict] = {}
        self.gets: list[tuple[ResourceType, str, str]] = []
        self.lists: list[tuple[ResourceType, str | None]] = []
        self.discoveries = 0
        self.default_namespace = "default"

    def type_of(self, obj: dict) -> ResourceType:
        group, version = split_api_version(obj["apiVersion"])
        for res in self.resources:
            if (res.group, res.version, res.kind) == (group, version, obj["kind"]):
                return res.resource_type
        raise KeyError(obj["apiVersion"], obj["kind"])

    def add(self, *objs: dict) -> FakeCluster:
        for obj in objs:
            meta = obj["metadata"]
            key = (self.type_of(obj), meta.get("namespace", ""), meta["name"])
            self.objects[key] = obj
        return self

    def api_resources(self) -> list[APIResource]:
        self.discoveries += 1
        return list(self.resources)

    def get_object(self, resource_type: ResourceType, namespace: str, name: str) -> dict:
        key = (resource_type, namespace, name)
        self.gets.append(key)
        if key not in self.objects:
            raise NotFound("fetch", f"{resource_type}/{name}")
        return self.objects[key]

    def list_objects(self, resource_type: ResourceType, namespace: str | None = None) -> list[dict]:
        self.lists.append((resource_type, namespace))
        return [
            obj for (rt, ns, _), obj in self.objects.items()
            if rt == resource_type and (namespace is None or ns == namespace)
        ]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def cluster() -> FakeCluster:
    return FakeCluster()


@pytest.fixture
def deployment_chain(cluster: FakeCluster) -> FakeCluster:
    """Pod foo -> ReplicaSet bar -> Deployment baz, all in kube-system."""
    return cluster.add(
        make_object("Pod", "foo", "kube-system", owners=[("apps/v1", "ReplicaSet", "bar")]),
        make_object("ReplicaSet", "bar", "kube-system", "apps/v1", owners=[("apps/v1", "Deployment", "baz")]),
        make_object("Deployment", "baz", "kube-system", "apps/v1"),
    )


def make_builder(cluster: FakeCluster, **options) -> TreeBuilder:
    mapper = RESTMapper(cluster.api_resources)
    return TreeBuilder(
        TypeResolver(mapper),
        ScopeClassifier(mapper),
        ObjectFetcher(cluster),
        TreeOptions(**options),
    )
