"""Live object and owner reference models."""

from __future__ import annotations

from dataclasses import dataclass

from kube_tree.models import ResourceType, split_api_version


@dataclass(frozen=True)
class ObjectRef:
    """Weak reference to an owner as declared in ``metadata.ownerReferences``."""

    kind: str
    name: str
    api_group: str = ""
    api_version: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> ObjectRef:
        group, version = split_api_version(d.get("apiVersion", "") or "")
        return cls(
            kind=d.get("kind", ""),
            name=d.get("name", ""),
            api_group=group,
            api_version=version,
        )

    def __str__(self) -> str:
        kind = f"{self.kind}.{self.api_group}" if self.api_group else self.kind
        return f"{kind}/{self.name}"


@dataclass(frozen=True)
class LiveObject:
    api_version: str
    kind: str
    name: str
    namespace: str = ""
    owner_refs: tuple[ObjectRef, ...] = ()
    # Known when the object came from a typed read or listing
    resource_type: ResourceType | None = None

    @property
    def api_group(self) -> str:
        return split_api_version(self.api_version)[0]

    @classmethod
    def from_dict(cls, d: dict, resource_type: ResourceType | None = None) -> LiveObject:
        metadata = d.get("metadata", {}) or {}
        refs = metadata.get("ownerReferences", []) or []
        return cls(
            api_version=d.get("apiVersion", ""),
            kind=d.get("kind", ""),
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", "") or "",
            owner_refs=tuple(ObjectRef.from_dict(r) for r in refs),
            resource_type=resource_type,
        )

    def __str__(self) -> str:
        if self.namespace:
            return f"{self.kind}/{self.name} -n {self.namespace}"
        return f"{self.kind}/{self.name}"
