"""API discovery models."""

from __future__ import annotations

from dataclasses import dataclass, field

from kube_tree.models import ResourceType


@dataclass(frozen=True)
class APIResource:
    """One top-level resource advertised by API discovery."""

    group: str
    version: str
    kind: str
    name: str
    namespaced: bool
    singular_name: str = ""
    short_names: tuple[str, ...] = field(default_factory=tuple)
    preferred: bool = False

    @property
    def resource_type(self) -> ResourceType:
        return ResourceType(group=self.group, version=self.version, resource=self.name)

    def aliases(self) -> set[str]:
        """Lower-cased names kubectl accepts for this resource."""
        names = {self.name, self.kind, self.singular_name, *self.short_names}
        return {n.lower() for n in names if n}


@dataclass(frozen=True)
class RESTMapping:
    resource_type: ResourceType
    kind: str
    namespaced: bool
