"""Data models for kubectl-tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class GroupKind(NamedTuple):
    group: str
    kind: str
    # Optional version hint, e.g. taken from an ownerReference apiVersion
    version: str = ""

    def __str__(self) -> str:
        return f"{self.kind}.{self.group}" if self.group else self.kind


@dataclass(frozen=True)
class ResourceType:
    """Fully-qualified group/version/resource used to address objects."""

    group: str
    version: str
    resource: str

    @property
    def group_version(self) -> str:
        return f"{self.group}/{self.version}" if self.group else self.version

    def __str__(self) -> str:
        if self.group:
            return f"{self.resource}.{self.version}.{self.group}"
        return f"{self.resource}.{self.version}"


def split_api_version(api_version: str) -> tuple[str, str]:
    """Split ``apps/v1`` into ``("apps", "v1")`` and ``v1`` into ``("", "v1")``."""
    if "/" in api_version:
        group, version = api_version.rsplit("/", 1)
        return group, version
    return "", api_version
