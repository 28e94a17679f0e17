"""Map resource names and group/kind pairs onto discovered resource types."""

from __future__ import annotations

import logging
from typing import Callable

from kube_tree.core.errors import UnresolvableType
from kube_tree.models import GroupKind
from kube_tree.models.discovery import APIResource, RESTMapping

logger = logging.getLogger(__name__)


def _to_mapping(res: APIResource) -> RESTMapping:
    return RESTMapping(resource_type=res.resource_type, kind=res.kind, namespaced=res.namespaced)


def _pick(candidates: list[APIResource], version: str = "") -> APIResource:
    """Choose between several matches: version hint, then preferred, then core group."""
    if version:
        for res in candidates:
            if res.version == version:
                return res
    preferred = [r for r in candidates if r.preferred] or candidates
    for res in preferred:
        if not res.group:
            return res
    return preferred[0]


class RESTMapper:
    """Discovery-backed mapper. Discovery is listed at most once per instance."""

    def __init__(self, discover: Callable[[], list[APIResource]]):
        self._discover = discover
        self._resources: list[APIResource] | None = None

    @property
    def resources(self) -> list[APIResource]:
        if self._resources is None:
            self._resources = self._discover()
        return self._resources

    def resource_for(self, name: str) -> RESTMapping:
        """Resolve a name as typed on the command line.

        Accepts plural, singular, short name or kind, case-insensitive, with an
        optional ``.group`` or ``.version.group`` suffix (``deploy.apps``,
        ``hpa.v2.autoscaling``).
        """
        wanted = name.strip().lower()
        if not wanted:
            raise UnresolvableType("resolve", repr(name))

        # Unqualified match first: "pods", "po", "Pod"
        matches = [r for r in self.resources if wanted in r.aliases()]
        if matches:
            return _to_mapping(_pick(matches))

        head, _, rest = wanted.partition(".")
        if rest:
            matches = [r for r in self.resources if head in r.aliases() and r.group == rest]
            if matches:
                return _to_mapping(_pick(matches))
            version, _, group = rest.partition(".")
            matches = [
                r for r in self.resources
                if head in r.aliases() and r.group == group and r.version == version
            ]
            if matches:
                return _to_mapping(matches[0])

        raise UnresolvableType("resolve", name)

    def rest_mapping(self, group: str, kind: str, version: str = "") -> RESTMapping:
        """Resolve an exact group/kind pair, as carried by an ownerReference."""
        matches = [r for r in self.resources if r.group == group and r.kind == kind]
        if not matches:
            raise UnresolvableType("resolve", str(GroupKind(group, kind)))
        return _to_mapping(_pick(matches, version))
