"""Type resolution and scope classification on top of the REST mapper."""

from __future__ import annotations

import logging

from kube_tree.core.rest_mapper import RESTMapper
from kube_tree.models import GroupKind, ResourceType
from kube_tree.models.discovery import RESTMapping

logger = logging.getLogger(__name__)


class TypeResolver:
    """Turns a short name or a ``GroupKind`` into a ``ResourceType``.

    Each distinct input reaches the mapper once; owner types repeat a lot
    (every pod of a ReplicaSet names the same kind).
    """

    def __init__(self, mapper: RESTMapper):
        self.mapper = mapper
        self._cache: dict[str | GroupKind, RESTMapping] = {}

    def mapping(self, target: str | GroupKind) -> RESTMapping:
        cached = self._cache.get(target)
        if cached is not None:
            return cached
        if isinstance(target, GroupKind):
            result = self.mapper.rest_mapping(target.group, target.kind, target.version)
        else:
            result = self.mapper.resource_for(target)
        logger.debug("Resolved %s to %s", target, result.resource_type)
        self._cache[target] = result
        return result

    def resolve(self, target: str | GroupKind) -> ResourceType:
        return self.mapping(target).resource_type


class ScopeClassifier:
    def __init__(self, mapper: RESTMapper):
        self.mapper = mapper
        self._cache: dict[tuple[str, str], bool] = {}

    def is_namespaced(self, group: str, kind: str) -> bool:
        """Return True if instances of group/kind live inside a namespace."""
        key = (group, kind)
        if key not in self._cache:
            self._cache[key] = self.mapper.rest_mapping(group, kind).namespaced
            logger.debug("%s is %s", GroupKind(group, kind),
                         "namespaced" if self._cache[key] else "cluster-scoped")
        return self._cache[key]
