"""Single-object reads."""

from __future__ import annotations

import logging

from kube_tree.core.k8s_client import K8sClient
from kube_tree.models import ResourceType
from kube_tree.models.objects import LiveObject

logger = logging.getLogger(__name__)


class ObjectFetcher:
    def __init__(self, k8s: K8sClient):
        self.k8s = k8s

    def get(self, resource_type: ResourceType, namespace: str, name: str) -> LiveObject:
        """Fetch one object; raises NotFound, Unauthorized or TransientFailure."""
        logger.debug("GET %s/%s namespace=%r", resource_type, name, namespace)
        data = self.k8s.get_object(resource_type, namespace, name)
        return LiveObject.from_dict(data, resource_type=resource_type)
