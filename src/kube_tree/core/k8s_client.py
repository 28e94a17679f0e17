"""Kubernetes API wrapper."""

from __future__ import annotations

import logging
from typing import Any

import urllib3
from kubernetes import client, config, dynamic
from kubernetes.client import ApiException
from kubernetes.dynamic.exceptions import DynamicApiError, ResourceNotFoundError, ResourceNotUniqueError
from kubernetes.dynamic.resource import ResourceList

from kube_tree.config.settings import settings
from kube_tree.core.errors import APIError, NotFound, TransientFailure, Unauthorized, UnresolvableType
from kube_tree.models import ResourceType
from kube_tree.models.discovery import APIResource

logger = logging.getLogger(__name__)


def _describe(resource_type: ResourceType, namespace: str | None, name: str | None) -> str:
    ref = f"{resource_type}/{name}" if name else str(resource_type)
    if namespace:
        ref += f" -n {namespace}"
    return ref


def translate_api_error(
    exc: Exception, operation: str, reference: str,
) -> APIError:
    """Map a client or transport exception onto the tree error taxonomy."""
    if isinstance(exc, (DynamicApiError, ApiException)):
        status = getattr(exc, "status", None)
        reason = getattr(exc, "reason", "") or ""
        if status == 404:
            return NotFound(operation, reference, status=status)
        if status in (401, 403):
            return Unauthorized(operation, reference, reason=f"{status} {reason}".strip(), status=status)
        if status is None or status in (408, 429) or status >= 500:
            return TransientFailure(operation, reference, reason=f"{status} {reason}".strip(), status=status)
        return APIError(operation, reference, reason=f"{status} {reason}".strip(), status=status)
    return TransientFailure(operation, reference, reason=str(exc) or type(exc).__name__)


class K8sClient:
    """Thin wrapper around the Kubernetes dynamic client."""

    def __init__(
        self,
        context: str | None = None,
        kubeconfig: str | None = None,
        request_timeout: int | None = None,
    ):
        self.context = context
        self.kubeconfig = kubeconfig
        self.request_timeout = request_timeout or settings.request_timeout
        self._api_client: client.ApiClient | None = None
        self._dynamic: dynamic.DynamicClient | None = None
        self._resources: dict[ResourceType, Any] = {}

    def _load_config(self) -> client.ApiClient:
        if self._api_client is not None:
            return self._api_client
        try:
            cfg = client.Configuration()
            config.load_kube_config(
                config_file=self.kubeconfig,
                context=self.context,
                client_configuration=cfg,
            )
            # Prevent indefinite hangs on unreachable clusters
            cfg.retries = 1
            self._api_client = client.ApiClient(configuration=cfg)
        except config.ConfigException:
            logger.debug("No usable kubeconfig, trying in-cluster config")
            try:
                config.load_incluster_config()
            except config.ConfigException as e:
                raise APIError("connect", self.context or "cluster", reason=str(e)) from e
            self._api_client = client.ApiClient()
        return self._api_client

    @property
    def dynamic(self) -> dynamic.DynamicClient:
        if self._dynamic is None:
            api_client = self._load_config()
            try:
                self._dynamic = dynamic.DynamicClient(api_client)
            except (DynamicApiError, ApiException, urllib3.exceptions.HTTPError) as e:
                raise translate_api_error(e, "discover", "api resources") from e
        return self._dynamic

    @property
    def default_namespace(self) -> str:
        """Namespace of the selected kubeconfig context, or ``default``."""
        try:
            contexts, active = config.list_kube_config_contexts(config_file=self.kubeconfig)
        except (config.ConfigException, OSError):
            return settings.default_namespace
        ctx = active
        if self.context:
            ctx = next((c for c in contexts or [] if c.get("name") == self.context), active)
        if not ctx:
            return settings.default_namespace
        return (ctx.get("context") or {}).get("namespace") or settings.default_namespace

    def api_resources(self) -> list[APIResource]:
        """List every top-level resource that can be read with ``get``."""
        try:
            found = self.dynamic.resources.search()
        except (DynamicApiError, ApiException, urllib3.exceptions.HTTPError) as e:
            raise translate_api_error(e, "discover", "api resources") from e

        resources: list[APIResource] = []
        for res in found:
            if isinstance(res, ResourceList):
                continue
            if "get" not in (getattr(res, "verbs", None) or []):
                continue
            api_resource = APIResource(
                group=res.group or "",
                version=res.api_version,
                kind=res.kind,
                name=res.name,
                namespaced=bool(res.namespaced),
                singular_name=getattr(res, "singular_name", "") or "",
                short_names=tuple(getattr(res, "short_names", None) or ()),
                preferred=bool(getattr(res, "preferred", False)),
            )
            self._resources[api_resource.resource_type] = res
            resources.append(api_resource)
        logger.debug("Discovered %d readable resource types", len(resources))
        return resources

    def _resource(self, resource_type: ResourceType) -> Any:
        cached = self._resources.get(resource_type)
        if cached is not None:
            return cached
        try:
            res = self.dynamic.resources.get(
                prefix="apis" if resource_type.group else "api",
                group=resource_type.group or None,
                api_version=resource_type.version,
                name=resource_type.resource,
            )
        except (ResourceNotFoundError, ResourceNotUniqueError) as e:
            raise UnresolvableType("resolve", str(resource_type), reason=str(e)) from e
        self._resources[resource_type] = res
        return res

    def get_object(self, resource_type: ResourceType, namespace: str, name: str) -> dict:
        """Read a single object. An empty namespace addresses a cluster-scoped object."""
        res = self._resource(resource_type)
        try:
            result = res.get(
                name=name,
                namespace=namespace or None,
                _request_timeout=self.request_timeout,
            )
        except (DynamicApiError, ApiException, urllib3.exceptions.HTTPError) as e:
            raise translate_api_error(e, "fetch", _describe(resource_type, namespace, name)) from e
        return result.to_dict()

    def list_objects(self, resource_type: ResourceType, namespace: str | None = None) -> list[dict]:
        """List objects of one type; ``namespace=None`` lists across all namespaces."""
        res = self._resource(resource_type)
        try:
            result = res.get(namespace=namespace, _request_timeout=self.request_timeout)
        except (DynamicApiError, ApiException, urllib3.exceptions.HTTPError) as e:
            raise translate_api_error(e, "list", _describe(resource_type, namespace, None)) from e
        data = result.to_dict()
        items = data.get("items", []) or []
        # List items omit apiVersion/kind
        kind = (data.get("kind") or "").removesuffix("List")
        for item in items:
            item.setdefault("apiVersion", resource_type.group_version)
            item.setdefault("kind", kind)
        return items
