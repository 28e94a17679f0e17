"""kubectl-tree <targets> - Show the ownerReference tree of objects."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer

from kube_tree.cli.options import (
    AllNamespacesOption,
    ContextOption,
    FilenameOption,
    KubeconfigOption,
    MaxDepthOption,
    MaxFetchesOption,
    NamespaceOption,
    RequestTimeoutOption,
    ShowAPIVersionOption,
    VerboseOption,
)
from kube_tree.config.settings import settings
from kube_tree.core.errors import TreeError
from kube_tree.core.fetcher import ObjectFetcher
from kube_tree.core.k8s_client import K8sClient
from kube_tree.core.resolver import ScopeClassifier, TypeResolver
from kube_tree.core.rest_mapper import RESTMapper
from kube_tree.core.selector import ResourceSelector
from kube_tree.core.tree_builder import TreeBuilder
from kube_tree.models.objects import LiveObject
from kube_tree.models.tree import TreeOptions
from kube_tree.output.formatters import output_error, output_tree
from kube_tree.output.renderer import render
from kube_tree.utils.log import configure_logging

logger = logging.getLogger(__name__)


def print_trees(objects: list[LiveObject], builder: TreeBuilder, options: TreeOptions) -> int:
    """Build and print one tree per object; return how many failed.

    A failure drops that object's whole tree and moves on to the next one.
    """
    failed = 0
    for obj in objects:
        try:
            node = builder.build(obj)
        except TreeError as e:
            logger.debug("Tree for %s failed", obj, exc_info=True)
            output_error(e, subject=str(obj))
            failed += 1
            continue
        output_tree(render(node, options.show_api_version, options.indent_width))
    return failed


def tree(
    targets: Optional[List[str]] = typer.Argument(
        None, help="TYPE NAME..., TYPE/NAME... or TYPE[,TYPE...]", show_default=False,
    ),
    namespace: Optional[str] = NamespaceOption,
    all_namespaces: bool = AllNamespacesOption,
    filename: Optional[List[str]] = FilenameOption,
    show_api_version: bool = ShowAPIVersionOption,
    context: Optional[str] = ContextOption,
    kubeconfig: Optional[str] = KubeconfigOption,
    max_depth: int = MaxDepthOption,
    max_fetches: int = MaxFetchesOption,
    request_timeout: int = RequestTimeoutOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show the chain of owners of Kubernetes objects as an indented tree."""
    configure_logging(verbose)
    options = TreeOptions(
        show_api_version=show_api_version,
        max_depth=max_depth,
        max_fetches=max_fetches,
        indent_width=settings.indent_width,
    )

    k8s = K8sClient(context=context, kubeconfig=kubeconfig, request_timeout=request_timeout)
    mapper = RESTMapper(k8s.api_resources)
    resolver = TypeResolver(mapper)
    ns = namespace or k8s.default_namespace
    selector = ResourceSelector(k8s, resolver, namespace=ns, all_namespaces=all_namespaces)
    try:
        objects = selector.select(targets or [], filename or [])
    except TreeError as e:
        output_error(e)
        raise typer.Exit(code=1)

    if not objects:
        where = "any namespace" if all_namespaces else f"{ns} namespace"
        typer.echo(f"No resources found in {where}.", err=True)
        return

    builder = TreeBuilder(resolver, ScopeClassifier(mapper), ObjectFetcher(k8s), options)
    if print_trees(objects, builder, options):
        raise typer.Exit(code=1)
