"""Shared CLI options."""

from __future__ import annotations

import typer

from kube_tree.config.settings import settings

NamespaceOption = typer.Option(None, "--namespace", "-n", help="Kubernetes namespace (default: from kubeconfig)")
AllNamespacesOption = typer.Option(
    False, "--all-namespaces", "-A", help="Select starting objects across all namespaces",
)
ContextOption = typer.Option(None, "--context", help="Kubernetes context name")
KubeconfigOption = typer.Option(None, "--kubeconfig", help="Path to the kubeconfig file")
ShowAPIVersionOption = typer.Option(False, "--show-api-version", help="Show API Version in output")
FilenameOption = typer.Option(
    None, "--filename", "-f", help="Manifest naming starting objects ('-' for stdin), repeatable",
)
MaxDepthOption = typer.Option(
    settings.max_depth, "--max-depth", min=0, help="Fail when an owner chain is deeper than this",
)
MaxFetchesOption = typer.Option(
    settings.max_fetches, "--max-fetches", min=1, help="Fail after this many owner reads for one object",
)
RequestTimeoutOption = typer.Option(
    settings.request_timeout, "--request-timeout", min=1, help="Seconds to wait for each API request",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log resolution and fetch steps to stderr")
