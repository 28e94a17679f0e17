"""Render the ownerReference chain of Kubernetes objects as a tree."""

__version__ = "0.3.0"
