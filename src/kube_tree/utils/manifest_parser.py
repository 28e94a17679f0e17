"""Parse multi-document YAML manifests into object identities."""

from __future__ import annotations

from dataclasses import dataclass

import yaml


@dataclass
class ParsedResource:
    api_version: str
    kind: str
    name: str
    namespace: str


def _is_list(doc: dict) -> bool:
    # Custom kinds may end in "List" too (AccessList); only a list has items
    kind = doc.get("kind") or ""
    if kind == "List":
        return True
    return kind.endswith("List") and isinstance(doc.get("items"), list)


def parse_manifest(manifest: str) -> list[ParsedResource]:
    """Parse a multi-document YAML string, expanding ``kind: List`` documents."""
    resources: list[ParsedResource] = []
    if not manifest:
        return resources

    for doc in yaml.safe_load_all(manifest):
        if not doc or not isinstance(doc, dict):
            continue
        docs = (doc.get("items") or []) if _is_list(doc) else [doc]
        for item in docs:
            if not isinstance(item, dict):
                continue
            metadata = item.get("metadata", {}) or {}
            resources.append(ParsedResource(
                api_version=item.get("apiVersion", ""),
                kind=item.get("kind", ""),
                name=metadata.get("name", ""),
                namespace=metadata.get("namespace", "") or "",
            ))
    return resources
