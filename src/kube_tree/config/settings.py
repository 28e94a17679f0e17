"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    """Read an integer >= *minimum* from the environment, falling back to *default*."""
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


@dataclass
class Settings:
    # Same lower bounds as the matching command-line options
    max_depth: int = field(default_factory=lambda: _env_int("KUBECTL_TREE_MAX_DEPTH", 32, minimum=0))
    max_fetches: int = field(default_factory=lambda: _env_int("KUBECTL_TREE_MAX_FETCHES", 1000))
    request_timeout: int = field(default_factory=lambda: _env_int("KUBECTL_TREE_REQUEST_TIMEOUT", 30))
    indent_width: int = 4
    default_namespace: str = "default"


# Global singleton
settings = Settings()
