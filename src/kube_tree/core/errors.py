"""Error taxonomy for resolving, fetching and walking owner references."""

from __future__ import annotations


class TreeError(Exception):
    """Base error. ``operation`` and ``reference`` name what failed and on what."""

    default_reason = "failed"

    def __init__(self, operation: str, reference: str, reason: str = ""):
        self.operation = operation
        self.reference = reference
        self.reason = reason or self.default_reason
        super().__init__(f"{operation} {reference}: {self.reason}")


class UnresolvableType(TreeError):
    default_reason = "the server doesn't have a resource type with this name"


class SelectionError(TreeError):
    default_reason = "invalid resource selection"


class APIError(TreeError):
    """Error returned by the API server for a single read."""

    def __init__(self, operation: str, reference: str, reason: str = "", status: int | None = None):
        self.status = status
        super().__init__(operation, reference, reason)


class NotFound(APIError):
    default_reason = "not found"


class Unauthorized(APIError):
    default_reason = "access denied"


class TransientFailure(APIError):
    default_reason = "unable to reach the API server"


class CycleDetected(TreeError):
    default_reason = "owner references form a cycle"


class DepthExceeded(TreeError):
    default_reason = "owner chain is deeper than the configured maximum"


class FetchLimitExceeded(TreeError):
    default_reason = "too many owner fetches for one object"
