"""Error taxonomy for the scan pipeline."""
from __future__ import annotations


class ScandalScopeError(Exception):
    """Base class for pipeline errors."""


class InvalidRequestError(ScandalScopeError):
    """Inbound request is missing a required field."""


class UpstreamSearchError(ScandalScopeError):
    """A single search request failed. Absorbed per query, never surfaced."""

    def __init__(self, query: str, reason: str):
        self.query = query
        self.reason = reason
        super().__init__(f"search failed for {query!r}: {reason}")


class UpstreamCompletionError(ScandalScopeError):
    """The completion call failed or returned no usable choice."""


class MalformedResponseError(ScandalScopeError):
    """Completion text did not contain a valid incident report."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or []
        if self.errors:
            message = f"{message}: {'; '.join(self.errors)}"
        super().__init__(message)
