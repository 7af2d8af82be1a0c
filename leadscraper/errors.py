"""
Exceptions raised by the lead finder.

The extractor itself never raises; these cover the search backend and the
plumbing around it.
"""

from typing import Any


class LeadScraperError(Exception):
    """Base exception for all lead finder errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


class SearchServiceError(LeadScraperError):
    """The generative-search backend failed (network, auth, rate limit...)."""


class SearchRateLimitError(SearchServiceError):
    """Backend refused the call because of rate limiting."""


def wrap_openai_error(error: Exception, context: dict[str, Any] | None = None) -> SearchServiceError:
    """Translate an exception from the OpenAI client into our hierarchy."""
    ctx = dict(context or {})
    ctx["error_type"] = type(error).__name__

    text = str(error)
    lowered = text.lower()
    if "rate limit" in lowered or "rate_limit" in lowered:
        return SearchRateLimitError(f"Search backend rate limit: {text}", ctx)
    return SearchServiceError(f"Search backend error: {text}", ctx)
