"""Categorised failures raised by completion providers."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    INVALID_CREDENTIAL = "invalid_credential"
    RATE_LIMITED = "rate_limited"
    QUOTA_EXCEEDED = "quota_exceeded"
    SAFETY_BLOCKED = "safety_blocked"
    MALFORMED_REQUEST = "malformed_request"
    MODEL_NOT_FOUND = "model_not_found"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


class ProviderError(RuntimeError):
    """Raised when a provider rejects or fails a completion request."""

    def __init__(
        self,
        provider: str,
        category: ErrorCategory,
        detail: str,
        *,
        status: Optional[int] = None,
    ) -> None:
        super().__init__(f"{provider} API error ({category.value}): {detail}")
        self.provider = provider
        self.category = category
        self.detail = detail
        self.status = status


_PROVIDER_LABELS = {
    "openai": "OpenAI",
    "anthropic": "Claude",
    "gemini": "Gemini",
    "mock": "Mock",
}

_MESSAGES = {
    ErrorCategory.INVALID_CREDENTIAL: "Invalid {label} API key. Please check your API key.",
    ErrorCategory.RATE_LIMITED: "{label} API rate limit exceeded. Please wait a moment and try again.",
    ErrorCategory.QUOTA_EXCEEDED: "{label} API quota exceeded. Please check your billing or credits.",
    ErrorCategory.SAFETY_BLOCKED: (
        "{label} API blocked the request due to safety filters. Try rephrasing your prompt."
    ),
    ErrorCategory.MALFORMED_REQUEST: "Invalid {label} API request. Please check your prompt.",
    ErrorCategory.MODEL_NOT_FOUND: (
        "{label} model not found. Make sure your key has access to the selected model."
    ),
    ErrorCategory.UNAVAILABLE: "{label} API is unreachable. Please try again later.",
    ErrorCategory.UNKNOWN: "{label} API error: {detail}",
}


def provider_label(provider: str) -> str:
    return _PROVIDER_LABELS.get(provider, provider.title())


def describe_error(error: ProviderError) -> str:
    """Return the user-facing message for a provider failure."""
    template = _MESSAGES.get(error.category, _MESSAGES[ErrorCategory.UNKNOWN])
    return template.format(label=provider_label(error.provider), detail=error.detail or "Unknown error")


__all__ = ["ErrorCategory", "ProviderError", "describe_error", "provider_label"]
