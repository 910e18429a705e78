"""Anthropic messages API provider."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..prompting.constants import FORMAT_RULES, SYSTEM_PROMPT
from .errors import ErrorCategory
from .http import post_json

API_VERSION = "2023-06-01"


def classify_anthropic_error(status: int, detail: str) -> ErrorCategory:
    if status == 400 and "credit balance" in detail.lower():
        return ErrorCategory.QUOTA_EXCEEDED
    if status in {401, 403}:
        return ErrorCategory.INVALID_CREDENTIAL
    if status == 429:
        return ErrorCategory.RATE_LIMITED
    if status == 404:
        return ErrorCategory.MODEL_NOT_FOUND
    if status == 400:
        return ErrorCategory.MALFORMED_REQUEST
    if status >= 500:
        return ErrorCategory.UNAVAILABLE
    return ErrorCategory.UNKNOWN


class AnthropicProvider:
    """Submits prompts to ``/messages`` with the file formatting rules as system prompt."""

    name = "anthropic"
    DEFAULT_BASE_URL = "https://api.anthropic.com/v1"

    def __init__(
        self,
        api_key: str,
        *,
        model: str = "claude-3-5-sonnet-20241022",
        base_url: str | None = None,
        temperature: Optional[float] = 0.7,
        max_tokens: Optional[int] = 4000,
        request_timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.temperature = temperature
        self.max_tokens = max_tokens or 4000
        self.request_timeout = request_timeout

    def submit(self, prompt: str) -> str:
        payload: Dict[str, Any] = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "system": f"{SYSTEM_PROMPT}\n\n{FORMAT_RULES}",
            "messages": [{"role": "user", "content": prompt}],
        }
        if self.temperature is not None:
            payload["temperature"] = self.temperature

        response = post_json(
            f"{self.base_url}/messages",
            payload,
            provider=self.name,
            classify=classify_anthropic_error,
            headers={"x-api-key": self.api_key, "anthropic-version": API_VERSION},
            timeout=self.request_timeout,
        )
        content = response.get("content")
        if isinstance(content, list) and content:
            first = content[0]
            if isinstance(first, dict) and first.get("type") == "text":
                text = first.get("text")
                return text if isinstance(text, str) else ""
        return ""


__all__ = ["AnthropicProvider", "classify_anthropic_error"]
