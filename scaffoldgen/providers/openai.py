"""OpenAI chat completions provider."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..prompting.constants import SYSTEM_PROMPT
from .errors import ErrorCategory, ProviderError
from .http import post_json


def classify_openai_error(status: int, detail: str) -> ErrorCategory:
    lowered = detail.lower()
    if status == 401:
        return ErrorCategory.INVALID_CREDENTIAL
    if status in {400, 429} and "quota" in lowered:
        return ErrorCategory.QUOTA_EXCEEDED
    if status == 429:
        return ErrorCategory.RATE_LIMITED
    if status == 404:
        return ErrorCategory.MODEL_NOT_FOUND
    if status == 400:
        return ErrorCategory.MALFORMED_REQUEST
    if status >= 500:
        return ErrorCategory.UNAVAILABLE
    return ErrorCategory.UNKNOWN


class OpenAIProvider:
    """Submits prompts to ``/chat/completions``."""

    name = "openai"
    DEFAULT_BASE_URL = "https://api.openai.com/v1"

    def __init__(
        self,
        api_key: str,
        *,
        model: str = "gpt-4o",
        base_url: str | None = None,
        temperature: Optional[float] = 0.7,
        max_tokens: Optional[int] = 4000,
        request_timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.request_timeout = request_timeout

    def submit(self, prompt: str) -> str:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        }
        if self.temperature is not None:
            payload["temperature"] = self.temperature
        if self.max_tokens is not None:
            payload["max_tokens"] = self.max_tokens

        response = post_json(
            f"{self.base_url}/chat/completions",
            payload,
            provider=self.name,
            classify=classify_openai_error,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=self.request_timeout,
        )
        return self._extract_content(response)

    def _extract_content(self, payload: Dict[str, Any]) -> str:
        choices = payload.get("choices")
        if isinstance(choices, list) and choices and isinstance(choices[0], dict):
            message = choices[0].get("message")
            if isinstance(message, dict) and isinstance(message.get("content"), str):
                return message["content"]
            if choices[0].get("finish_reason") == "content_filter":
                raise ProviderError(
                    self.name, ErrorCategory.SAFETY_BLOCKED, "completion was filtered"
                )
        return ""


__all__ = ["OpenAIProvider", "classify_openai_error"]
