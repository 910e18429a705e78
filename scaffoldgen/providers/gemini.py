"""Google Gemini generateContent provider."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlencode

from ..prompting.constants import FORMAT_RULES, SYSTEM_PROMPT
from .errors import ErrorCategory, ProviderError
from .http import post_json


def classify_gemini_error(status: int, detail: str) -> ErrorCategory:
    if "SAFETY" in detail:
        return ErrorCategory.SAFETY_BLOCKED
    if status in {401, 403}:
        return ErrorCategory.INVALID_CREDENTIAL
    if status == 429:
        if "quota" in detail.lower():
            return ErrorCategory.QUOTA_EXCEEDED
        return ErrorCategory.RATE_LIMITED
    if status == 404:
        return ErrorCategory.MODEL_NOT_FOUND
    if status == 400:
        return ErrorCategory.MALFORMED_REQUEST
    if status >= 500:
        return ErrorCategory.UNAVAILABLE
    return ErrorCategory.UNKNOWN


class GeminiProvider:
    """Gemini takes no separate system role here; instructions are prepended to the prompt."""

    name = "gemini"
    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        api_key: str,
        *,
        model: str = "gemini-1.5-flash",
        base_url: str | None = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        request_timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.request_timeout = request_timeout

    def submit(self, prompt: str) -> str:
        full_prompt = f"{SYSTEM_PROMPT}\n\n{FORMAT_RULES}\n\nNow generate code for: {prompt}"
        payload: Dict[str, Any] = {"contents": [{"parts": [{"text": full_prompt}]}]}
        generation_config: Dict[str, Any] = {}
        if self.temperature is not None:
            generation_config["temperature"] = self.temperature
        if self.max_tokens is not None:
            generation_config["maxOutputTokens"] = self.max_tokens
        if generation_config:
            payload["generationConfig"] = generation_config

        endpoint = (
            f"{self.base_url}/models/{quote(self.model)}:generateContent?"
            f"{urlencode({'key': self.api_key})}"
        )
        response = post_json(
            endpoint,
            payload,
            provider=self.name,
            classify=classify_gemini_error,
            timeout=self.request_timeout,
        )
        return self._extract_text(response)

    def _extract_text(self, payload: Dict[str, Any]) -> str:
        feedback = payload.get("promptFeedback")
        if isinstance(feedback, dict) and feedback.get("blockReason"):
            raise ProviderError(
                self.name,
                ErrorCategory.SAFETY_BLOCKED,
                f"prompt blocked: {feedback['blockReason']}",
            )

        candidates = payload.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            return ""
        first = candidates[0]
        if not isinstance(first, dict):
            return ""
        if first.get("finishReason") == "SAFETY":
            raise ProviderError(self.name, ErrorCategory.SAFETY_BLOCKED, "response blocked: SAFETY")

        content = first.get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        texts: List[str] = []
        if isinstance(parts, list):
            for part in parts:
                if isinstance(part, dict) and isinstance(part.get("text"), str):
                    texts.append(part["text"])
        return "".join(texts)


__all__ = ["GeminiProvider", "classify_gemini_error"]
