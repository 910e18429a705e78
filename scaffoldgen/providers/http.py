"""JSON-over-HTTP transport shared by the hosted completion providers."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .errors import ErrorCategory, ProviderError

Classifier = Callable[[int, str], ErrorCategory]

DEFAULT_TIMEOUT = 60.0


def post_json(
    url: str,
    payload: Mapping[str, Any],
    *,
    provider: str,
    classify: Classifier,
    headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """POST ``payload`` as JSON and return the decoded response object.

    HTTP failures are turned into :class:`ProviderError` using the provider's
    ``classify`` callback; no request is ever retried here.
    """
    data = json.dumps(payload).encode("utf-8")
    request_headers = {"Content-Type": "application/json"}
    request_headers.update(headers or {})
    http_request = Request(url, data=data, headers=request_headers, method="POST")

    try:
        with urlopen(http_request, timeout=timeout or DEFAULT_TIMEOUT) as response:  # type: ignore[arg-type]
            raw = response.read()
    except HTTPError as exc:
        detail = error_detail(exc)
        raise ProviderError(
            provider,
            classify(exc.code, detail),
            detail or str(exc.reason),
            status=exc.code,
        ) from exc
    except URLError as exc:
        raise ProviderError(provider, ErrorCategory.UNAVAILABLE, str(exc.reason)) from exc
    except TimeoutError as exc:
        raise ProviderError(provider, ErrorCategory.UNAVAILABLE, "request timed out") from exc

    try:
        decoded = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ProviderError(provider, ErrorCategory.UNKNOWN, "returned invalid JSON") from exc
    if not isinstance(decoded, dict):
        raise ProviderError(provider, ErrorCategory.UNKNOWN, "returned an unexpected payload")
    return decoded


def error_detail(exc: HTTPError) -> str:
    """Best-effort human readable message from an HTTP error body."""
    try:
        body = exc.read().decode("utf-8", errors="ignore") if hasattr(exc, "read") else ""
    except OSError:
        body = ""
    body = body.strip()
    if not body:
        return ""
    try:
        payload = json.loads(body)
    except json.JSONDecodeError:
        return body
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(error, str):
            return error
    return body


__all__ = ["Classifier", "DEFAULT_TIMEOUT", "error_detail", "post_json"]
