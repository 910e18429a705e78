"""Completion providers and model selection."""

from __future__ import annotations

from typing import Callable, Dict, Protocol, Tuple, runtime_checkable

from ..config import ConfigError, ScaffoldConfig
from .anthropic import AnthropicProvider
from .errors import ErrorCategory, ProviderError, describe_error, provider_label
from .gemini import GeminiProvider
from .mock import MockProvider
from .openai import OpenAIProvider


@runtime_checkable
class CompletionProvider(Protocol):
    """Anything that turns a prompt into completion text."""

    name: str

    def submit(self, prompt: str) -> str:
        """Return the raw completion text or raise :class:`ProviderError`."""


# Public model id -> (provider name, provider model name)
MODEL_CHOICES: Dict[str, Tuple[str, str]] = {
    "claude": ("anthropic", "claude-3-5-sonnet-20241022"),
    "gpt4": ("openai", "gpt-4o"),
    "gpt3.5": ("openai", "gpt-3.5-turbo"),
    "gemini-flash": ("gemini", "gemini-1.5-flash"),
    "gemini-pro": ("gemini", "gemini-1.5-pro"),
}

_PROVIDER_CLASSES: Dict[str, Callable[..., CompletionProvider]] = {
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
    "gemini": GeminiProvider,
}

ProviderFactory = Callable[[str, ScaffoldConfig], CompletionProvider]


def create_provider(model: str, config: ScaffoldConfig) -> CompletionProvider:
    """Instantiate the provider serving ``model`` using configured credentials."""
    if config.mock:
        return MockProvider()
    try:
        provider_name, provider_model = MODEL_CHOICES[model]
    except KeyError:
        supported = ", ".join(MODEL_CHOICES)
        raise ValueError(f"Unknown model '{model}'. Choose one of: {supported}") from None

    settings = config.provider(provider_name)
    if not settings.api_key:
        raise ConfigError(f"{provider_label(provider_name)} API key not configured")

    kwargs: Dict[str, object] = {"model": provider_model, "base_url": settings.base_url}
    if settings.temperature is not None:
        kwargs["temperature"] = settings.temperature
    if settings.max_tokens is not None:
        kwargs["max_tokens"] = settings.max_tokens
    if settings.request_timeout is not None:
        kwargs["request_timeout"] = settings.request_timeout
    return _PROVIDER_CLASSES[provider_name](settings.api_key, **kwargs)


__all__ = [
    "AnthropicProvider",
    "CompletionProvider",
    "ErrorCategory",
    "GeminiProvider",
    "MODEL_CHOICES",
    "MockProvider",
    "OpenAIProvider",
    "ProviderError",
    "ProviderFactory",
    "create_provider",
    "describe_error",
]
