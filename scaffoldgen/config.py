"""Configuration loading for scaffoldgen (.scaffoldgen.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

CONFIG_FILENAME = ".scaffoldgen.yml"

PROVIDER_NAMES = ("openai", "anthropic", "gemini")

_ENV_API_KEYS = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "gemini": "GEMINI_API_KEY",
}
_ENV_MOCK = "USE_MOCK_API"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed or is incomplete."""


@dataclass
class ProviderConfig:
    """Connection settings for one completion provider."""

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    request_timeout: Optional[float] = None


@dataclass
class JobConfig:
    """Retention of generation jobs in the in-memory store."""

    ttl_seconds: float = 3600.0


@dataclass
class ScaffoldConfig:
    """Represents the settings defined in .scaffoldgen.yml plus environment."""

    root: Path
    mock: bool = False
    providers: Dict[str, ProviderConfig] = field(default_factory=dict)
    jobs: JobConfig = field(default_factory=JobConfig)

    def provider(self, name: str) -> ProviderConfig:
        return self.providers.get(name) or ProviderConfig()


def load_config(
    config_path: Path | None = None, *, environ: Mapping[str, str] | None = None
) -> ScaffoldConfig:
    """Load configuration from disk, falling back to environment variables."""
    env = os.environ if environ is None else environ
    config_file = _resolve_config_path(config_path or Path.cwd())
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        loaded = _read_config(config_file)
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")
        data = loaded or {}

    providers_data = _as_dict(data.get("providers"))
    providers: Dict[str, ProviderConfig] = {}
    for name in PROVIDER_NAMES:
        entry = _as_dict(providers_data.get(name))
        providers[name] = ProviderConfig(
            api_key=_as_str(entry.get("api_key")) or env.get(_ENV_API_KEYS[name]) or None,
            base_url=_as_str(entry.get("base_url")),
            temperature=_as_float(entry.get("temperature")),
            max_tokens=_as_int(entry.get("max_tokens")),
            request_timeout=_as_float(entry.get("request_timeout")),
        )

    jobs = JobConfig()
    jobs_data = _as_dict(data.get("jobs"))
    ttl = _as_float(jobs_data.get("ttl_seconds"))
    if ttl is not None:
        if ttl <= 0:
            raise ConfigError("jobs.ttl_seconds must be positive")
        jobs.ttl_seconds = ttl

    mock = _as_bool(data.get("mock"))
    if mock is None:
        mock = _as_bool(env.get(_ENV_MOCK)) or False

    return ScaffoldConfig(root=root, mock=mock, providers=providers, jobs=jobs)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return config_path / CONFIG_FILENAME
    return config_path


def _read_config(config_file: Path) -> Any:
    try:
        text = config_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {config_file}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_file}: {exc}") from exc


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "JobConfig",
    "ProviderConfig",
    "ScaffoldConfig",
    "load_config",
]
