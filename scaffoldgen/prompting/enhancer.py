"""Expansion of short user prompts into full generation briefs."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Sequence

from .constants import (
    APP_DESCRIPTIONS,
    APP_TYPES,
    BACKEND_REQUIREMENTS,
    BASE_REQUIREMENTS,
    OUTPUT_REQUIREMENTS,
    STRUCTURE_REQUIREMENTS,
)

_PROJECT_NAME = re.compile(
    r"(?:create|build|make)\s+(?:a\s+)?(\w+\s+\w+|\w+)\s+(?:app|application|system|platform)",
    re.IGNORECASE,
)

_FEATURE_PATTERNS = {
    "auth": re.compile(r"auth|login|sign|user\s+management", re.IGNORECASE),
    "database": re.compile(r"database|data|storage|crud", re.IGNORECASE),
    "realtime": re.compile(r"real-?time|live|websocket", re.IGNORECASE),
    "payments": re.compile(r"payment|stripe|billing|subscription", re.IGNORECASE),
    "analytics": re.compile(r"analytics|dashboard|charts|metrics", re.IGNORECASE),
    "search": re.compile(r"search|filter|query", re.IGNORECASE),
    "api": re.compile(r"api|rest|graphql|endpoint", re.IGNORECASE),
    "responsive": re.compile(r"responsive|mobile|tablet", re.IGNORECASE),
}

DEFAULT_PROJECT_NAME = "my-app"


@dataclass
class GenerationRequest:
    """What the user asked for."""

    prompt: str
    model: str
    app_type: str = "web"
    include_backend: bool = False


@dataclass
class ProjectConfig:
    name: str
    type: str = "nextjs"
    features: List[str] = field(default_factory=list)
    backend: bool = False


class PromptEnhancer:
    """Wraps the user's requirement with technical and output-format guidance."""

    def enhance(self, request: GenerationRequest) -> str:
        app_type = request.app_type if request.app_type in APP_TYPES else "web"
        lines = [
            f"Create a {APP_DESCRIPTIONS[app_type]} with the following requirements:",
            "",
            "MAIN REQUIREMENT:",
            request.prompt,
            "",
        ]
        lines.extend(_section("TECHNICAL REQUIREMENTS", BASE_REQUIREMENTS[app_type]))
        if request.include_backend:
            lines.append("")
            lines.extend(_section("BACKEND REQUIREMENTS", BACKEND_REQUIREMENTS))
        lines.append("")
        lines.extend(_section("PROJECT STRUCTURE", STRUCTURE_REQUIREMENTS))
        lines.append("")
        lines.extend(_section("OUTPUT FORMAT", OUTPUT_REQUIREMENTS))
        return "\n".join(lines) + "\n"

    def extract_project_config(self, prompt: str) -> ProjectConfig:
        return ProjectConfig(
            name=self.extract_project_name(prompt),
            features=self.extract_features(prompt),
        )

    @staticmethod
    def extract_project_name(prompt: str) -> str:
        match = _PROJECT_NAME.search(prompt)
        if match:
            return re.sub(r"\s+", "-", match.group(1).lower())
        return DEFAULT_PROJECT_NAME

    @staticmethod
    def extract_features(prompt: str) -> List[str]:
        return [name for name, pattern in _FEATURE_PATTERNS.items() if pattern.search(prompt)]


def _section(title: str, items: Sequence[str]) -> List[str]:
    return [f"{title}:", *(f"- {item}" for item in items)]


__all__ = ["DEFAULT_PROJECT_NAME", "GenerationRequest", "ProjectConfig", "PromptEnhancer"]
