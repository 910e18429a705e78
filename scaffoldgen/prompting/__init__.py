"""Prompt construction for completion providers."""

from .enhancer import DEFAULT_PROJECT_NAME, GenerationRequest, ProjectConfig, PromptEnhancer

__all__ = ["DEFAULT_PROJECT_NAME", "GenerationRequest", "ProjectConfig", "PromptEnhancer"]
