"""Reconstruct structured software projects from model completions."""

from .models import CodeFile, DependencySet, Ecosystem, FolderNode, NodeKind, ProjectResult
from .parsing import parse_completion

__all__ = [
    "CodeFile",
    "DependencySet",
    "Ecosystem",
    "FolderNode",
    "NodeKind",
    "ProjectResult",
    "parse_completion",
]
