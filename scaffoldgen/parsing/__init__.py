"""Reconstruction of structured projects from model completions."""

from .blocks import extract_blocks
from .dependencies import extract_dependencies
from .identify import identify_file
from .paths import PathRegistry
from .pipeline import parse_completion
from .sanitize import sanitize_content
from .tree import build_tree

__all__ = [
    "PathRegistry",
    "build_tree",
    "extract_blocks",
    "extract_dependencies",
    "identify_file",
    "parse_completion",
    "sanitize_content",
]
