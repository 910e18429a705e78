"""End-to-end reconstruction of a project from completion text."""

from __future__ import annotations

from typing import List

from ..logging import get_logger
from ..models import CodeFile, ProjectResult
from .blocks import iter_blocks
from .dependencies import extract_dependencies
from .fallback import FALLBACK_NOTE, build_fallback_files
from .identify import identify_file
from .paths import PathRegistry
from .sanitize import sanitize_content
from .tree import build_tree

SUCCESS_NOTE = "Generated successfully"

logger = get_logger("parsing")


def collect_files(text: str, notes: List[str]) -> List[CodeFile]:
    """Identify, sanitise and de-duplicate every fenced block in ``text``."""
    registry = PathRegistry()
    files: List[CodeFile] = []
    for block in iter_blocks(text):
        identity = identify_file(block, len(files))
        sanitized = sanitize_content(identity.content, identity.path, identity.language)
        if sanitized.note:
            logger.warning(sanitized.note)
            notes.append(sanitized.note)
        path = registry.claim(identity.path)
        if path != identity.path:
            logger.debug("Renamed duplicate path %s to %s", identity.path, path)
        logger.debug(
            "Block %d -> %s (%s, via %s)",
            block.order,
            path,
            identity.language,
            identity.source,
        )
        files.append(CodeFile(path=path, content=sanitized.content, language=identity.language))
    return files


def parse_completion(text: str) -> ProjectResult:
    """Reconstruct a project from raw model output. Never raises for string input."""
    notes: List[str] = []
    files = collect_files(text, notes)
    if not files:
        logger.warning(FALLBACK_NOTE)
        notes.append(FALLBACK_NOTE)
        files = build_fallback_files()

    extracted = extract_dependencies(files)
    if extracted.note:
        notes.append(extracted.note)

    logger.debug("Reconstructed %d files", len(files))
    return ProjectResult(
        files=files,
        tree=build_tree(files),
        dependencies=extracted.dependencies,
        notes="; ".join([SUCCESS_NOTE, *notes]) if notes else SUCCESS_NOTE,
    )


__all__ = ["SUCCESS_NOTE", "collect_files", "parse_completion"]
