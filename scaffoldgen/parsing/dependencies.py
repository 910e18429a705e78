"""Dependency extraction from the manifest embedded in a project."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from ..logging import get_logger
from ..models import CodeFile, DependencySet, Ecosystem
from .sanitize import DEFAULT_DEPENDENCIES, JSON_ERRORS, load_lenient_json

logger = get_logger("parsing.dependencies")

_UNINDENTED_WORD = re.compile(r"^\w")


@dataclass
class ExtractedDependencies:
    dependencies: DependencySet
    note: Optional[str] = None


def default_dependencies() -> DependencySet:
    return DependencySet(ecosystem=Ecosystem.NPM, entries=dict(DEFAULT_DEPENDENCIES))


def find_manifest(files: Sequence[CodeFile], filename: str) -> Optional[CodeFile]:
    """Return the first file named ``filename`` at the root or in any folder."""
    for file in files:
        if file.path == filename or file.path.endswith(f"/{filename}"):
            return file
    return None


def _clean_entries(raw: Dict[object, object]) -> Dict[str, str]:
    entries: Dict[str, str] = {}
    for name, version in raw.items():
        key = str(name).strip()
        if key:
            entries[key] = version if isinstance(version, str) else str(version)
    return entries


def _merge_sections(parsed: Dict[str, object]) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    for field_name in ("dependencies", "devDependencies"):
        section = parsed.get(field_name)
        if isinstance(section, dict):
            merged.update(_clean_entries(section))
    return merged


def extract_npm(manifest: CodeFile) -> ExtractedDependencies:
    """Merge ``dependencies`` and ``devDependencies`` from a package.json."""
    try:
        parsed = load_lenient_json(manifest.content)
        merged = _merge_sections(parsed) if isinstance(parsed, dict) else None
    except JSON_ERRORS:
        merged = None
    if merged is None:
        logger.warning(
            "Could not parse %s for dependencies, using defaults", manifest.path
        )
        return ExtractedDependencies(
            default_dependencies(),
            note=f"{manifest.path} could not be parsed; default dependencies assumed",
        )
    return ExtractedDependencies(DependencySet(ecosystem=Ecosystem.NPM, entries=merged))


class _Section(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


def extract_flutter(manifest: CodeFile) -> ExtractedDependencies:
    """Collect ``name: version`` lines from pubspec dependency sections.

    This is a line heuristic rather than a YAML parse: any line mentioning
    ``dependencies:`` opens a section, and the next unindented line that is
    not ``dev_dependencies:`` closes it.
    """
    entries: Dict[str, str] = {}
    state = _Section.OUTSIDE
    for line in manifest.content.split("\n"):
        if "dependencies:" in line:
            state = _Section.INSIDE
        elif (
            state is _Section.INSIDE
            and _UNINDENTED_WORD.match(line)
            and "dev_dependencies:" not in line
        ):
            state = _Section.OUTSIDE
        elif state is _Section.INSIDE and ":" in line.strip():
            parts: List[str] = [part.strip() for part in line.strip().split(":")]
            name, version = parts[0], parts[1]
            if name and version:
                entries[name] = version
    return ExtractedDependencies(DependencySet(ecosystem=Ecosystem.FLUTTER, entries=entries))


_STRATEGIES: Dict[Ecosystem, Callable[[CodeFile], ExtractedDependencies]] = {
    Ecosystem.NPM: extract_npm,
    Ecosystem.FLUTTER: extract_flutter,
}


def extract_dependencies(files: Sequence[CodeFile]) -> ExtractedDependencies:
    """Pick the ecosystem by manifest presence and run its strategy."""
    for ecosystem, strategy in _STRATEGIES.items():
        manifest = find_manifest(files, ecosystem.manifest_name)
        if manifest is not None:
            logger.debug("Extracting %s dependencies from %s", ecosystem.value, manifest.path)
            return strategy(manifest)
    return ExtractedDependencies(default_dependencies())


__all__ = [
    "ExtractedDependencies",
    "default_dependencies",
    "extract_dependencies",
    "extract_flutter",
    "extract_npm",
    "find_manifest",
]
