"""Path and language identification for extracted blocks.

Signals are consulted from most to least reliable: an explicit path header,
then a leading filename comment inside the block, then the shape of the
content itself. The first signal that produces a path wins.
"""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..models import RawBlock

DEFAULT_LANGUAGE = "text"
MANIFEST_LANGUAGE = "json"
MANIFEST_FILENAME = "package.json"

_LANGUAGE_BY_SUFFIX = {
    ".ts": "typescript",
    ".tsx": "typescript",
    ".js": "javascript",
    ".jsx": "javascript",
    ".css": "css",
    ".json": "json",
    ".dart": "dart",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".md": "markdown",
    ".html": "html",
    ".xml": "xml",
    ".scss": "scss",
    ".sass": "sass",
    ".less": "less",
    ".py": "python",
    ".java": "java",
    ".swift": "swift",
    ".kt": "kotlin",
    ".rb": "ruby",
    ".php": "php",
    ".go": "go",
    ".rs": "rust",
    ".sql": "sql",
    ".sh": "bash",
    ".bash": "bash",
    ".zsh": "bash",
    ".fish": "bash",
}

_SUFFIX_BY_LANGUAGE = {
    "typescript": ".tsx",
    "javascript": ".jsx",
    "json": ".json",
    "css": ".css",
    "html": ".html",
    "dart": ".dart",
    "yaml": ".yaml",
    "python": ".py",
    "java": ".java",
    "tsx": ".tsx",
    "jsx": ".jsx",
    "ts": ".ts",
    "js": ".js",
}

_DEFAULT_SUFFIX = ".txt"

_COMMENT_LINE = re.compile(
    r"^(?://|#|<!--)\s*(?P<label>(?:file|filename|path)\s*:)?\s*(?P<path>.+?)(?:\s*-->)?\s*$",
    re.IGNORECASE,
)


@dataclass
class FileIdentity:
    """Where a block lands in the project and what language it holds."""

    path: str
    language: str
    content: str
    source: str


@dataclass(frozen=True)
class ContentRule:
    """Maps a recognisable content shape to a canonical path."""

    name: str
    predicate: Callable[[str, str], bool]
    template: str

    def render(self, language: str, index: int) -> str:
        return self.template.format(index=index, ext=suffix_for_language(language))


def _contains_any(*needles: str) -> Callable[[str, str], bool]:
    return lambda content, language: any(needle in content for needle in needles)


def _is_manifest(content: str, language: str) -> bool:
    return '"name"' in content and '"version"' in content and language == MANIFEST_LANGUAGE


def _is_component(content: str, language: str) -> bool:
    return "export" in content and "function" in content


CONTENT_RULES: Tuple[ContentRule, ...] = (
    ContentRule(
        "home",
        _contains_any("export default function Home", "export default function Page"),
        "app/page.tsx",
    ),
    ContentRule("app", _contains_any("export default function App"), "app/App.tsx"),
    ContentRule("layout", _contains_any("export default function Layout"), "app/layout.tsx"),
    ContentRule("manifest", _is_manifest, MANIFEST_FILENAME),
    ContentRule("markup", _contains_any("<!DOCTYPE", "<html"), "index.html"),
    ContentRule("stylesheet", _contains_any("@tailwind", "globals.css"), "app/globals.css"),
    ContentRule("component", _is_component, "components/Component{index}{ext}"),
    ContentRule("generic", lambda content, language: True, "file_{index}{ext}"),
)


def language_for_path(path: str) -> str:
    """Return the language tag implied by a file's extension."""
    suffix = posixpath.splitext(posixpath.basename(path))[1].lower()
    return _LANGUAGE_BY_SUFFIX.get(suffix, DEFAULT_LANGUAGE)


def suffix_for_language(language: str) -> str:
    return _SUFFIX_BY_LANGUAGE.get(language, _DEFAULT_SUFFIX)


def normalise_path(raw: str) -> str:
    """Return a clean relative forward-slash path, or '' when nothing is left."""
    kept: List[str] = []
    for part in raw.strip().replace("\\", "/").split("/"):
        part = part.strip()
        if part in {"", "."}:
            continue
        if part == "..":
            # Parent segments never climb above the project root.
            if kept:
                kept.pop()
            continue
        kept.append(part)
    return "/".join(kept)


def looks_like_path(header: str) -> bool:
    return "." in header or "/" in header


def path_from_comment(line: str) -> Optional[str]:
    """Extract a filename from a leading comment such as ``// File: x.ts``."""
    match = _COMMENT_LINE.match(line.strip())
    if not match:
        return None
    candidate = match.group("path").strip()
    # Without an explicit label only a bare path-like token qualifies.
    if not match.group("label") and (not looks_like_path(candidate) or " " in candidate):
        return None
    return normalise_path(candidate) or None


def infer_path(content: str, language: str, index: int) -> Tuple[str, str]:
    """Return ``(path, rule name)`` from the first matching content rule."""
    for rule in CONTENT_RULES:
        if rule.predicate(content, language):
            return rule.render(language, index), rule.name
    raise AssertionError("generic content rule must always match")  # pragma: no cover


def identify_file(block: RawBlock, index: int) -> FileIdentity:
    """Decide path and language for a block.

    ``index`` is the number of files accepted so far and only feeds the
    synthesised component and generic names.
    """
    header = (block.header or "").strip()
    content = block.body

    if header and looks_like_path(header):
        path = normalise_path(header)
        if path:
            return FileIdentity(path, language_for_path(path), content, "header")
        header = ""

    language = header.lower() if header else DEFAULT_LANGUAGE
    if header:
        first_line, _, rest = content.partition("\n")
        path = path_from_comment(first_line)
        if path:
            return FileIdentity(path, language, rest.strip(), "comment")

    path, rule = infer_path(content, language, index)
    return FileIdentity(path, language, content, f"content:{rule}")


__all__ = [
    "CONTENT_RULES",
    "ContentRule",
    "DEFAULT_LANGUAGE",
    "FileIdentity",
    "MANIFEST_FILENAME",
    "MANIFEST_LANGUAGE",
    "identify_file",
    "infer_path",
    "language_for_path",
    "normalise_path",
    "path_from_comment",
    "suffix_for_language",
]
