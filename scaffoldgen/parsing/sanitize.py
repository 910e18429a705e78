"""Normalisation for JSON manifest content produced by models."""

from __future__ import annotations

import json
import posixpath
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .identify import MANIFEST_FILENAME, MANIFEST_LANGUAGE

# String literals are matched first so comment markers inside them survive.
_STRING = r'"(?:\\.|[^"\\])*"'
_COMMENTS = re.compile(rf"({_STRING})|//[^\n]*|/\*.*?\*/", re.DOTALL)
_TRAILING_COMMAS = re.compile(rf"({_STRING})|,(\s*[}}\]])")

DEFAULT_DEPENDENCIES: Dict[str, str] = {
    "next": "^14.0.0",
    "react": "^18.0.0",
    "react-dom": "^18.0.0",
}


def default_manifest() -> Dict[str, Any]:
    """Return the baseline Next.js package.json document."""
    return {
        "name": "generated-app",
        "version": "1.0.0",
        "scripts": {
            "dev": "next dev",
            "build": "next build",
            "start": "next start",
        },
        "dependencies": dict(DEFAULT_DEPENDENCIES),
    }


def dump_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def strip_json_noise(text: str) -> str:
    """Remove comments and trailing commas that strict JSON rejects."""
    without_comments = _COMMENTS.sub(lambda match: match.group(1) or "", text)
    return _TRAILING_COMMAS.sub(
        lambda match: match.group(1) or match.group(2), without_comments
    )


# Deeply nested documents exhaust the decoder's recursion limit.
JSON_ERRORS = (ValueError, RecursionError)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def loads_strict(text: str) -> Any:
    """Parse JSON as a browser would, rejecting ``NaN`` and ``Infinity``."""
    return json.loads(text, parse_constant=_reject_constant)


def load_lenient_json(text: str) -> Any:
    """Parse JSON after cleanup; raises one of ``JSON_ERRORS`` when still invalid."""
    return loads_strict(strip_json_noise(text))


@dataclass
class SanitizedContent:
    content: str
    note: Optional[str] = None


def sanitize_content(content: str, path: str, language: str) -> SanitizedContent:
    """Canonicalise manifest-language content; other content passes through."""
    if language != MANIFEST_LANGUAGE:
        return SanitizedContent(content)

    cleaned = strip_json_noise(content)
    try:
        canonical = dump_json(loads_strict(cleaned))
    except JSON_ERRORS:
        if posixpath.basename(path) == MANIFEST_FILENAME:
            return SanitizedContent(
                dump_json(default_manifest()),
                note=f"{path} was not valid JSON and was replaced with a default manifest",
            )
        return SanitizedContent(cleaned)
    return SanitizedContent(canonical)


__all__ = [
    "DEFAULT_DEPENDENCIES",
    "JSON_ERRORS",
    "SanitizedContent",
    "default_manifest",
    "dump_json",
    "load_lenient_json",
    "loads_strict",
    "sanitize_content",
    "strip_json_noise",
]
