"""Fail-safe project used when a completion yields no usable files."""

from __future__ import annotations

from typing import List

from ..models import CodeFile
from .sanitize import default_manifest, dump_json

FALLBACK_NOTE = "No code blocks were found in the response; a default project was generated"

_HOME_PAGE = """export default function Home() {
  return (
    <div className="min-h-screen p-8">
      <h1 className="text-4xl font-bold">Generated App</h1>
      <p>Your app has been generated successfully!</p>
    </div>
  );
}"""


def build_fallback_files() -> List[CodeFile]:
    """Return the minimal Next.js project: a manifest and a home page."""
    return [
        CodeFile(path="package.json", content=dump_json(default_manifest()), language="json"),
        CodeFile(path="app/page.tsx", content=_HOME_PAGE, language="typescript"),
    ]


__all__ = ["FALLBACK_NOTE", "build_fallback_files"]
