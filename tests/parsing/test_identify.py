"""Tests for path and language identification."""

from __future__ import annotations

import pytest

from scaffoldgen.models import RawBlock
from scaffoldgen.parsing.identify import (
    CONTENT_RULES,
    identify_file,
    infer_path,
    language_for_path,
    normalise_path,
    path_from_comment,
)


def _block(header: str | None, body: str) -> RawBlock:
    return RawBlock(header=header, body=body, order=0)


@pytest.mark.parametrize(
    ("path", "language"),
    [
        ("app/page.tsx", "typescript"),
        ("lib/util.ts", "typescript"),
        ("src/index.JSX", "javascript"),
        ("package.json", "json"),
        ("pubspec.yml", "yaml"),
        ("main.py", "python"),
        ("lib/main.dart", "dart"),
        ("scripts/run.zsh", "bash"),
        ("Dockerfile", "text"),
        ("notes.unknown", "text"),
    ],
)
def test_language_for_path(path: str, language: str) -> None:
    assert language_for_path(path) == language


def test_header_with_path_wins() -> None:
    identity = identify_file(_block("components/Header.tsx", "export function Header() {}"), 0)

    assert identity.path == "components/Header.tsx"
    assert identity.language == "typescript"
    assert identity.source == "header"


def test_header_path_keeps_inline_comment() -> None:
    body = "// File: other/Place.tsx\nexport const x = 1;"
    identity = identify_file(_block("lib/x.ts", body), 0)

    assert identity.path == "lib/x.ts"
    assert identity.content == body


def test_language_header_with_filename_comment() -> None:
    body = "// File: components/Button.jsx\nexport default function Button() {\n  return null;\n}"
    identity = identify_file(_block("javascript", body), 0)

    assert identity.path == "components/Button.jsx"
    assert identity.language == "javascript"
    assert identity.content == "export default function Button() {\n  return null;\n}"
    assert identity.source == "comment"


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("// File: components/Button.jsx", "components/Button.jsx"),
        ("# filename: app/main.py", "app/main.py"),
        ("<!-- Path: public/index.html -->", "public/index.html"),
        ("<!-- index.html -->", "index.html"),
        ("// src/utils/format.ts", "src/utils/format.ts"),
        ("# Todo application", None),
        ("// just a remark.", None),
        ("const x = 1;", None),
    ],
)
def test_path_from_comment(line: str, expected: str | None) -> None:
    assert path_from_comment(line) == expected


def test_language_header_is_lowercased() -> None:
    identity = identify_file(_block("Python", "print('hello')"), 3)

    assert identity.language == "python"
    assert identity.path == "file_3.py"


@pytest.mark.parametrize(
    ("body", "language", "expected"),
    [
        ("export default function Home() { return null }", "typescript", "app/page.tsx"),
        ("export default function Page() {}", "typescript", "app/page.tsx"),
        ("export default function App() {}", "javascript", "app/App.tsx"),
        ("export default function Layout({ children }) {}", "typescript", "app/layout.tsx"),
        ('{"name": "demo", "version": "1.0.0"}', "json", "package.json"),
        ("<!DOCTYPE html><html></html>", "html", "index.html"),
        ("@tailwind base;\n@tailwind components;", "css", "app/globals.css"),
        ("export function Card() {}", "typescript", "components/Component2.tsx"),
        ("export function card() {}", "js", "components/Component2.js"),
        ("SELECT 1;", "sql", "file_2.txt"),
    ],
)
def test_content_rules(body: str, language: str, expected: str) -> None:
    path, _ = infer_path(body, language, 2)
    assert path == expected


def test_manifest_rule_requires_json_language() -> None:
    path, rule = infer_path('{"name": "demo", "version": "1.0.0"}', "text", 0)

    assert rule == "generic"
    assert path == "file_0.txt"


def test_home_rule_outranks_layout() -> None:
    body = "export default function Layout() {}\nexport default function Home() {}"
    path, rule = infer_path(body, "typescript", 0)

    assert (path, rule) == ("app/page.tsx", "home")


def test_content_rules_end_with_catch_all() -> None:
    assert CONTENT_RULES[-1].name == "generic"
    assert CONTENT_RULES[-1].predicate("", "")


def test_headerless_block_defaults_to_text() -> None:
    identity = identify_file(_block(None, "hello world"), 0)

    assert identity.language == "text"
    assert identity.path == "file_0.txt"
    assert identity.source == "content:generic"


def test_normalise_path_drops_unsafe_segments() -> None:
    assert normalise_path(" ./src//app/../page.tsx ") == "src/page.tsx"
    assert normalise_path("/etc/passwd") == "etc/passwd"
    assert normalise_path("src\\main.py") == "src/main.py"
    assert normalise_path("./") == ""


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("a/../b.ts", "b.ts"),
        ("src/lib/../utils/format.ts", "src/utils/format.ts"),
        ("../../secrets.ts", "secrets.ts"),
        ("app/../../page.tsx", "page.tsx"),
    ],
)
def test_parent_segments_resolve_within_project_root(header: str, expected: str) -> None:
    identity = identify_file(_block(header, "export const x = 1;"), 0)

    assert identity.path == expected
    assert identity.source == "header"


def test_header_that_normalises_to_nothing_is_ignored() -> None:
    identity = identify_file(_block("./", "plain"), 1)

    assert identity.path == "file_1.txt"
    assert identity.language == "text"
