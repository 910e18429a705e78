"""Tests for writing reconstructed projects to disk."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from scaffoldgen.export import build_archive, write_project
from scaffoldgen.models import CodeFile, DependencySet, Ecosystem, ProjectResult
from scaffoldgen.parsing import parse_completion
from scaffoldgen.parsing.tree import build_tree


def _project() -> ProjectResult:
    return parse_completion(
        "```app/page.tsx\nexport default function Page() {}\n```\n"
        "```components/ui/Button.tsx\nexport const Button = () => null\n```"
    )


def test_write_project_creates_nested_files(tmp_path: Path) -> None:
    written = write_project(_project(), tmp_path / "out")

    page = tmp_path / "out" / "app" / "page.tsx"
    button = tmp_path / "out" / "components" / "ui" / "Button.tsx"
    assert written == [page.resolve(), button.resolve()]
    assert page.read_text(encoding="utf-8") == "export default function Page() {}"
    assert button.exists()


def test_write_project_refuses_to_overwrite(tmp_path: Path) -> None:
    write_project(_project(), tmp_path)
    (tmp_path / "app" / "page.tsx").write_text("edited", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_project(_project(), tmp_path)
    assert (tmp_path / "app" / "page.tsx").read_text(encoding="utf-8") == "edited"

    write_project(_project(), tmp_path, overwrite=True)
    assert (tmp_path / "app" / "page.tsx").read_text(encoding="utf-8").startswith("export")


def test_write_project_rejects_escaping_paths(tmp_path: Path) -> None:
    files = [CodeFile(path="../outside.txt", content="x", language="text")]
    result = ProjectResult(
        files=files,
        tree=build_tree(files),
        dependencies=DependencySet(Ecosystem.NPM),
        notes="",
    )

    with pytest.raises(ValueError, match="outside"):
        write_project(result, tmp_path / "out")
    assert not (tmp_path / "outside.txt").exists()


def test_build_archive_contains_every_file(tmp_path: Path) -> None:
    archive = build_archive(_project(), tmp_path / "dist" / "project.zip")

    with zipfile.ZipFile(archive) as handle:
        assert handle.namelist() == ["app/page.tsx", "components/ui/Button.tsx"]
        assert handle.read("app/page.tsx").decode("utf-8") == "export default function Page() {}"
