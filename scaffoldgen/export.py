"""Writers that materialise a reconstructed project on disk."""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import List

from .logging import get_logger
from .models import ProjectResult

logger = get_logger("export")


def write_project(
    result: ProjectResult, destination: Path, *, overwrite: bool = False
) -> List[Path]:
    """Write every file under ``destination`` and return the written paths."""
    root = destination.expanduser().resolve()
    targets = [(root / file.path, file) for file in result.files]

    for target, file in targets:
        if not target.resolve().is_relative_to(root):
            raise ValueError(f"Refusing to write outside {root}: {file.path}")
        if target.exists() and not overwrite:
            raise FileExistsError(f"{target} already exists. Pass overwrite=True to replace it.")

    written: List[Path] = []
    for target, file in targets:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(file.content, encoding="utf-8")
        written.append(target)
    logger.info("Wrote %d files to %s", len(written), root)
    return written


def build_archive(result: ProjectResult, destination: Path) -> Path:
    """Write the project as a zip archive at ``destination``."""
    destination = destination.expanduser()
    destination.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for file in result.files:
            archive.writestr(file.path, file.content)
    logger.info("Archived %d files to %s", len(result.files), destination)
    return destination


__all__ = ["build_archive", "write_project"]
