"""Path uniqueness across a reconstructed project."""

from __future__ import annotations

import posixpath
from typing import Iterable, Set


def with_suffix_counter(path: str, counter: int) -> str:
    """Insert ``_<counter>`` before the extension of the final segment."""
    directory, filename = posixpath.split(path)
    stem, ext = posixpath.splitext(filename)
    renamed = f"{stem}_{counter}{ext}"
    return posixpath.join(directory, renamed) if directory else renamed


class PathRegistry:
    """Hands out unique paths in the order they are claimed."""

    def __init__(self, existing: Iterable[str] = ()) -> None:
        self._seen: Set[str] = set(existing)

    def __contains__(self, path: object) -> bool:
        return path in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def claim(self, path: str) -> str:
        """Reserve ``path``, renaming it when an earlier file already holds it."""
        unique = path
        counter = 1
        while unique in self._seen:
            unique = with_suffix_counter(path, counter)
            counter += 1
        self._seen.add(unique)
        return unique


__all__ = ["PathRegistry", "with_suffix_counter"]
