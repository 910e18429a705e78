"""Folder tree construction from flat file paths."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from ..models import CodeFile, FolderNode, NodeKind

ROOT_NAME = "root"


def build_tree(files: Iterable[CodeFile]) -> FolderNode:
    """Return the minimal folder tree whose file leaves are the given paths."""
    root = FolderNode(name=ROOT_NAME, kind=NodeKind.FOLDER)
    folders: Dict[str, FolderNode] = {"": root}

    for path in sorted(file.path for file in files):
        *directories, filename = path.split("/")
        current = root
        current_path = ""
        for part in directories:
            current_path = f"{current_path}/{part}" if current_path else part
            folder = folders.get(current_path)
            if folder is None:
                folder = FolderNode(name=part, kind=NodeKind.FOLDER)
                current.children.append(folder)
                folders[current_path] = folder
            current = folder

        if current.find(filename, NodeKind.FILE) is None:
            current.children.append(FolderNode(name=filename, kind=NodeKind.FILE))

    return root


def resolve(tree: FolderNode, path: str) -> Optional[FolderNode]:
    """Follow ``path`` through folder nodes to its file leaf, if present."""
    *directories, filename = path.split("/")
    current: Optional[FolderNode] = tree
    for part in directories:
        current = current.find(part, NodeKind.FOLDER) if current else None
    if current is None:
        return None
    return current.find(filename, NodeKind.FILE)


def iter_file_paths(tree: FolderNode, prefix: str = "") -> Iterator[str]:
    for child in tree.children:
        child_path = f"{prefix}/{child.name}" if prefix else child.name
        if child.kind is NodeKind.FILE:
            yield child_path
        else:
            yield from iter_file_paths(child, child_path)


def render_tree(tree: FolderNode) -> str:
    """Render the tree with box-drawing connectors for terminal display."""
    lines: List[str] = [tree.name]

    def _walk(node: FolderNode, prefix: str) -> None:
        for position, child in enumerate(node.children):
            last = position == len(node.children) - 1
            connector = "└── " if last else "├── "
            suffix = "/" if child.kind is NodeKind.FOLDER else ""
            lines.append(f"{prefix}{connector}{child.name}{suffix}")
            if child.kind is NodeKind.FOLDER:
                _walk(child, prefix + ("    " if last else "│   "))

    _walk(tree, "")
    return "\n".join(lines)


__all__ = ["ROOT_NAME", "build_tree", "iter_file_paths", "render_tree", "resolve"]
