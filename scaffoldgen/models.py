"""Core data models shared across scaffoldgen components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


@dataclass
class RawBlock:
    """A fenced region lifted out of a completion, in source order."""

    header: Optional[str]
    body: str
    order: int


@dataclass
class CodeFile:
    """A reconstructed project file."""

    path: str
    content: str
    language: str = "text"

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "content": self.content, "language": self.language}


class NodeKind(str, Enum):
    FILE = "file"
    FOLDER = "folder"


@dataclass
class FolderNode:
    """Node of the project tree. Only folders carry children."""

    name: str
    kind: NodeKind
    children: List["FolderNode"] = field(default_factory=list)

    def find(self, name: str, kind: NodeKind) -> Optional["FolderNode"]:
        for child in self.children:
            if child.name == name and child.kind is kind:
                return child
        return None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "type": self.kind.value}
        if self.kind is NodeKind.FOLDER:
            data["children"] = [child.to_dict() for child in self.children]
        return data


class Ecosystem(str, Enum):
    """Dependency ecosystems, keyed by the manifest file that identifies them."""

    NPM = "npm"
    FLUTTER = "flutter"

    @property
    def manifest_name(self) -> str:
        return _MANIFEST_NAMES[self]


_MANIFEST_NAMES = {
    Ecosystem.NPM: "package.json",
    Ecosystem.FLUTTER: "pubspec.yaml",
}


@dataclass
class DependencySet:
    """Dependencies declared by the project's manifest."""

    ecosystem: Ecosystem
    entries: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {self.ecosystem.value: dict(self.entries)}


@dataclass
class ProjectResult:
    """The reconstructed project handed back to callers."""

    files: List[CodeFile]
    tree: FolderNode
    dependencies: DependencySet
    notes: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files": [file.to_dict() for file in self.files],
            "structure": self.tree.to_dict(),
            "dependencies": self.dependencies.to_dict(),
            "notes": self.notes,
        }
