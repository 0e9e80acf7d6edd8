"""In-memory tree of folders and files."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

HOME_NAME = "~"


class NodeType(Enum):
    """Kind of entry held by a folder."""

    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class File:
    """A named file without content."""

    name: str
    node_type: ClassVar[NodeType] = NodeType.FILE


Node = Union[File, "Folder"]
DisplayFn = Callable[[str, NodeType, int], None]


class Folder:
    """A named folder holding files and folders in creation order."""

    node_type: ClassVar[NodeType] = NodeType.FOLDER

    def __init__(self, name: str, parent: Optional[Folder] = None) -> None:
        self.name = name
        self._parent = parent
        self.path = HOME_NAME if parent is None else f"{parent.path}/{name}"
        self._contents: dict[str, Node] = {}

    def __repr__(self) -> str:
        return f"Folder({self.name!r}, path={self.path!r})"

    def __iter__(self) -> Iterator[Node]:
        return iter(self._contents.values())

    def __len__(self) -> int:
        return len(self._contents)

    def __contains__(self, name: object) -> bool:
        return name in self._contents

    @property
    def parent(self) -> Folder:
        """The enclosing folder; the top folder is its own parent."""
        return self._parent if self._parent is not None else self

    def create(self, name: str, node_type: NodeType) -> Node:
        """Add a new entry; raise FileExistsError if the name is taken."""
        if name in self._contents:
            raise FileExistsError(name)
        node: Node
        if node_type is NodeType.FOLDER:
            node = Folder(name, self)
        else:
            node = File(name)
        self._contents[name] = node
        return node

    def remove(self, name: str) -> None:
        """Delete an entry; raise FileNotFoundError if there is none."""
        try:
            del self._contents[name]
        except KeyError:
            raise FileNotFoundError(name) from None

    def subfolder(self, name: str) -> Optional[Folder]:
        """Return the direct subfolder with this name, or None."""
        node = self._contents.get(name)
        return node if isinstance(node, Folder) else None

    def show_contents(self, display: DisplayFn, level: int = 0) -> None:
        """Show this folder and its direct entries one level deeper."""
        display(self.name, self.node_type, level)
        for node in self._contents.values():
            display(node.name, node.node_type, level + 1)

    def show_all(self, display: DisplayFn, level: int = 0) -> None:
        """Show this folder and everything below it, depth first."""
        display(self.name, self.node_type, level)
        for node in self._contents.values():
            if isinstance(node, Folder):
                node.show_all(display, level + 1)
            else:
                display(node.name, node.node_type, level + 1)