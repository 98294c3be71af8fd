# treezip/models.py
from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass
class TreeNode:
    """One file or folder recovered from a line of tree text.

    The synthetic root has an empty name and only owns the top-level nodes.
    """

    name: str
    is_file: bool = False
    children: List["TreeNode"] = field(default_factory=list)
    line: Optional[int] = None

    @property
    def is_root(self) -> bool:
        return self.name == ""

    def add(self, child: "TreeNode") -> "TreeNode":
        if self.is_file:
            raise ValueError(f"file node {self.name!r} cannot have children")
        self.children.append(child)
        return child

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Depth-first walk over the descendants, in sibling order."""
        for child in self.children:
            yield child
            yield from child.iter_nodes()

    def count_files(self) -> int:
        return sum(1 for n in self.iter_nodes() if n.is_file)

    def count_dirs(self) -> int:
        return sum(1 for n in self.iter_nodes() if not n.is_file)

    def to_dict(self) -> dict:
        data = {"name": self.name, "is_file": self.is_file}
        if not self.is_file:
            data["children"] = [c.to_dict() for c in self.children]
        return data
