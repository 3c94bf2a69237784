import itertools
from typing import Iterator, List, Optional

from ..errors import ConfigurationError


class PhyloNode:
    def __init__(
        self,
        name: Optional[str] = None,
        length: float = 0.0,
        node_id: Optional[int] = None,
        parent: Optional["PhyloNode"] = None,
    ) -> None:
        if length < 0:
            raise ConfigurationError(f"Branch length must be non-negative, got {length}.")

        self.name = name
        self.length = float(length)
        self.parent = parent
        self.children: List["PhyloNode"] = []
        # The root owns the id sequence, children draw from it.
        self._ids = parent._ids if parent is not None else itertools.count()
        self.node_id = node_id if node_id is not None else next(self._ids)

    def add(self, name: Optional[str] = None, length: float = 0.0) -> "PhyloNode":
        child = PhyloNode(name, length, parent=self)
        self.children.append(child)
        return child

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def iter_preorder(self) -> Iterator["PhyloNode"]:
        yield self
        for child in self.children:
            yield from child.iter_preorder()

    def leaves(self) -> List["PhyloNode"]:
        return [node for node in self.iter_preorder() if node.is_leaf]

    def find(self, name: str) -> Optional["PhyloNode"]:
        for node in self.iter_preorder():
            if node.name == name:
                return node
        return None

    def __repr__(self) -> str:
        return f"PhyloNode(id={self.node_id}, name={self.name!r}, length={self.length:g})"
