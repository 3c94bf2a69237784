"""Whole-tree measurements used to scale a rendering."""

import logging
from typing import Any, Iterator, List, Optional, Tuple

from ..errors import EmptyTreeError

logger = logging.getLogger(__name__)


def iter_nodes(root: Any) -> Iterator[Any]:
    """Yield ``root`` and all of its descendants in pre-order."""
    yield root
    for child in root.children:
        yield from iter_nodes(child)


def leaves(root: Any) -> List[Any]:
    return [node for node in iter_nodes(root) if not node.children]


class _Deepest:
    __slots__ = ("length", "leaf")

    def __init__(self) -> None:
        self.length = -1.0
        self.leaf: Optional[Any] = None


def _visit(node: Any, accumulated: float, deepest: _Deepest) -> None:
    if not node.children:
        # strict comparison: the first leaf reaching a maximum is kept
        if accumulated > deepest.length:
            deepest.length = accumulated
            deepest.leaf = node
        return
    for child in node.children:
        _visit(child, accumulated + child.length, deepest)


def max_root_to_leaf(root: Any) -> Tuple[float, Any]:
    """Return the longest root-to-leaf path length and the leaf ending it.

    The root's own branch length is never counted. Ties keep the leaf met
    first in depth-first, left-to-right order.
    """
    if root is None:
        raise EmptyTreeError("Cannot measure an empty tree.")

    deepest = _Deepest()
    _visit(root, 0.0, deepest)
    if deepest.leaf is None:
        raise EmptyTreeError("Tree has no leaves.")

    logger.debug(
        "Deepest leaf %r at root distance %g", getattr(deepest.leaf, "name", None), deepest.length
    )
    return deepest.length, deepest.leaf
