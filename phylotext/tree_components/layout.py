import logging
from typing import Any, Dict, Iterator, List, Tuple

from ..errors import ConfigurationError, DegenerateTreeError
from .core import LayoutRecord
from .metrics import iter_nodes, leaves, max_root_to_leaf

logger = logging.getLogger(__name__)


class TreeLayout:
    """Coordinates for one render, kept beside the tree rather than on it.

    Records are keyed by node identity so the domain nodes are never
    written to.
    """

    def __init__(self, root: Any, width: int, height: int, scale: float, row_height: int) -> None:
        self.root = root
        self.width = width
        self.height = height
        self.scale = scale
        self.row_height = row_height
        self.leaf_count = 0
        self._records: Dict[int, Tuple[Any, LayoutRecord]] = {}

    def _store(self, node: Any, record: LayoutRecord) -> None:
        self._records[id(node)] = (node, record)

    def record_for(self, node: Any) -> LayoutRecord:
        try:
            return self._records[id(node)][1]
        except KeyError:
            raise KeyError(f"Node {node!r} is not part of this layout.") from None

    def __contains__(self, node: Any) -> bool:
        return id(node) in self._records

    def __len__(self) -> int:
        return len(self._records)

    def items(self) -> Iterator[Tuple[Any, LayoutRecord]]:
        return iter(self._records.values())


class _LayoutPass:
    """Mutable state of a single layout call."""

    def __init__(self, layout: TreeLayout) -> None:
        self.layout = layout
        self.leaf_counter = 0

    def assign(self, node: Any, ancestor_length: float) -> LayoutRecord:
        scale = self.layout.scale
        record = LayoutRecord()
        record.x_parent = ancestor_length * scale
        record.x_self = record.x_parent + node.length * scale

        if not node.children:
            y = float(self.leaf_counter * self.layout.row_height)
            self.leaf_counter += 1
        else:
            y = 0.0
            for child in node.children:
                child_record = self.assign(child, ancestor_length + node.length)
                # half-sum: the true midpoint only when there are two children
                y += 0.5 * child_record.y_self

        record.y_parent = y
        record.y_self = y
        self.layout._store(node, record)
        return record


class LayoutEngine:
    """Assigns scaled grid coordinates to every node of a tree.

    The engine holds no per-render state; one instance may be shared by
    any number of concurrent or nested renders.
    """

    def layout(self, root: Any, width: int, height: int, topology_only: bool = False) -> TreeLayout:
        if width <= 0 or height <= 0:
            raise ConfigurationError(
                f"Layout size must be positive, got width={width} height={height}."
            )

        if topology_only:
            for node in iter_nodes(root):
                node.length = 1.0

        max_length, deepest = max_root_to_leaf(root)
        if max_length <= 0:
            raise DegenerateTreeError(
                "Longest root-to-leaf distance is zero; the horizontal scale is undefined."
            )

        leaf_nodes: List[Any] = leaves(root)
        row_height = height // len(leaf_nodes)
        if row_height == 0:
            raise DegenerateTreeError(
                f"Height {height} cannot hold {len(leaf_nodes)} leaves on distinct rows."
            )

        scale = width / max_length
        logger.debug(
            "Layout scale=%g row_height=%d leaves=%d deepest=%r",
            scale,
            row_height,
            len(leaf_nodes),
            getattr(deepest, "name", None),
        )

        tree_layout = TreeLayout(root, width, height, scale, row_height)
        layout_pass = _LayoutPass(tree_layout)
        layout_pass.assign(root, 0.0)
        tree_layout.leaf_count = layout_pass.leaf_counter
        return tree_layout
