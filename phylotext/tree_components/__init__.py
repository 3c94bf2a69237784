from .core import LayoutRecord, TreeChars
from .node import PhyloNode
from .canvas import Canvas
from .metrics import leaves, max_root_to_leaf
from .layout import LayoutEngine, TreeLayout
from .renderer import GridRenderer
from .describer import TextTreeDescriber, describe_tree
from .newick import parse_newick, read_newick, to_newick
from .generator import caterpillar_tree

__all__ = [
    "LayoutRecord",
    "TreeChars",
    "PhyloNode",
    "Canvas",
    "leaves",
    "max_root_to_leaf",
    "LayoutEngine",
    "TreeLayout",
    "GridRenderer",
    "TextTreeDescriber",
    "describe_tree",
    "parse_newick",
    "read_newick",
    "to_newick",
    "caterpillar_tree",
]
