from .text_tree import *
from .errors import *

__version__ = "0.1.0"
__all__ = [
    "TextTreeDescriber",
    "describe_tree",
    "LayoutEngine",
    "TreeLayout",
    "LayoutRecord",
    "GridRenderer",
    "Canvas",
    "TreeChars",
    "PhyloNode",
    "max_root_to_leaf",
    "parse_newick",
    "read_newick",
    "to_newick",
    "caterpillar_tree",
    "TreeRenderError",
    "ConfigurationError",
    "LayoutOverflowError",
    "EmptyTreeError",
    "DegenerateTreeError",
    "NewickParseError",
]
