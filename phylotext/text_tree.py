from .tree_components import (
    Canvas,
    GridRenderer,
    LayoutEngine,
    LayoutRecord,
    PhyloNode,
    TextTreeDescriber,
    TreeChars,
    TreeLayout,
    caterpillar_tree,
    describe_tree,
    max_root_to_leaf,
    parse_newick,
    read_newick,
    to_newick,
)

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
]
