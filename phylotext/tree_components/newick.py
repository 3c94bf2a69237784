"""Reading and writing trees in Newick bracket notation.

Parsing and formatting are done by Biopython's ``Bio.Phylo`` Newick
support; this module converts between its ``Clade`` objects and
:class:`PhyloNode` so the renderer sees the same node type whatever the
source. Ids are handed out in pre-order, root first.
"""

import io
import logging
from pathlib import Path
from typing import Union

from Bio import Phylo
from Bio.Phylo import Newick
from Bio.Phylo.NewickIO import NewickError

from ..errors import NewickParseError
from .node import PhyloNode

logger = logging.getLogger(__name__)


def _clade_length(clade) -> float:
    length = clade.branch_length or 0.0
    if length < 0:
        raise NewickParseError(f"Negative branch length {length:g} on {clade.name or 'unnamed clade'}")
    return float(length)


def _from_clade(clade, parent: PhyloNode) -> None:
    node = parent.add(clade.name, _clade_length(clade))
    for child in clade.clades:
        _from_clade(child, node)


def _to_clade(node: PhyloNode) -> Newick.Clade:
    clade = Newick.Clade(branch_length=node.length, name=node.name)
    clade.clades = [_to_clade(child) for child in node.children]
    return clade


def parse_newick(text: str) -> PhyloNode:
    """Parse a single Newick tree; the trailing ``;`` is optional."""
    try:
        tree = Phylo.read(io.StringIO(text.strip()), "newick")
    except (NewickError, ValueError) as exc:
        raise NewickParseError(f"Invalid Newick tree: {exc}") from exc

    clade = tree.root
    root = PhyloNode(clade.name, _clade_length(clade))
    for child in clade.clades:
        _from_clade(child, root)
    logger.debug("Parsed Newick tree with %d leaves", len(root.leaves()))
    return root


def read_newick(path: Union[str, Path]) -> PhyloNode:
    text = Path(path).read_text(encoding="utf-8")
    return parse_newick(text)


def to_newick(root: PhyloNode) -> str:
    tree = Newick.Tree(root=_to_clade(root), rooted=True)
    handle = io.StringIO()
    Phylo.write(tree, handle, "newick", format_branch_length="%g")
    return handle.getvalue().strip()
