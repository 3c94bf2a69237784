from .node import PhyloNode


def caterpillar_tree(depth: int, length: float = 1.0) -> PhyloNode:
    """Build a ladder-shaped tree with ``depth + 1`` leaves.

    Each level hangs a leaf ``L_<level>`` on the left and continues the
    spine through ``R_<level>`` on the right; levels count down to 1.

    Every branch gets ``length`` except the root, which keeps length 0.
    A zero root branch keeps the root connector on the left edge of the
    grid; a unit root branch would push the whole drawing right.
    """
    root = PhyloNode(f"Tree with depth {depth}")
    spine = root
    for level in range(depth, 0, -1):
        spine.add(f"L_{level}", length)
        spine = spine.add(f"R_{level}", length)
    return root
