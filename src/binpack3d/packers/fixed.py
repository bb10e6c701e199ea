"""
Fixed-size bin packer.

The bin has a width, height and depth given up front. Each block is put
into the first free leaf it fits in (see `packers.tree`), and that leaf is
split into right / down / above free space. Blocks that fit nowhere are
left unplaced; that is a normal outcome, not an error.

Best results come from input sorted largest first, ideally by the longest
side (see `binpack3d.sorting`).

    packer = Packer(500, 500, 500)
    placements = packer.fit(blocks)
    for block, placement in zip(blocks, placements):
        if placement is not None:
            draw(placement.x, placement.y, placement.z, block.width, block.height, block.depth)
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..geometry import Placement, validate_extent
from .tree import Node, find_node, split_node


def _block_extent(block):
    return validate_extent(block.width, block.height, block.depth)


def _attach(block, placement: Optional[Placement]) -> Optional[Placement]:
    # Blocks carry their own result as well as the returned list.
    block.fit = placement
    return placement


class FixedBinPacker:
    """
    Pack blocks into a single bin of fixed (width, height, depth).

    Attributes
    ----------
    width, height, depth:
        Bin dimensions.
    root:
        Root of the free-space tree for the latest `fit` call.
    """

    def __init__(self, width: float, height: float, depth: float) -> None:
        self.width, self.height, self.depth = validate_extent(width, height, depth, what="bin")
        self.root: Node = self._new_root()

    def _new_root(self) -> Node:
        return Node(0, 0, 0, self.width, self.height, self.depth)

    def fit(self, blocks: Sequence) -> List[Optional[Placement]]:
        """
        Place each block in order and return the placements, aligned with
        `blocks`. A None entry means the block did not fit.

        Each block also gets its placement assigned to `block.fit`.
        """
        extents = [_block_extent(block) for block in blocks]
        self.root = self._new_root()

        placements: List[Optional[Placement]] = []
        for block, (w, h, d) in zip(blocks, extents):
            node = find_node(self.root, w, h, d)
            placement = None
            if node is not None:
                node = split_node(node, w, h, d)
                placement = Placement(node.x, node.y, node.z)
            placements.append(_attach(block, placement))
        return placements


# Short alias for the fixed-size packer.
Packer = FixedBinPacker


__all__ = [
    "FixedBinPacker",
    "Packer",
]
