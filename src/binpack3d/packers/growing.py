"""
Growing bin packer.

Instead of a fixed bin, the root starts at the size of the first block and
grows to the right, down, or above whenever a block fits nowhere in the
current tree. The growth direction is picked to keep the bin roughly
cube-shaped.

Growth only ever happens along one axis at a time, so a block that is
larger than the current root along two or more axes cannot be placed and
is left unplaced. Sorting the input largest first makes this rare, since
the first block then sets a sensible starting size.

    packer = GrowingBinPacker()
    placements = packer.fit(blocks)
    bin_w, bin_h, bin_d = packer.root.w, packer.root.h, packer.root.d
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..geometry import Placement
from .fixed import _attach, _block_extent
from .tree import Node, find_node, split_node


GROW_RIGHT = "right"
GROW_DOWN = "down"
GROW_ABOVE = "above"


class GrowingBinPacker:
    """
    Pack blocks into a bin that expands on demand.

    Attributes
    ----------
    root:
        Root of the free-space tree. Replaced (not resized) on every growth;
        its extent is the final bin size after `fit`.
    growths:
        Directions taken by each growth during the latest `fit`, in order.
    """

    def __init__(self) -> None:
        self.root: Node = Node(0, 0, 0, 0, 0, 0)
        self.growths: List[str] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def fit(self, blocks: Sequence) -> List[Optional[Placement]]:
        """
        Place each block in order, growing the bin as needed.

        Returns the placements aligned with `blocks` and assigns each to
        `block.fit`. An empty input leaves a zero-sized root.
        """
        extents = [_block_extent(block) for block in blocks]
        w0, h0, d0 = extents[0] if extents else (0, 0, 0)
        self.root = Node(0, 0, 0, w0, h0, d0)
        self.growths = []

        placements: List[Optional[Placement]] = []
        for block, (w, h, d) in zip(blocks, extents):
            node = find_node(self.root, w, h, d)
            if node is not None:
                node = split_node(node, w, h, d)
            else:
                node = self.grow_node(w, h, d)
            placement = Placement(node.x, node.y, node.z) if node is not None else None
            placements.append(_attach(block, placement))
        return placements

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def choose_growth(self, w: float, h: float, d: float) -> Optional[str]:
        """
        Pick the direction to grow for a (w, h, d) block, or None if the
        block is too big to be reached by growing along any single axis.
        """
        root = self.root
        can_grow_right = h <= root.h and d <= root.d
        can_grow_down = w <= root.w and d <= root.d
        can_grow_above = w <= root.w and h <= root.h

        # Grow along the axis that is lagging furthest behind the others.
        should_grow_right = can_grow_right and root.h >= root.w + w
        should_grow_down = can_grow_down and root.w >= root.h + h
        should_grow_above = can_grow_above and (root.w >= root.d + d or root.h >= root.d + d)

        if should_grow_right:
            return GROW_RIGHT
        if should_grow_down:
            return GROW_DOWN
        if should_grow_above:
            return GROW_ABOVE
        if can_grow_right:
            return GROW_RIGHT
        if can_grow_down:
            return GROW_DOWN
        if can_grow_above:
            return GROW_ABOVE
        return None

    def grow_node(self, w: float, h: float, d: float) -> Optional[Node]:
        """
        Enlarge the bin to make room for a (w, h, d) block and place it.

        Returns the node the block was placed at, or None when no growth
        direction can accommodate it.
        """
        direction = self.choose_growth(w, h, d)
        if direction == GROW_RIGHT:
            return self.grow_right(w, h, d)
        if direction == GROW_DOWN:
            return self.grow_down(w, h, d)
        if direction == GROW_ABOVE:
            return self.grow_above(w, h, d)
        return None

    def grow_right(self, w: float, h: float, d: float) -> Optional[Node]:
        old = self.root
        self.root = Node(
            0, 0, 0, old.w + w, old.h, old.d,
            children=(
                Node(old.w, 0, 0, w, old.h, old.d),
                old,
                Node(0, 0, 0, old.w, old.h, 0),
            ),
        )
        return self._place_after_growth(GROW_RIGHT, w, h, d)

    def grow_down(self, w: float, h: float, d: float) -> Optional[Node]:
        old = self.root
        self.root = Node(
            0, 0, 0, old.w, old.h + h, old.d,
            children=(
                old,
                Node(0, old.h, 0, old.w, h, old.d),
                Node(0, 0, 0, old.w, old.h, 0),
            ),
        )
        return self._place_after_growth(GROW_DOWN, w, h, d)

    def grow_above(self, w: float, h: float, d: float) -> Optional[Node]:
        old = self.root
        self.root = Node(
            0, 0, 0, old.w, old.h, old.d + d,
            children=(
                old,
                Node(0, 0, 0, old.w, 0, old.d),
                Node(0, 0, old.d, old.w, old.h, d),
            ),
        )
        return self._place_after_growth(GROW_ABOVE, w, h, d)

    def _place_after_growth(self, direction: str, w: float, h: float, d: float) -> Optional[Node]:
        self.growths.append(direction)
        node = find_node(self.root, w, h, d)
        if node is None:
            return None
        return split_node(node, w, h, d)


__all__ = [
    "GROW_RIGHT",
    "GROW_DOWN",
    "GROW_ABOVE",
    "GrowingBinPacker",
]
