"""
Free-space tree shared by the fixed and growing packers.

The bin is described by a tree of `Node` objects:

- A **leaf** (`used` is False) is a box of free space that can receive a block.
- A **used** node has had a block placed at its origin and owns exactly three
  children, `right`, `down` and `above`, that partition the space the block
  did not take.

The leaves reachable from the root therefore partition the free space of the
bin at all times.

Two operations drive every packing run:

    node = find_node(root, w, h, d)      # first leaf the block fits in
    split_node(node, w, h, d)            # place the block, carve the rest

Search order is always right, then down, then above. That order is the
tie-break between equally good leaves, so changing it changes every layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


@dataclass(eq=False)
class Node:
    """
    A box of space at origin (x, y, z) with extent (w, h, d).

    `children` is None for a free leaf, or the (right, down, above) triple
    once the node has been used.
    """

    x: float
    y: float
    z: float
    w: float
    h: float
    d: float
    children: Optional[Tuple["Node", "Node", "Node"]] = None

    @property
    def used(self) -> bool:
        return self.children is not None

    @property
    def right(self) -> Optional["Node"]:
        return self.children[0] if self.children is not None else None

    @property
    def down(self) -> Optional["Node"]:
        return self.children[1] if self.children is not None else None

    @property
    def above(self) -> Optional["Node"]:
        return self.children[2] if self.children is not None else None

    @property
    def volume(self) -> float:
        return self.w * self.h * self.d

    def fits(self, w: float, h: float, d: float) -> bool:
        """Bounding-box containment, no rotation."""
        return w <= self.w and h <= self.h and d <= self.d


def find_node(root: Node, w: float, h: float, d: float) -> Optional[Node]:
    """
    Return the first free leaf under `root` that can hold a (w, h, d) block.

    Used nodes are searched depth-first in (right, down, above) order. An
    explicit stack is used so that long chains of splits do not run into the
    interpreter's recursion limit; the visiting order is the same as the
    recursive `right or down or above` form.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node.children is not None:
            right, down, above = node.children
            stack.append(above)
            stack.append(down)
            stack.append(right)
        elif node.fits(w, h, d):
            return node
    return None


def split_node(node: Node, w: float, h: float, d: float) -> Node:
    """
    Place a (w, h, d) block at `node`'s origin and carve the remaining space.

    The node becomes used and gets three children:

    - right: beside the block, as tall and deep as the block
    - down:  below the block, full node width, as deep as the block
    - above: behind the block, full node width and height

    Width is carved first, then height, then depth.

    Returns the node, whose origin is the block's placement.
    """
    node.children = (
        Node(node.x + w, node.y, node.z, node.w - w, h, d),
        Node(node.x, node.y + h, node.z, node.w, node.h - h, d),
        Node(node.x, node.y, node.z + d, node.w, node.h, node.d - d),
    )
    return node


def iter_leaves(root: Node) -> Iterator[Node]:
    """
    Yield every free leaf under `root` in search order.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node.children is not None:
            stack.extend(reversed(node.children))
        else:
            yield node


__all__ = [
    "Node",
    "find_node",
    "split_node",
    "iter_leaves",
]
