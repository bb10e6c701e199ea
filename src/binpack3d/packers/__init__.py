"""
Packers for the binpack3d project.

- Free-space tree and its search / split operations (`tree.py`)
- Fixed-size bin packer (`fixed.py`)
- Growing bin packer (`growing.py`)

High-level code (e.g. `binpack3d.pipeline`) should depend on the classes
exported here rather than on the individual modules.
"""

from .fixed import FixedBinPacker, Packer
from .growing import GrowingBinPacker
from .tree import Node, find_node, split_node, iter_leaves

__all__ = [
    "FixedBinPacker",
    "Packer",
    "GrowingBinPacker",
    "Node",
    "find_node",
    "split_node",
    "iter_leaves",
]
