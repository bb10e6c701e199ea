"""
binpack3d – binary-tree 3D bin packing

This package contains the free-space tree, the fixed and growing packers,
and the reporting / plotting helpers around them. See the `packers` and
`utils` subpackages for the algorithms and helpers.
"""

from .geometry import Block, Placement
from .packers import Packer, FixedBinPacker, GrowingBinPacker

__all__ = [
    "Block",
    "Placement",
    "Packer",
    "FixedBinPacker",
    "GrowingBinPacker",
]

__version__ = "0.1.0"
