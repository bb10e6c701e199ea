"""
Geometry types for the binpack3d project.

This module defines:

- `Block`: an axis aligned cuboid to be packed (width, height, depth).
- `Placement`: the origin assigned to a block that was fit.
- `validate_extent`: the boundary check shared by blocks and packers.

Coordinate convention
---------------------

- x grows to the right (width axis).
- y grows downward (height axis), matching screen coordinates.
- z grows "above" the xy plane (depth axis).

A placed block occupies the half-open box
`[x, x + width) x [y, y + height) x [z, z + depth)`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

import math
import numbers


Extent = Tuple[float, float, float]


def validate_extent(width, height, depth, what: str = "block") -> Extent:
    """
    Check that all three dimensions are finite positive numbers.

    Raises
    ------
    ValueError
        If any dimension is missing, non-numeric, NaN/inf, zero or negative.
        Negative extents would silently corrupt the free-space tree.
    """
    dims = (width, height, depth)
    for name, value in zip(("width", "height", "depth"), dims):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f"{what} {name} must be a number, got {value!r}")
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"{what} {name} must be a positive finite number, got {value!r}")
    return dims  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Placement: where a block ended up
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Placement:
    """
    Origin of a placed block. The extent is read from the block itself.
    """

    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


# ---------------------------------------------------------------------------
# Block: an item to pack
# ---------------------------------------------------------------------------

@dataclass
class Block:
    """
    A cuboid to be packed.

    - (width, height, depth): the block's extent, positive numbers
    - fit: the `Placement` attached by a packer, or None if it did not fit

    The dimensions are validated on construction; `fit` is the only field
    a packer mutates.
    """

    width: float
    height: float
    depth: float
    fit: Optional[Placement] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        validate_extent(self.width, self.height, self.depth)

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    @property
    def extent(self) -> Extent:
        return (self.width, self.height, self.depth)


__all__ = [
    "Extent",
    "validate_extent",
    "Placement",
    "Block",
]
