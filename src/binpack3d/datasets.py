"""
Named example block sets.

Each example is a list of `BlockSpec` entries (width, height, depth, count).
They exercise different shapes of input:

- simple:   two large slabs and a handful of cubes
- cube:     many identical cubes
- power2:   cubes with power-of-two sides, more of the smaller ones
- tall / wide / deep: elongated along one axis
- tallwide: alternating tall and wide slabs
- oddeven:  odd and even sizes that leave small gaps
- complex:  a broad mix of sizes, all the same depth
"""

from __future__ import annotations

from typing import Dict, List

from .utils.io import BlockSpec


EXAMPLES: Dict[str, List[BlockSpec]] = {
    "simple": [
        BlockSpec(500, 200, 50),
        BlockSpec(250, 200, 50),
        BlockSpec(50, 50, 50, 20),
    ],
    "cube": [
        BlockSpec(50, 50, 50, 150),
    ],
    "power2": [
        BlockSpec(2, 2, 2, 256),
        BlockSpec(4, 4, 4, 128),
        BlockSpec(8, 8, 8, 64),
        BlockSpec(16, 16, 16, 32),
        BlockSpec(32, 32, 32, 16),
        BlockSpec(64, 64, 64, 8),
        BlockSpec(128, 128, 128, 4),
        BlockSpec(256, 256, 256, 2),
    ],
    "tall": [
        BlockSpec(50, 400, 50, 2),
        BlockSpec(50, 300, 50, 5),
        BlockSpec(50, 200, 50, 10),
        BlockSpec(50, 100, 50, 20),
        BlockSpec(50, 50, 50, 40),
    ],
    "wide": [
        BlockSpec(400, 50, 50, 2),
        BlockSpec(300, 50, 50, 5),
        BlockSpec(200, 50, 50, 10),
        BlockSpec(100, 50, 50, 20),
        BlockSpec(50, 50, 50, 40),
    ],
    "deep": [
        BlockSpec(50, 50, 400, 2),
        BlockSpec(50, 50, 300, 5),
        BlockSpec(50, 50, 200, 10),
        BlockSpec(50, 50, 100, 20),
        BlockSpec(50, 50, 50, 40),
    ],
    "tallwide": [
        BlockSpec(400, 100, 50),
        BlockSpec(100, 400, 50),
        BlockSpec(400, 100, 50),
        BlockSpec(100, 400, 50),
        BlockSpec(400, 100, 50),
        BlockSpec(100, 400, 50),
    ],
    "oddeven": [
        BlockSpec(50, 50, 10, 20),
        BlockSpec(47, 31, 10, 20),
        BlockSpec(23, 17, 10, 20),
        BlockSpec(109, 42, 10, 20),
        BlockSpec(42, 109, 10, 20),
        BlockSpec(17, 33, 10, 20),
    ],
    "complex": [
        BlockSpec(100, 100, 5, 3),
        BlockSpec(60, 60, 5, 3),
        BlockSpec(50, 20, 5, 20),
        BlockSpec(20, 50, 5, 20),
        BlockSpec(250, 250, 5, 1),
        BlockSpec(250, 100, 5, 1),
        BlockSpec(100, 250, 5, 1),
        BlockSpec(400, 80, 5, 1),
        BlockSpec(80, 400, 5, 1),
        BlockSpec(10, 10, 5, 100),
        BlockSpec(5, 5, 5, 500),
    ],
}


def example_names() -> List[str]:
    return list(EXAMPLES)


def get_example(name: str) -> List[BlockSpec]:
    """
    Return a copy of the named example's specs.

    Raises
    ------
    ValueError
        If `name` is not a known example.
    """
    if name not in EXAMPLES:
        raise ValueError(f"Unknown example {name!r}. Expected one of {example_names()}.")
    return list(EXAMPLES[name])


__all__ = [
    "EXAMPLES",
    "example_names",
    "get_example",
]
