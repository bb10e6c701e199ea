"""
Evaluation utilities for the binpack3d project.

After a packer's `fit` call this module answers two kinds of question:

Reporting
    How much of the bin is filled, and which blocks did not fit?
    (`report`, `PackingReport`, `placements_df`)

Validation
    Is the result geometrically sound?

    - `has_any_overlap`: no two placed blocks share volume. Blocks that only
      touch along a face, edge or corner do not count as overlapping.
    - `all_within_bin`: every placed block lies inside the bin.
    - `check_partition`: the free leaves of the tree are pairwise disjoint,
      lie inside the bin, stay clear of the placed blocks, and together
      with them account for the whole bin volume.

The validation helpers are used by the test-suite and by the CLI's
`--validate` flag; they never modify the blocks or the tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import math

import numpy as np
import pandas as pd
from shapely.geometry import box
from shapely.strtree import STRtree

from .packers.tree import Node, iter_leaves


# Relative tolerance for volume comparisons on real-valued dimensions.
VOLUME_RTOL: float = 1e-9


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------

@dataclass
class PackingReport:
    """
    Summary of a packing run.

    - fitted_volume: total volume of the placed blocks
    - bin_volume: volume of the bin (root extent)
    - fill_ratio: fitted / bin volume as a rounded percentage
    - fitted_count: number of placed blocks
    - unfit: 'WxHxD' labels of blocks that were not placed, in input order
    """

    fitted_volume: float
    bin_volume: float
    fill_ratio: int
    fitted_count: int
    unfit: List[str] = field(default_factory=list)

    @property
    def unfit_count(self) -> int:
        return len(self.unfit)

    def summary(self) -> str:
        text = f"Fill ratio: {self.fill_ratio}% ({self.fitted_count} placed)"
        if self.unfit:
            text += f"\nDid not fit ({self.unfit_count}): " + ", ".join(self.unfit)
        return text


def _round_percent(value: float) -> int:
    # Half-up, so 12.5 -> 13 rather than banker's rounding.
    return int(math.floor(value + 0.5))


def report(blocks: Sequence, root: Node) -> PackingReport:
    """
    Build a `PackingReport` for blocks packed into the bin rooted at `root`.
    """
    fitted = 0.0
    fitted_count = 0
    unfit: List[str] = []
    for block in blocks:
        if getattr(block, "fit", None) is not None:
            fitted += block.width * block.height * block.depth
            fitted_count += 1
        else:
            unfit.append(f"{block.width}x{block.height}x{block.depth}")

    bin_volume = root.volume
    ratio = _round_percent(100.0 * fitted / bin_volume) if bin_volume > 0 else 0
    return PackingReport(
        fitted_volume=fitted,
        bin_volume=bin_volume,
        fill_ratio=ratio,
        fitted_count=fitted_count,
        unfit=unfit,
    )


def placements_df(blocks: Sequence) -> pd.DataFrame:
    """
    Tabulate blocks and their placements.

    Columns: x, y, z, width, height, depth, fit. Unplaced blocks have NaN
    coordinates and fit=False. The index follows the input order.
    """
    records = []
    for block in blocks:
        placement = getattr(block, "fit", None)
        records.append(
            {
                "x": float(placement.x) if placement is not None else np.nan,
                "y": float(placement.y) if placement is not None else np.nan,
                "z": float(placement.z) if placement is not None else np.nan,
                "width": block.width,
                "height": block.height,
                "depth": block.depth,
                "fit": placement is not None,
            }
        )
    columns = ["x", "y", "z", "width", "height", "depth", "fit"]
    return pd.DataFrame(records, columns=columns)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _placed(blocks: Sequence) -> list:
    return [b for b in blocks if getattr(b, "fit", None) is not None]


def has_any_overlap(blocks: Sequence) -> bool:
    """
    Check whether any two placed blocks share a positive volume.

    Footprints in the xy plane are indexed with a shapely STRtree; candidate
    pairs whose footprints truly intersect are then compared along z.
    """
    placed = _placed(blocks)
    if len(placed) < 2:
        return False
    footprints = [
        box(b.fit.x, b.fit.y, b.fit.x + b.width, b.fit.y + b.height)
        for b in placed
    ]
    index = STRtree(footprints)
    for i, poly in enumerate(footprints):
        a = placed[i]
        for j in index.query(poly):
            if j <= i:
                continue
            if not poly.intersects(footprints[j]) or poly.touches(footprints[j]):
                continue
            b = placed[j]
            if max(a.fit.z, b.fit.z) < min(a.fit.z + a.depth, b.fit.z + b.depth):
                return True
    return False


def all_within_bin(blocks: Sequence, root: Node) -> bool:
    """
    Check that every placed block lies inside (0, 0, 0)-(root.w, root.h, root.d).
    """
    placed = _placed(blocks)
    if not placed:
        return True
    origins = np.array([[b.fit.x, b.fit.y, b.fit.z] for b in placed], dtype=float)
    extents = np.array([[b.width, b.height, b.depth] for b in placed], dtype=float)
    bounds = np.array([root.w, root.h, root.d], dtype=float)
    return bool(np.all(origins >= 0) and np.all(origins + extents <= bounds))


def leaves_array(root: Node, include_empty: bool = False) -> np.ndarray:
    """
    Return the free leaves under `root` as an (n, 6) array of
    (x, y, z, w, h, d) rows, in search order.

    Zero-volume leaves are dropped unless `include_empty` is True.
    """
    rows = [
        (leaf.x, leaf.y, leaf.z, leaf.w, leaf.h, leaf.d)
        for leaf in iter_leaves(root)
        if include_empty or leaf.volume > 0
    ]
    return np.array(rows, dtype=float).reshape(-1, 6)


def free_volume(root: Node) -> float:
    """Total volume of the free leaves under `root`."""
    leaves = leaves_array(root)
    return float(np.prod(leaves[:, 3:], axis=1).sum())


def check_partition(root: Node, blocks: Sequence) -> bool:
    """
    Check that the free leaves partition the bin's unused volume:

    - no leaf has a negative extent
    - every leaf lies inside the bin
    - no two leaves overlap
    - no leaf overlaps a placed block
    - free volume + placed volume == bin volume
    """
    all_leaves = leaves_array(root, include_empty=True)
    if np.any(all_leaves[:, 3:] < 0):
        return False

    leaves = leaves_array(root)
    lo = leaves[:, :3]
    hi = leaves[:, :3] + leaves[:, 3:]
    bounds = np.array([root.w, root.h, root.d], dtype=float)
    if np.any(lo < 0) or np.any(hi > bounds):
        return False

    for i in range(len(leaves) - 1):
        overlap = np.minimum(hi[i], hi[i + 1:]) - np.maximum(lo[i], lo[i + 1:])
        if np.any(np.all(overlap > 0, axis=1)):
            return False

    placed = _placed(blocks)
    if placed and len(leaves):
        block_lo = np.array([[b.fit.x, b.fit.y, b.fit.z] for b in placed], dtype=float)
        block_hi = block_lo + np.array([[b.width, b.height, b.depth] for b in placed], dtype=float)
        for i in range(len(leaves)):
            overlap = np.minimum(hi[i], block_hi) - np.maximum(lo[i], block_lo)
            if np.any(np.all(overlap > 0, axis=1)):
                return False

    placed_volume = sum(b.width * b.height * b.depth for b in placed)
    total = free_volume(root) + placed_volume
    return bool(np.isclose(total, root.volume, rtol=VOLUME_RTOL, atol=0.0))


__all__ = [
    "VOLUME_RTOL",
    "PackingReport",
    "report",
    "placements_df",
    "has_any_overlap",
    "all_within_bin",
    "leaves_array",
    "free_volume",
    "check_partition",
]
