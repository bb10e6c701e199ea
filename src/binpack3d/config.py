"""
Global configuration for the binpack3d project.

This module centralizes:

- Project-root and output paths
- Random seeds for reproducibility (only the `random` sort order uses them)
- Defaults for the packing pipeline (bin size, sort order)
- Rendering defaults shared by the plotting helpers

All of these are kept in one place so that runs are easy to reproduce and
configuration changes don't require hunting through multiple files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import random

import numpy as np


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

# This file lives in: <repo>/src/binpack3d/config.py
# Project root is therefore two levels up from here.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

DATA_DIR: Path = PROJECT_ROOT / "data"
DATA_OUTPUT_DIR: Path = DATA_DIR / "output"


# ---------------------------------------------------------------------------
# Randomness / reproducibility
# ---------------------------------------------------------------------------

# Default global seed for runs using the `random` sort order.
DEFAULT_SEED: int = 1234


def set_global_seeds(seed: Optional[int] = None) -> int:
    """
    Set Python's and NumPy's global random seeds and return the seed used.

    The packers themselves are deterministic; only the `random` sort order
    draws from these generators.

        from binpack3d.config import set_global_seeds
        set_global_seeds(2025)
    """
    if seed is None:
        seed = DEFAULT_SEED

    random.seed(seed)
    np.random.seed(seed)
    return seed


# ---------------------------------------------------------------------------
# Pipeline defaults
# ---------------------------------------------------------------------------

# "automatic" selects the growing packer; "WxHxD" selects a fixed bin.
AUTOMATIC_SIZE: str = "automatic"
DEFAULT_SIZE: str = AUTOMATIC_SIZE

# Sorting by the largest side first gives the best fill in practice.
DEFAULT_SORT: str = "maxside"

DEFAULT_EXAMPLE: str = "simple"

# Separator used by the block text format ("100x50x20x3").
DIMENSION_SEPARATOR: str = "x"


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

# Each block is inset by z * Z_SCALE on every side to fake depth on a 2D plot.
Z_SCALE: float = 0.08

DEFAULT_PALETTE: str = "pastel"


__all__ = [
    # Paths
    "PROJECT_ROOT",
    "DATA_DIR",
    "DATA_OUTPUT_DIR",
    # Seeds / randomness
    "DEFAULT_SEED",
    "set_global_seeds",
    # Pipeline defaults
    "AUTOMATIC_SIZE",
    "DEFAULT_SIZE",
    "DEFAULT_SORT",
    "DEFAULT_EXAMPLE",
    "DIMENSION_SEPARATOR",
    # Rendering
    "Z_SCALE",
    "DEFAULT_PALETTE",
]
