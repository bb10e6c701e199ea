"""
Sort orders for block sequences.

The packers place blocks in the order given, so the input order decides the
quality of the result. Every order here sorts largest first:

Single keys
    'w', 'h', 'd'   width / height / depth
    'a'             footprint area (w * h)
    'v'             volume
    'max', 'min'    longest / shortest side

Composite keys (ties broken by the following keys)
    'height'   h, w, d
    'width'    w, h, d
    'depth'    d, w, h
    'area'     a, h, w, d
    'volume'   v, a, h, w, d
    'maxside'  max, min, h, w, d

Special
    'random'   seeded shuffle
    'none'     keep the input order

Sorting is stable: blocks that compare equal keep their relative order.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

import random

from .config import set_global_seeds

T = TypeVar("T")

KeyFn = Callable[[object], float]


def _max_side(b) -> float:
    return max(b.width, b.height, b.depth)


def _min_side(b) -> float:
    return min(b.width, b.height, b.depth)


SINGLE_KEYS: Dict[str, KeyFn] = {
    "w": lambda b: b.width,
    "h": lambda b: b.height,
    "d": lambda b: b.depth,
    "a": lambda b: b.width * b.height,
    "v": lambda b: b.width * b.height * b.depth,
    "max": _max_side,
    "min": _min_side,
}

COMPOSITE_KEYS: Dict[str, Tuple[str, ...]] = {
    "height": ("h", "w", "d"),
    "width": ("w", "h", "d"),
    "depth": ("d", "w", "h"),
    "area": ("a", "h", "w", "d"),
    "volume": ("v", "a", "h", "w", "d"),
    "maxside": ("max", "min", "h", "w", "d"),
}

SORT_ORDERS: Tuple[str, ...] = (
    tuple(SINGLE_KEYS) + tuple(COMPOSITE_KEYS) + ("random", "none")
)


def sort_key(order: str) -> Callable[[object], Tuple[float, ...]]:
    """
    Return a key function producing the tuple of criteria for `order`.

    Only valid for the single and composite orders; 'random' and 'none'
    have no key.
    """
    if order in SINGLE_KEYS:
        criteria: Tuple[str, ...] = (order,)
    elif order in COMPOSITE_KEYS:
        criteria = COMPOSITE_KEYS[order]
    else:
        raise ValueError(
            f"Sort order {order!r} has no key. "
            f"Expected one of {sorted(SINGLE_KEYS) + sorted(COMPOSITE_KEYS)}."
        )
    fns = [SINGLE_KEYS[c] for c in criteria]

    def key(block) -> Tuple[float, ...]:
        return tuple(fn(block) for fn in fns)

    return key


def sort_blocks(blocks: Sequence[T], order: str = "maxside", seed: Optional[int] = None) -> List[T]:
    """
    Return a new list with `blocks` sorted by `order` (largest first).

    Parameters
    ----------
    blocks:
        Objects with width / height / depth attributes.
    order:
        One of `SORT_ORDERS`.
    seed:
        Seed for the 'random' order. If None, `DEFAULT_SEED` is used so the
        shuffle is still reproducible.
    """
    if order == "none":
        return list(blocks)
    if order == "random":
        result = list(blocks)
        set_global_seeds(seed)
        random.shuffle(result)
        return result
    if order not in SINGLE_KEYS and order not in COMPOSITE_KEYS:
        raise ValueError(f"Unknown sort order {order!r}. Expected one of {list(SORT_ORDERS)}.")

    return sorted(blocks, key=sort_key(order), reverse=True)


__all__ = [
    "SINGLE_KEYS",
    "COMPOSITE_KEYS",
    "SORT_ORDERS",
    "sort_key",
    "sort_blocks",
]
