"""
Tests for binpack3d.sorting

These tests focus on:
- Single-key orders being non-increasing
- Tie-breaking in the composite orders
- Stability, 'none' and seeded 'random'
- Rejection of unknown orders
"""

from __future__ import annotations

import pytest

from binpack3d.geometry import Block
from binpack3d.sorting import COMPOSITE_KEYS, SINGLE_KEYS, SORT_ORDERS, sort_blocks, sort_key


def _sample_blocks() -> list:
    return [
        Block(3, 7, 2),
        Block(9, 1, 4),
        Block(5, 5, 5),
        Block(2, 8, 6),
        Block(6, 3, 9),
        Block(4, 4, 1),
    ]


@pytest.mark.parametrize("order", sorted(SINGLE_KEYS))
def test_single_key_orders_are_non_increasing(order):
    key = SINGLE_KEYS[order]
    result = sort_blocks(_sample_blocks(), order)
    values = [key(b) for b in result]
    assert values == sorted(values, reverse=True)


def test_maxside_breaks_ties_on_min_then_height():
    a = Block(10, 1, 1)
    b = Block(1, 10, 1)
    c = Block(5, 5, 5)
    # a and b tie on max and min; b is taller
    assert sort_blocks([a, b, c], "maxside") == [b, a, c]
    assert sort_blocks([a, b, c], "maxside")[0] is b


def test_volume_breaks_ties_on_area_then_height():
    a = Block(10, 1, 1)
    b = Block(1, 10, 1)
    c = Block(5, 5, 5)
    result = sort_blocks([a, b, c], "volume")
    assert [x is y for x, y in zip(result, [c, b, a])] == [True, True, True]


def test_height_order_uses_width_then_depth():
    blocks = [Block(1, 5, 9), Block(2, 5, 1), Block(2, 5, 3)]
    result = sort_blocks(blocks, "height")
    assert [b.extent for b in result] == [(2, 5, 3), (2, 5, 1), (1, 5, 9)]


def test_sort_is_stable_for_equal_keys():
    blocks = [Block(5, 5, 5) for _ in range(4)]
    result = sort_blocks(blocks, "maxside")
    assert all(x is y for x, y in zip(result, blocks))


def test_sort_does_not_reorder_input():
    blocks = _sample_blocks()
    before = list(blocks)
    sort_blocks(blocks, "volume")
    assert all(x is y for x, y in zip(blocks, before))


def test_none_returns_copy_in_input_order():
    blocks = _sample_blocks()
    result = sort_blocks(blocks, "none")
    assert result is not blocks
    assert all(x is y for x, y in zip(result, blocks))


def test_random_is_seeded_permutation():
    blocks = _sample_blocks()
    first = sort_blocks(blocks, "random", seed=42)
    second = sort_blocks(blocks, "random", seed=42)

    assert [id(b) for b in first] == [id(b) for b in second]
    assert sorted(id(b) for b in first) == sorted(id(b) for b in blocks)


def test_every_advertised_order_is_accepted():
    for order in SORT_ORDERS:
        assert len(sort_blocks(_sample_blocks(), order)) == 6


def test_composite_keys_only_reference_single_keys():
    for criteria in COMPOSITE_KEYS.values():
        assert set(criteria) <= set(SINGLE_KEYS)


def test_unknown_order_raises():
    with pytest.raises(ValueError):
        sort_blocks(_sample_blocks(), "diagonal")
    with pytest.raises(ValueError):
        sort_key("random")
