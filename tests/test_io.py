"""
Tests for binpack3d.utils.io and binpack3d.datasets

These tests focus on:
- Parsing the WxHxD[xN] text format, including comments and bad lines
- Expanding counts into individual blocks
- Serializing specs back to text
- Loading block files and writing placement CSVs
- Named example lookup
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from binpack3d.datasets import EXAMPLES, example_names, get_example
from binpack3d.geometry import Block
from binpack3d.packers import Packer
from binpack3d.utils.io import (
    BlockSpec,
    deserialize_blocks,
    expand_specs,
    load_blocks_file,
    parse_blocks,
    save_placements_csv,
    serialize_specs,
)


# ---------------------------------------------------------------------------
# Text format
# ---------------------------------------------------------------------------

def test_parse_blocks_basic():
    specs = parse_blocks("500x200x50\n50x50x50x20\n")
    assert specs == [BlockSpec(500, 200, 50, 1), BlockSpec(50, 50, 50, 20)]


def test_parse_blocks_skips_blank_and_comment_lines():
    text = """
    # two slabs
    500x200x50

    250X200X50
    """
    specs = parse_blocks(text)
    assert specs == [BlockSpec(500, 200, 50), BlockSpec(250, 200, 50)]


def test_parse_blocks_accepts_real_dimensions():
    (spec,) = parse_blocks("1.5x2x0.25")
    assert (spec.width, spec.height, spec.depth) == (1.5, 2, 0.25)
    assert isinstance(spec.height, int)


@pytest.mark.parametrize(
    "line",
    ["10x10", "1x2x3x4x5", "axbxc", "10x10x0", "10x-1x10", "10x10x10x0", "10x10x10x2.5"],
)
def test_parse_blocks_rejects_malformed_lines(line):
    with pytest.raises(ValueError, match="Line 2"):
        parse_blocks(f"1x1x1\n{line}\n")


def test_deserialize_expands_counts():
    blocks = deserialize_blocks("500x200x50\n50x50x50x20\n")
    assert len(blocks) == 21
    assert all(isinstance(b, Block) for b in blocks)
    assert blocks[0].extent == (500, 200, 50)
    assert blocks[0].volume == 500 * 200 * 50
    assert all(b.extent == (50, 50, 50) for b in blocks[1:])
    # Expanded blocks are independent objects
    assert len({id(b) for b in blocks}) == 21


def test_expand_specs_empty():
    assert expand_specs([]) == []


def test_serialize_specs_writes_count_only_when_needed():
    text = serialize_specs([BlockSpec(500, 200, 50), BlockSpec(50, 50, 50, 20)])
    assert text == "500x200x50\n50x50x50x20\n"


def test_serialize_then_parse_complex_example():
    specs = get_example("complex")
    assert parse_blocks(serialize_specs(specs)) == specs


@pytest.mark.parametrize("count", [0, -3, 1.5, True])
def test_block_spec_rejects_bad_count(count):
    with pytest.raises(ValueError):
        BlockSpec(1, 1, 1, count)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def test_load_blocks_file(tmp_path):
    path = tmp_path / "blocks.txt"
    path.write_text("# crates\n100x100x100x2\n80x80x80\n", encoding="utf-8")

    blocks = load_blocks_file(path)
    assert [b.extent for b in blocks] == [(100, 100, 100), (100, 100, 100), (80, 80, 80)]


def test_load_blocks_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_blocks_file(tmp_path / "nope.txt")


def test_save_placements_csv(tmp_path):
    blocks = [Block(10, 5, 10), Block(5, 5, 10), Block(10, 10, 10)]
    Packer(10, 10, 10).fit(blocks)

    out = save_placements_csv(blocks, tmp_path / "nested" / "placements.csv")
    assert out.exists()

    df = pd.read_csv(out, index_col="block")
    assert list(df.columns) == ["x", "y", "z", "width", "height", "depth", "fit"]
    assert df["fit"].tolist() == [True, True, False]
    assert df.loc[1, ["x", "y", "z"]].tolist() == [0.0, 5.0, 0.0]
    assert np.isnan(df.loc[2, "x"])


# ---------------------------------------------------------------------------
# Examples
# ---------------------------------------------------------------------------

def test_example_names_match_catalogue():
    assert example_names() == [
        "simple", "cube", "power2", "tall", "wide", "deep", "tallwide", "oddeven", "complex",
    ]


def test_get_example_returns_copy():
    specs = get_example("simple")
    specs.append(BlockSpec(1, 1, 1))
    assert len(EXAMPLES["simple"]) == 3


def test_get_example_unknown():
    with pytest.raises(ValueError):
        get_example("pyramid")


def test_example_block_counts():
    assert len(expand_specs(get_example("cube"))) == 150
    assert len(expand_specs(get_example("power2"))) == 510
    assert len(expand_specs(get_example("complex"))) == 651


def test_save_placements_csv_timestamped_default(tmp_path, monkeypatch):
    monkeypatch.setattr("binpack3d.utils.io.DATA_OUTPUT_DIR", tmp_path / "output")
    blocks = [Block(1, 1, 1)]
    Packer(1, 1, 1).fit(blocks)

    out = save_placements_csv(blocks, prefix="run")
    assert out.parent == tmp_path / "output"
    assert out.name.startswith("run_") and out.suffix == ".csv"
    assert out.exists()
