"""
Tests for binpack3d.pipeline

Goals
-----
- Packer selection from size strings.
- run_packing sorting, reporting and validation on known inputs.
- End-to-end runs over every bundled example, for both packers.
- CLI smoke tests writing CSV and PNG outputs.
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from binpack3d.datasets import example_names, get_example
from binpack3d.geometry import Block
from binpack3d.packers import FixedBinPacker, GrowingBinPacker
from binpack3d.pipeline import build_packer, load_input_blocks, main, run_packing
from binpack3d.utils.io import expand_specs


# ---------------------------------------------------------------------------
# Packer selection
# ---------------------------------------------------------------------------

def test_build_packer_automatic():
    assert isinstance(build_packer("automatic"), GrowingBinPacker)
    assert isinstance(build_packer(" Automatic "), GrowingBinPacker)


def test_build_packer_fixed():
    packer = build_packer("10x20x30")
    assert isinstance(packer, FixedBinPacker)
    assert (packer.width, packer.height, packer.depth) == (10, 20, 30)
    assert isinstance(packer.width, int)

    packer = build_packer("2.5x1x1")
    assert packer.width == 2.5


@pytest.mark.parametrize("size", ["10x20", "10x20x30x40", "axbxc", "0x1x1", "10x-5x10", ""])
def test_build_packer_rejects_bad_sizes(size):
    with pytest.raises(ValueError):
        build_packer(size)


# ---------------------------------------------------------------------------
# run_packing
# ---------------------------------------------------------------------------

def test_run_packing_simple_example_fills_grown_bin():
    blocks = expand_specs(get_example("simple"))
    run = run_packing(blocks, size="automatic", sort="maxside")

    assert run.bin_size == (500, 400, 50)
    assert run.report.fill_ratio == 100
    assert run.report.unfit == []
    assert run.validate()
    # The large slab is packed first
    assert run.blocks[0].extent == (500, 200, 50)
    assert run.placements[1].as_tuple() == (0, 200, 0)


def test_run_packing_keeps_input_order():
    blocks = [Block(1, 1, 1), Block(3, 3, 3), Block(2, 2, 2)]
    run = run_packing(blocks, size="10x10x10", sort="volume")

    assert [b.extent for b in blocks] == [(1, 1, 1), (3, 3, 3), (2, 2, 2)]
    assert [b.extent for b in run.blocks] == [(3, 3, 3), (2, 2, 2), (1, 1, 1)]
    # Placements are also visible through the caller's block objects
    assert blocks[1].fit is not None and blocks[1].fit.as_tuple() == (0, 0, 0)


def test_run_packing_reports_unfit_in_fixed_bin():
    blocks = [Block(10, 10, 10), Block(6, 6, 6)]
    run = run_packing(blocks, size="10x10x10", sort="none")
    assert run.placements[1] is None
    assert run.report.unfit == ["6x6x6"]
    assert run.validate()


def test_load_input_blocks_defaults_to_simple():
    assert len(load_input_blocks()) == 22


@pytest.mark.integration
@pytest.mark.parametrize("size", ["automatic", "500x500x500"])
@pytest.mark.parametrize("name", example_names())
def test_examples_pack_validly(name, size):
    blocks = expand_specs(get_example(name))
    run = run_packing(blocks, size=size, sort="maxside")

    assert run.validate()
    assert 0 <= run.report.fill_ratio <= 100
    assert run.report.fitted_count + run.report.unfit_count == len(blocks)
    if size == "automatic":
        # Largest-first input never defeats the growth heuristic on these sets
        assert run.report.unfit == []


@pytest.mark.integration
def test_examples_are_deterministic():
    first = run_packing(expand_specs(get_example("oddeven")), sort="area")
    second = run_packing(expand_specs(get_example("oddeven")), sort="area")
    assert first.placements == second.placements
    assert first.bin_size == second.bin_size


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def test_main_writes_csv_and_validates(tmp_path, capsys):
    out_csv = tmp_path / "cube.csv"
    main(["--example", "cube", "--output", str(out_csv), "--validate"])

    out = capsys.readouterr().out
    assert "[pack] Packer: GrowingBinPacker" in out
    assert "[pack] Validation: OK" in out
    df = pd.read_csv(out_csv, index_col="block")
    assert len(df) == 150
    assert df["fit"].all()


def test_main_from_blocks_file_with_plot(tmp_path, capsys):
    blocks_file = tmp_path / "blocks.txt"
    blocks_file.write_text("40x40x40\n20x20x20x4\n50x1x1\n", encoding="utf-8")
    plot_path = tmp_path / "plots" / "packing.png"

    main([
        "--blocks-file", str(blocks_file),
        "--size", "40x40x40",
        "--plot", str(plot_path),
        "--palette", "gray",
    ])

    out = capsys.readouterr().out
    assert "Did not fit (5)" in out
    assert plot_path.exists()


def test_main_benchmark(capsys):
    main(["--example", "tallwide", "--benchmark", "2"])
    assert "[pack] Benchmark: GrowingBinPacker x2, 6 blocks" in capsys.readouterr().out


def test_main_bad_size_exits():
    with pytest.raises(SystemExit):
        main(["--example", "cube", "--size", "10x10"])


def test_main_missing_blocks_file_exits(tmp_path):
    with pytest.raises(SystemExit):
        main(["--blocks-file", str(tmp_path / "missing.txt")])
