"""
High-level packing pipeline for the binpack3d project.

This module glues together:

- Block input, either a named example from `binpack3d.datasets` or a block
  list file (`binpack3d.utils.io`).
- A sort order from `binpack3d.sorting`.
- A packer chosen by bin size: "automatic" for the growing packer, or
  "WxHxD" for a fixed bin.
- Reporting and validation from `binpack3d.evaluation`.

It exposes functions to run a packing in memory and a small CLI:

    python -m binpack3d.pipeline --example complex --sort maxside
    python -m binpack3d.pipeline --blocks-file my_blocks.txt --size 500x500x500 --output out.csv
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .config import (
    AUTOMATIC_SIZE,
    DEFAULT_EXAMPLE,
    DEFAULT_PALETTE,
    DEFAULT_SIZE,
    DEFAULT_SORT,
    DIMENSION_SEPARATOR,
)
from .datasets import example_names, get_example
from .evaluation import PackingReport, all_within_bin, check_partition, has_any_overlap, report
from .geometry import Block, Placement
from .packers import FixedBinPacker, GrowingBinPacker
from .sorting import SORT_ORDERS, sort_blocks
from .utils.io import expand_specs, load_blocks_file, save_placements_csv
from .utils.timing import Timer, benchmark_packer

AnyPacker = Union[FixedBinPacker, GrowingBinPacker]


# ---------------------------------------------------------------------------
# Packer selection
# ---------------------------------------------------------------------------

def build_packer(size: str = DEFAULT_SIZE) -> AnyPacker:
    """
    Build a packer from a size string.

    - "automatic" -> GrowingBinPacker
    - "WxHxD"     -> FixedBinPacker(W, H, D)

    Raises
    ------
    ValueError
        If the size string is neither.
    """
    if size.strip().lower() == AUTOMATIC_SIZE:
        return GrowingBinPacker()

    parts = size.lower().split(DIMENSION_SEPARATOR)
    if len(parts) != 3:
        raise ValueError(f"Bin size must be '{AUTOMATIC_SIZE}' or 'WxHxD', got {size!r}")
    try:
        dims = [float(p) for p in parts]
    except ValueError as exc:
        raise ValueError(f"Bin size must be '{AUTOMATIC_SIZE}' or 'WxHxD', got {size!r}") from exc
    dims = [int(v) if v.is_integer() else v for v in dims]
    return FixedBinPacker(*dims)


# ---------------------------------------------------------------------------
# Running a packing
# ---------------------------------------------------------------------------

@dataclass
class PackingRun:
    """
    Result of `run_packing`.

    - blocks: the blocks in the order they were packed, each with `.fit` set
    - packer: the packer used; `packer.root` is the final bin
    - placements: placements aligned with `blocks`
    - report: fill ratio and unfit blocks
    """

    blocks: List[Block]
    packer: AnyPacker
    placements: List[Optional[Placement]]
    report: PackingReport

    @property
    def bin_size(self):
        root = self.packer.root
        return (root.w, root.h, root.d)

    def validate(self) -> bool:
        """Overlap, containment and free-space partition checks."""
        root = self.packer.root
        return (
            not has_any_overlap(self.blocks)
            and all_within_bin(self.blocks, root)
            and check_partition(root, self.blocks)
        )


def run_packing(
    blocks: Sequence[Block],
    size: str = DEFAULT_SIZE,
    sort: str = DEFAULT_SORT,
    seed: Optional[int] = None,
) -> PackingRun:
    """
    Sort `blocks`, pack them, and report on the result.

    The input sequence itself is not reordered; the sorted copy is returned
    in `PackingRun.blocks`. The block objects are shared, so their `.fit`
    attributes are updated.
    """
    packer = build_packer(size)
    ordered = sort_blocks(blocks, sort, seed=seed)
    placements = packer.fit(ordered)
    return PackingRun(
        blocks=ordered,
        packer=packer,
        placements=placements,
        report=report(ordered, packer.root),
    )


def load_input_blocks(example: Optional[str] = None, blocks_file: Optional[Path] = None) -> List[Block]:
    """
    Blocks from a block list file if given, otherwise from a named example.
    """
    if blocks_file is not None:
        return load_blocks_file(blocks_file)
    return expand_specs(get_example(example or DEFAULT_EXAMPLE))


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    from .utils.plotting import PALETTES

    parser = argparse.ArgumentParser(
        description="Pack blocks into a 3D bin with the binary-tree heuristic.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--example",
        choices=example_names(),
        default=None,
        help=f"Named example block set (default: {DEFAULT_EXAMPLE}).",
    )
    source.add_argument(
        "--blocks-file",
        type=str,
        default=None,
        help="Text file with one 'WxHxD[xN]' block per line.",
    )
    parser.add_argument(
        "--size",
        type=str,
        default=DEFAULT_SIZE,
        help=f"Bin size 'WxHxD', or '{AUTOMATIC_SIZE}' to grow the bin (default).",
    )
    parser.add_argument(
        "--sort",
        choices=list(SORT_ORDERS),
        default=DEFAULT_SORT,
        help=f"Sort order applied before packing (default: {DEFAULT_SORT}).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the 'random' sort order (optional).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional CSV path for the placement table.",
    )
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Optional image path for a rendering of the packing.",
    )
    parser.add_argument(
        "--palette",
        choices=sorted(PALETTES),
        default=DEFAULT_PALETTE,
        help="Colour palette for --plot.",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check for overlaps, containment and free-space consistency after packing.",
    )
    parser.add_argument(
        "--benchmark",
        type=int,
        default=0,
        metavar="N",
        help="Time N repeated packings of the same input.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = _parse_args(argv)

    blocks_file = Path(args.blocks_file) if args.blocks_file is not None else None
    try:
        blocks = load_input_blocks(args.example, blocks_file)
        with Timer("pack", count=len(blocks)):
            run = run_packing(blocks, size=args.size, sort=args.sort, seed=args.seed)
    except (ValueError, FileNotFoundError) as exc:
        raise SystemExit(f"[pack] {exc}") from exc

    w, h, d = run.bin_size
    print(f"[pack] Packer: {type(run.packer).__name__}")
    print(f"[pack] Blocks: {len(run.blocks)}")
    print(f"[pack] Bin: {w}x{h}x{d}")
    print(f"[pack] {run.report.summary()}")

    if args.validate:
        ok = run.validate()
        print(f"[pack] Validation: {'OK' if ok else 'FAILED'}")
        if not ok:
            raise SystemExit(1)

    if args.benchmark > 0:
        result = benchmark_packer(lambda: build_packer(args.size), run.blocks, repeats=args.benchmark)
        print(f"[pack] Benchmark: {result.summary()}")

    if args.output is not None:
        out_path = save_placements_csv(run.blocks, args.output)
        print(f"[pack] Placements written to: {out_path}")

    if args.plot is not None:
        from .utils.plotting import save_packing_plot

        plot_path = Path(args.plot)
        plot_path.parent.mkdir(parents=True, exist_ok=True)
        save_packing_plot(run.blocks, run.packer.root, plot_path, palette=args.palette)
        print(f"[pack] Plot written to: {plot_path}")


if __name__ == "__main__":
    main()
