"""
I/O utilities for the binpack3d project.

This module centralizes the text and file formats around the packers:

- The block list text format, one entry per line:

      WIDTHxHEIGHTxDEPTH[xCOUNT]

  e.g. "500x200x50" or "50x50x50x20". Blank lines and lines starting with
  '#' are ignored.
- Loading block lists from disk.
- Writing placement tables as CSV.

Typical usage
-------------

    from binpack3d.utils.io import deserialize_blocks, save_placements_csv

    blocks = deserialize_blocks("100x100x100x2\\n80x80x80\\n")
    Packer(500, 500, 500).fit(blocks)
    csv_path = save_placements_csv(blocks)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

import datetime as dt

from ..config import DATA_OUTPUT_DIR, DIMENSION_SEPARATOR
from ..evaluation import placements_df
from ..geometry import Block, validate_extent


PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Block specs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BlockSpec:
    """
    `count` identical blocks of size (width, height, depth).
    """

    width: float
    height: float
    depth: float
    count: int = 1

    def __post_init__(self) -> None:
        validate_extent(self.width, self.height, self.depth)
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 1:
            raise ValueError(f"block count must be a positive integer, got {self.count!r}")

    def expand(self) -> List[Block]:
        return [Block(self.width, self.height, self.depth) for _ in range(self.count)]


def expand_specs(specs: Iterable[BlockSpec]) -> List[Block]:
    """
    Turn specs into individual `Block` objects, repeating each `count` times.
    """
    blocks: List[Block] = []
    for spec in specs:
        blocks.extend(spec.expand())
    return blocks


# ---------------------------------------------------------------------------
# Text format
# ---------------------------------------------------------------------------

def _parse_number(token: str):
    token = token.strip()
    try:
        return int(token)
    except ValueError:
        return float(token)


def parse_blocks(text: str) -> List[BlockSpec]:
    """
    Parse the block list text format into specs.

    Raises
    ------
    ValueError
        If a non-blank line is not of the form WxHxD or WxHxDxN, or holds a
        non-positive dimension. The message names the offending line.
    """
    specs: List[BlockSpec] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.lower().split(DIMENSION_SEPARATOR)
        if len(parts) not in (3, 4):
            raise ValueError(
                f"Line {lineno}: expected 'WxHxD' or 'WxHxDxN', got {raw!r}"
            )
        try:
            w, h, d = (_parse_number(p) for p in parts[:3])
            count = int(parts[3]) if len(parts) == 4 else 1
            specs.append(BlockSpec(w, h, d, count))
        except ValueError as exc:
            raise ValueError(f"Line {lineno}: invalid block {raw!r}: {exc}") from exc

    return specs


def deserialize_blocks(text: str) -> List[Block]:
    """
    Parse the text format and expand it into individual blocks.
    """
    return expand_specs(parse_blocks(text))


def serialize_specs(specs: Sequence[BlockSpec]) -> str:
    """
    Format specs in the block list text format, one per line.

    The count is only written when it is greater than one.
    """
    sep = DIMENSION_SEPARATOR
    lines = []
    for spec in specs:
        line = f"{spec.width}{sep}{spec.height}{sep}{spec.depth}"
        if spec.count > 1:
            line += f"{sep}{spec.count}"
        lines.append(line + "\n")
    return "".join(lines)


# ---------------------------------------------------------------------------
# Directory helpers
# ---------------------------------------------------------------------------

def get_timestamped_output_path(
    prefix: str = "placements",
    suffix: str = ".csv",
) -> Path:
    """
    Build a timestamped path under `data/output/`.

    Example output filename:
        placements_20251126_153045.csv
    """
    DATA_OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%d_%H%M%S")
    return DATA_OUTPUT_DIR / f"{prefix}_{timestamp}{suffix}"


# ---------------------------------------------------------------------------
# Loading / saving
# ---------------------------------------------------------------------------

def load_blocks_file(path: PathLike) -> List[Block]:
    """
    Load a block list text file and expand it into blocks.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    blocks_path = Path(path)
    if not blocks_path.exists():
        raise FileNotFoundError(f"Block list not found: {blocks_path}")
    return deserialize_blocks(blocks_path.read_text(encoding="utf-8"))


def save_placements_csv(
    blocks: Sequence[Block],
    path: Optional[PathLike] = None,
    prefix: str = "placements",
) -> Path:
    """
    Write the placement table of packed blocks to CSV.

    Parameters
    ----------
    blocks:
        Blocks after a packer's `fit` call.
    path:
        Optional explicit output path. If None, a timestamped filename is
        created under `data/output/`.
    prefix:
        Filename prefix when generating a timestamped path.

    Returns
    -------
    Path
        The path to the written CSV.
    """
    if path is None:
        out_path = get_timestamped_output_path(prefix=prefix)
    else:
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)

    placements_df(blocks).to_csv(out_path, index_label="block")
    return out_path


__all__ = [
    "PathLike",
    "BlockSpec",
    "expand_specs",
    "parse_blocks",
    "deserialize_blocks",
    "serialize_specs",
    "get_timestamped_output_path",
    "load_blocks_file",
    "save_placements_csv",
]
