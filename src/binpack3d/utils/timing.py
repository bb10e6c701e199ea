"""
Timing helpers for the binpack3d project.

- `Timer`: context manager around a packing call; prints the elapsed time
  and, when told how many blocks were packed, the throughput.
- `benchmark_packer`: pack the same block list with fresh packers several
  times and summarize the timings as a `PackingBenchmark`.

    from binpack3d.packers import GrowingBinPacker
    from binpack3d.utils.timing import benchmark_packer

    result = benchmark_packer(GrowingBinPacker, blocks, repeats=10)
    print(result.summary())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

import statistics
import time


# ---------------------------------------------------------------------------
# Context-manager timer
# ---------------------------------------------------------------------------

@dataclass
class Timer:
    """
    Time a block of code, usually one `fit` call.

        with Timer("pack", count=len(blocks)):
            packer.fit(blocks)

    prints `[Timer] pack: 0.0123 s (1789 blocks/s)`.

    Attributes
    ----------
    name:
        Label printed on exit.
    count:
        Number of blocks handled inside the context, used for `rate`.
    verbose:
        If False, nothing is printed; `elapsed` is still recorded.
    """

    name: Optional[str] = None
    count: Optional[int] = None
    verbose: bool = True
    elapsed: float = field(default=0.0, init=False)
    _start: float = field(default=0.0, init=False, repr=False)

    @property
    def rate(self) -> Optional[float]:
        """Blocks per second, or None without a count or a measurable time."""
        if self.count is None or self.elapsed <= 0:
            return None
        return self.count / self.elapsed

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.elapsed = time.perf_counter() - self._start
        if not self.verbose:
            return
        line = f"[Timer] {self.name or 'elapsed'}: {self.elapsed:.4f} s"
        if self.rate is not None:
            line += f" ({self.rate:.0f} blocks/s)"
        print(line)


# ---------------------------------------------------------------------------
# Packing benchmark
# ---------------------------------------------------------------------------

@dataclass
class PackingBenchmark:
    """
    Wall-clock timings of repeated packings of one block list.
    """

    packer: str
    n_blocks: int
    times: List[float]

    @property
    def repeats(self) -> int:
        return len(self.times)

    @property
    def best(self) -> float:
        return min(self.times)

    @property
    def mean(self) -> float:
        return statistics.mean(self.times)

    @property
    def worst(self) -> float:
        return max(self.times)

    @property
    def blocks_per_second(self) -> float:
        # Based on the best run; inf if the clock could not resolve it.
        return self.n_blocks / self.best if self.best > 0 else float("inf")

    def summary(self) -> str:
        return (
            f"{self.packer} x{self.repeats}, {self.n_blocks} blocks: "
            f"best={self.best:.4f}s mean={self.mean:.4f}s worst={self.worst:.4f}s "
            f"({self.blocks_per_second:.0f} blocks/s)"
        )


def benchmark_packer(
    make_packer: Callable[[], object],
    blocks: Sequence,
    repeats: int = 5,
    warmup: int = 1,
) -> PackingBenchmark:
    """
    Pack `blocks` with a new packer from `make_packer()` on every run.

    `warmup` runs are discarded. Each run rewrites `block.fit` with the
    same placements, since packing is deterministic.

    Raises
    ------
    ValueError
        If `repeats` is less than 1.
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")

    name = None
    times: List[float] = []
    for run in range(warmup + repeats):
        packer = make_packer()
        name = type(packer).__name__
        with Timer(verbose=False) as timer:
            packer.fit(blocks)
        if run >= warmup:
            times.append(timer.elapsed)

    return PackingBenchmark(packer=name, n_blocks=len(blocks), times=times)


__all__ = [
    "Timer",
    "PackingBenchmark",
    "benchmark_packer",
]
