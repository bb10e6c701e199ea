"""
Utility helpers for the binpack3d project.

This package is intended for small, reusable helpers that don't naturally
belong in `geometry`, `evaluation`, or `packers`:

- Block list text format and CSV output (`io.py`)
- Packing timers and benchmarks (`timing.py`)
- matplotlib rendering of packings (`plotting.py`)

Keeping them here avoids cluttering the main modules and keeps imports tidy.
"""

__all__ = []
