#!/usr/bin/env python
"""
CLI helper to pack a block list and report the result.

This script is a thin wrapper around the library entry point:

- binpack3d.pipeline.main

Typical usage from the project root
-----------------------------------

    python scripts/pack_blocks.py
    python scripts/pack_blocks.py --example power2 --sort volume
    python scripts/pack_blocks.py --blocks-file data/blocks/crates.txt --size 500x500x500
    python scripts/pack_blocks.py --example complex --output data/output/complex.csv --plot data/output/complex.png
    python scripts/pack_blocks.py --example cube --validate --benchmark 10

The script automatically adds `src/` to PYTHONPATH so that it can import the
`binpack3d` package without requiring installation.
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Optional, List


def _ensure_src_on_path() -> Path:
    """
    Ensure that <project_root>/src is on sys.path and return project_root.

    Assumes this file lives in <project_root>/scripts/pack_blocks.py.
    """
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))
    return project_root


def main(argv: Optional[List[str]] = None) -> None:
    project_root = _ensure_src_on_path()

    # Import after path configuration
    from binpack3d.pipeline import main as pipeline_main

    print(f"[pack_blocks] Project root: {project_root}")
    pipeline_main(argv)


if __name__ == "__main__":
    main()
