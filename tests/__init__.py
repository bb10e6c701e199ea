"""
Test package for the binpack3d project.

This directory collects unit and integration tests for the core modules:

- Free-space tree search / split (`test_tree.py`)
- Fixed and growing packers (`test_packers.py`)
- Sort orders (`test_sorting.py`)
- Text format and CSV output (`test_io.py`)
- Reporting and validation (`test_evaluation.py`)
- Plotting and timing helpers (`test_utils.py`)
- End-to-end pipeline and CLI (`test_pipeline.py`)

You can run tests with:

    pytest
    # or
    python -m pytest

from the project root.
"""

__all__ = []
