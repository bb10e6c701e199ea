"""
Visualization helpers for the binpack3d project.

A packing is drawn on a flat matplotlib Axes in a cheap pseudo-3D style:
each placed block is its xy rectangle, shrunk on every side by
`z * z_scale`, so blocks further along the depth axis appear smaller and
nested inside the ones in front of them. The bin boundary is drawn the same
way.

The y axis points down, as in screen coordinates.

Typical usage
-------------

    import matplotlib.pyplot as plt
    from binpack3d.utils.plotting import plot_packing

    packer.fit(blocks)
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_packing(blocks, packer.root, ax=ax, palette="vintage")
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..config import DEFAULT_PALETTE, Z_SCALE
from ..packers.tree import Node


PALETTES: Dict[str, List[str]] = {
    "pastel": ["#FFF7A5", "#FFA5E0", "#A5B3FF", "#BFFFA5", "#FFCBA5"],
    "basic": [
        "silver", "gray", "red", "maroon", "yellow", "olive", "lime",
        "green", "aqua", "teal", "blue", "navy", "fuchsia", "purple",
    ],
    "gray": [
        "#111111", "#222222", "#333333", "#444444", "#555555", "#666666", "#777777",
        "#888888", "#999999", "#AAAAAA", "#BBBBBB", "#CCCCCC", "#DDDDDD", "#EEEEEE",
    ],
    "vintage": [
        "#EFD279", "#95CBE9", "#024769", "#AFD775", "#2C5700", "#DE9D7F",
        "#7F9DDE", "#00572C", "#75D7AF", "#694702", "#E9CB95", "#79D2EF",
    ],
    "solarized": [
        "#b58900", "#cb4b16", "#dc322f", "#d33682",
        "#6c71c4", "#268bd2", "#2aa198", "#859900",
    ],
    "none": ["none"],
}


def color_for(n: int, palette: str = DEFAULT_PALETTE) -> str:
    """
    Colour for the n-th block, cycling through `palette`.
    """
    if palette not in PALETTES:
        raise ValueError(f"Unknown palette {palette!r}. Expected one of {sorted(PALETTES)}.")
    colors = PALETTES[palette]
    return colors[n % len(colors)]


def _inset_rect(x, y, z, w, h, z_scale: float, **kwargs) -> Rectangle:
    offset = z * z_scale
    return Rectangle((x + offset, y + offset), w - 2 * offset, h - 2 * offset, **kwargs)


def plot_packing(
    blocks: Sequence,
    root: Node,
    ax=None,
    palette: str = DEFAULT_PALETTE,
    z_scale: float = Z_SCALE,
    title: Optional[str] = None,
):
    """
    Plot placed blocks and the bin boundary.

    Parameters
    ----------
    blocks:
        Blocks after a packer's `fit`; unplaced blocks are skipped but still
        consume a colour, so colours stay stable across sort orders.
    root:
        The packer's root node (the bin).
    ax:
        Optional matplotlib Axes. If None, a new figure and axes are created.
    palette:
        Name of a palette in `PALETTES`.
    z_scale:
        Inset per unit of depth.
    title:
        Optional plot title.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    for n, block in enumerate(blocks):
        placement = getattr(block, "fit", None)
        if placement is None:
            continue
        ax.add_patch(
            _inset_rect(
                placement.x, placement.y, placement.z, block.width, block.height, z_scale,
                facecolor=color_for(n, palette),
                edgecolor="black",
                linewidth=0.5,
            )
        )

    ax.add_patch(
        _inset_rect(root.x, root.y, root.z, root.w, root.h, z_scale, fill=False, linewidth=1.5)
    )

    ax.set_xlim(0, max(root.w, 1))
    ax.set_ylim(max(root.h, 1), 0)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    if title is not None:
        ax.set_title(title)

    return ax


def save_packing_plot(blocks: Sequence, root: Node, path, **kwargs):
    """
    Render `plot_packing` into a new figure and save it to `path`.

    Returns the path written.
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_packing(blocks, root, ax=ax, **kwargs)
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path


__all__ = [
    "PALETTES",
    "color_for",
    "plot_packing",
    "save_packing_plot",
]
