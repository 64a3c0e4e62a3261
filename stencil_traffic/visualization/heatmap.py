"""
Traffic Matrix Heatmap Visualization.

Displays the source x destination flit matrix as a color-coded heatmap.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure


@dataclass
class TrafficHeatmapConfig:
    """Configuration for traffic matrix heatmap visualization."""

    title: str = "Stencil Traffic Matrix"
    cmap: str = "YlOrRd"
    show_colorbar: bool = True
    colorbar_label: str = "Flits"
    figsize: Tuple[int, int] = (8, 7)
    # Annotate cells only when the matrix is at most this many nodes wide
    annotate_max_nodes: int = 16
    value_format: str = "{:.0f}"
    xlabel: str = "Destination node"
    ylabel: str = "Source node"


def plot_traffic_heatmap(
    matrix: np.ndarray,
    config: Optional[TrafficHeatmapConfig] = None,
    save_path: Optional[str] = None,
) -> Figure:
    """
    Plot a communication matrix heatmap.

    Args:
        matrix: Square flit (or byte) matrix.
        config: Visualization configuration.
        save_path: Optional path to save the figure.

    Returns:
        Matplotlib Figure object.
    """
    if config is None:
        config = TrafficHeatmapConfig()

    matrix = np.asarray(matrix)
    n = matrix.shape[0]
    vmax = max(1, int(matrix.max())) if matrix.size else 1

    fig, ax = plt.subplots(figsize=config.figsize)

    im = ax.imshow(
        matrix,
        cmap=config.cmap,
        aspect='equal',
        origin='upper',  # Row 0 (node 0) at top, as in the text file
        vmin=0,
        vmax=vmax,
        interpolation='nearest',
    )

    if config.show_colorbar:
        fig.colorbar(im, ax=ax, label=config.colorbar_label)

    if n <= config.annotate_max_nodes:
        for src in range(n):
            for dst in range(n):
                value = matrix[src, dst]
                color = 'white' if value > vmax * 0.6 else 'black'
                ax.text(
                    dst, src, config.value_format.format(value),
                    ha='center', va='center',
                    color=color, fontsize=8,
                )
        ax.set_xticks(range(n))
        ax.set_yticks(range(n))

    ax.set_title(f"{config.title} ({n} nodes)", fontsize=14, fontweight='bold')
    ax.set_xlabel(config.xlabel)
    ax.set_ylabel(config.ylabel)

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig
