"""
Stencil Traffic Visualization.

- plot_traffic_heatmap: Source x destination flit matrix heatmap
"""

from .heatmap import (
    TrafficHeatmapConfig,
    plot_traffic_heatmap,
)

__all__ = [
    "TrafficHeatmapConfig",
    "plot_traffic_heatmap",
]
