"""
Traffic generator for 27-point stencil (halo exchange) workloads.

Every node sends one message to each of its face, edge and corner
neighbors. The result is an N x N byte matrix and its flit quantization.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np

from ..config import NeighborClass, StencilConfig
from ..core.cube import Cube
from ..core.flit import quantize_matrix
from ..core.matrix import (
    CommMatrix,
    build_comm_matrix,
    build_sparse_comm_matrix,
)
from ..core.neighbors import Neighbor, enumerate_neighbors


class StencilTrafficGenerator:
    """
    Generate the communication matrix of a 27-point stencil.

    Neighbor classes:
    - FACE: one axis moves (up to 6)
    - EDGE: two axes move (up to 12)
    - CORNER: three axes move (up to 8)
    """

    def __init__(self, config: StencilConfig):
        """
        Initialize generator.

        Args:
            config: Validated stencil configuration.
        """
        self.config = config
        self.cube = Cube(config.x_nodes, config.y_nodes, config.z_nodes)
        self.num_nodes = self.cube.num_nodes

    def neighbors(self, x: int, y: int, z: int) -> List[Neighbor]:
        """Valid neighbors of node (x, y, z)."""
        return enumerate_neighbors(self.cube, x, y, z)

    def relationship_counts(self) -> Dict[NeighborClass, int]:
        """Total number of directed relationships per neighbor class."""
        counts = {cls: 0 for cls in NeighborClass}
        for x, y, z in self.cube.coords():
            for nb in self.neighbors(x, y, z):
                counts[nb.neighbor_class] += 1
        return counts

    def generate(self, sparse: bool = False) -> CommMatrix:
        """
        Build the byte matrix.

        Args:
            sparse: Return a SparseCommMatrix instead of a dense array.

        Returns:
            Byte matrix, entry [i][j] = bytes node i sends to node j.
        """
        if self.config.verbosity > 0:
            print("Configuring communication groups for halo exchange")

        builder = build_sparse_comm_matrix if sparse else build_comm_matrix
        return builder(
            self.cube,
            self.config.message_sizes,
            verbosity=self.config.verbosity,
        )

    def generate_flits(self) -> np.ndarray:
        """Build the dense matrix quantized to flits."""
        return quantize_matrix(self.generate(), self.config.bytes_per_flit)

    def print_pattern(self) -> None:
        """Print neighbor relationships for debugging."""
        counts = self.relationship_counts()
        print(f"Stencil Pattern {self.cube} ({self.num_nodes} nodes):")
        print("-" * 50)
        for cls in NeighborClass:
            size = self.config.message_sizes[cls]
            print(f"  {cls.label:<6} relationships: {counts[cls]:6d} x {size} bytes")
        print("-" * 50)
