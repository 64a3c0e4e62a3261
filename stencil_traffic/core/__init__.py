"""Core stencil components: Cube, neighbor table, matrix, flit quantization."""

from .cube import Cube
from .flit import bytes_to_flits, quantize_matrix
from .neighbors import (
    NeighborOffset,
    Neighbor,
    NEIGHBOR_OFFSETS,
    enumerate_neighbors,
)
from .matrix import (
    SparseCommMatrix,
    MatrixStats,
    build_comm_matrix,
    build_sparse_comm_matrix,
)

__all__ = [
    "Cube",
    "bytes_to_flits",
    "quantize_matrix",
    "NeighborOffset",
    "Neighbor",
    "NEIGHBOR_OFFSETS",
    "enumerate_neighbors",
    "SparseCommMatrix",
    "MatrixStats",
    "build_comm_matrix",
    "build_sparse_comm_matrix",
]
