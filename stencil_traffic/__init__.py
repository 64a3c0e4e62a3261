"""
Stencil traffic matrix generator.

Builds the node-to-node communication matrix of a 27-point stencil
workload on a 3D grid and writes it as flit counts for network simulators.

Modules:
  - config: StencilConfig, NeighborClass, YAML loading
  - core: Cube mapping, neighbor table, matrix accumulation, flit quantization
  - traffic: StencilTrafficGenerator
  - io: Flit matrix file writer/reader
  - visualization: Matrix heatmap (imported on demand, needs matplotlib)
"""

from .config import NeighborClass, StencilConfig, load_stencil_config
from .core import (
    Cube,
    bytes_to_flits,
    quantize_matrix,
    enumerate_neighbors,
    build_comm_matrix,
    build_sparse_comm_matrix,
    SparseCommMatrix,
    MatrixStats,
)
from .traffic import StencilTrafficGenerator
from .io import write_flit_matrix, read_flit_matrix

__version__ = "1.0.0"

__all__ = [
    "NeighborClass",
    "StencilConfig",
    "load_stencil_config",
    "Cube",
    "bytes_to_flits",
    "quantize_matrix",
    "enumerate_neighbors",
    "build_comm_matrix",
    "build_sparse_comm_matrix",
    "SparseCommMatrix",
    "MatrixStats",
    "StencilTrafficGenerator",
    "write_flit_matrix",
    "read_flit_matrix",
]
