"""
Communication matrix accumulation.

Builds the N x N byte-volume matrix of a 27-point stencil exchange by
summing message sizes over every valid neighbor relationship.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Mapping, Tuple, Union

import numpy as np

from ..config import NeighborClass
from .cube import Cube
from .neighbors import enumerate_neighbors


class SparseCommMatrix:
    """
    Communication matrix stored as {(src, dst): bytes}.

    Unset entries read as zero. Rows and shape behave like the dense
    array so the writer accepts either form.
    """

    def __init__(self, num_nodes: int):
        self.num_nodes = num_nodes
        self._entries: Dict[Tuple[int, int], int] = {}
        # src -> {dst: bytes}, kept in step with _entries
        self._by_src: Dict[int, Dict[int, int]] = {}

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.num_nodes, self.num_nodes)

    def add(self, src: int, dst: int, num_bytes: int) -> None:
        """Accumulate bytes on the (src, dst) entry."""
        key = (src, dst)
        self._entries[key] = self._entries.get(key, 0) + num_bytes
        self._by_src.setdefault(src, {})[dst] = self._entries[key]

    def get(self, src: int, dst: int) -> int:
        return self._entries.get((src, dst), 0)

    def items(self) -> Iterator[Tuple[Tuple[int, int], int]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        """Number of stored (non-zero) entries."""
        return len(self._entries)

    def __getitem__(self, src: int) -> np.ndarray:
        """Dense row for a source node."""
        row = np.zeros(self.num_nodes, dtype=np.int64)
        for d, num_bytes in self._by_src.get(src, {}).items():
            row[d] = num_bytes
        return row

    def rows(self) -> Iterator[np.ndarray]:
        """Iterate dense rows in source order."""
        for src in range(self.num_nodes):
            yield self[src]

    def to_dense(self) -> np.ndarray:
        matrix = np.zeros(self.shape, dtype=np.int64)
        for (s, d), num_bytes in self._entries.items():
            matrix[s, d] = num_bytes
        return matrix


CommMatrix = Union[np.ndarray, SparseCommMatrix]


def _accumulate(
    cube: Cube,
    msg_sizes: Mapping[NeighborClass, int],
    add: Callable[[int, int, int], None],
    verbosity: int,
) -> None:
    """Single pass over every node and each of its valid neighbors."""
    for x, y, z in cube.coords():
        me = cube.id(x, y, z)
        if verbosity > 1:
            print(f"Node -> [{x},{y},{z}] -> {me}")
        for nb in enumerate_neighbors(cube, x, y, z):
            if verbosity > 1:
                nx, ny, nz = nb.coord
                print(f"  {nb.neighbor_class.label} {nb.label} -> [{nx},{ny},{nz}] -> {nb.node_id}")
            add(me, nb.node_id, msg_sizes[nb.neighbor_class])


def build_comm_matrix(
    cube: Cube,
    msg_sizes: Mapping[NeighborClass, int],
    verbosity: int = 0,
) -> np.ndarray:
    """
    Build the dense byte matrix.

    Args:
        cube: Grid of nodes.
        msg_sizes: Message size in bytes per neighbor class.
        verbosity: Print per-node/per-neighbor trace when > 1.

    Returns:
        int64 array, entry [i, j] = bytes node i sends to node j.
    """
    matrix = np.zeros((cube.num_nodes, cube.num_nodes), dtype=np.int64)

    def add(src: int, dst: int, num_bytes: int) -> None:
        matrix[src, dst] += num_bytes

    _accumulate(cube, msg_sizes, add, verbosity)
    return matrix


def build_sparse_comm_matrix(
    cube: Cube,
    msg_sizes: Mapping[NeighborClass, int],
    verbosity: int = 0,
) -> SparseCommMatrix:
    """Build the byte matrix as a SparseCommMatrix (at most 26 entries per row)."""
    matrix = SparseCommMatrix(cube.num_nodes)
    _accumulate(cube, msg_sizes, matrix.add, verbosity)
    return matrix


@dataclass
class MatrixStats:
    """Summary of a communication matrix."""
    num_nodes: int = 0
    nonzero_entries: int = 0
    total_bytes: int = 0
    max_row_bytes: int = 0
    symmetric: bool = True

    @classmethod
    def from_matrix(cls, matrix: CommMatrix) -> "MatrixStats":
        """Collect stats from a dense or sparse matrix."""
        if isinstance(matrix, SparseCommMatrix):
            row_bytes: Dict[int, int] = {}
            symmetric = True
            for (s, d), num_bytes in matrix.items():
                row_bytes[s] = row_bytes.get(s, 0) + num_bytes
                if matrix.get(d, s) != num_bytes:
                    symmetric = False
            return cls(
                num_nodes=matrix.num_nodes,
                nonzero_entries=sum(1 for _, v in matrix.items() if v != 0),
                total_bytes=sum(row_bytes.values()),
                max_row_bytes=max(row_bytes.values(), default=0),
                symmetric=symmetric,
            )

        return cls(
            num_nodes=matrix.shape[0],
            nonzero_entries=int(np.count_nonzero(matrix)),
            total_bytes=int(matrix.sum()),
            max_row_bytes=int(matrix.sum(axis=1).max()) if matrix.size else 0,
            symmetric=bool(np.array_equal(matrix, matrix.T)),
        )

    def summary(self) -> str:
        return (
            f"nodes={self.num_nodes} nonzero={self.nonzero_entries} "
            f"total_bytes={self.total_bytes} max_row_bytes={self.max_row_bytes} "
            f"symmetric={self.symmetric}"
        )
