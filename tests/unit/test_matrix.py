"""
Tests for communication matrix accumulation.

Tests cover:
1. Dense matrix: symmetry, zero diagonal, row volumes
2. Per-class relationship totals
3. SparseCommMatrix equivalence with the dense form
4. MatrixStats summary
"""

import numpy as np
import pytest

from stencil_traffic.config import NeighborClass
from stencil_traffic.core.cube import Cube
from stencil_traffic.core.matrix import (
    MatrixStats,
    SparseCommMatrix,
    build_comm_matrix,
    build_sparse_comm_matrix,
)


SIZES = {
    NeighborClass.FACE: 100,
    NeighborClass.EDGE: 10,
    NeighborClass.CORNER: 1,
}


class TestDenseMatrix:
    """Test dense matrix construction."""

    def test_two_node_line(self):
        """Two nodes along x exchange one face message each way."""
        matrix = build_comm_matrix(Cube(2, 1, 1), SIZES)
        assert matrix.tolist() == [[0, 100], [100, 0]]

    @pytest.mark.parametrize("dims", [(3, 3, 3), (4, 3, 2), (2, 2, 1), (1, 1, 5)])
    def test_symmetric_with_zero_diagonal(self, dims):
        """matrix[i][j] == matrix[j][i] and matrix[i][i] == 0."""
        matrix = build_comm_matrix(Cube(*dims), SIZES)
        assert np.array_equal(matrix, matrix.T)
        assert not np.any(np.diag(matrix))

    def test_interior_row_volume(self, cube_3x3x3):
        """Interior node sends 6 face + 12 edge + 8 corner messages."""
        matrix = build_comm_matrix(cube_3x3x3, SIZES)
        center = cube_3x3x3.id(1, 1, 1)
        assert matrix[center].sum() == 6 * 100 + 12 * 10 + 8 * 1
        assert np.count_nonzero(matrix[center]) == 26

    def test_corner_row_volume(self, cube_3x3x3):
        """Grid corner sends 3 face + 3 edge + 1 corner messages."""
        matrix = build_comm_matrix(cube_3x3x3, SIZES)
        assert matrix[0].sum() == 3 * 100 + 3 * 10 + 1

    def test_total_volume(self, cube_3x3x3):
        """3x3x3 grid: 108 face, 144 edge, 64 corner relationships."""
        matrix = build_comm_matrix(cube_3x3x3, SIZES)
        assert matrix.sum() == 108 * 100 + 144 * 10 + 64 * 1
        assert np.count_nonzero(matrix) == 316

    def test_entries_use_class_size(self, cube_3x3x3):
        """Entry value depends on the neighbor class of the pair."""
        matrix = build_comm_matrix(cube_3x3x3, SIZES)
        me = cube_3x3x3.id(1, 1, 1)
        assert matrix[me, cube_3x3x3.id(2, 1, 1)] == 100
        assert matrix[me, cube_3x3x3.id(2, 2, 1)] == 10
        assert matrix[me, cube_3x3x3.id(2, 2, 2)] == 1

    def test_flat_grid_has_no_corner_traffic(self):
        """2x2x1: faces and edges only, no corner size anywhere."""
        sizes = {NeighborClass.FACE: 3, NeighborClass.EDGE: 5, NeighborClass.CORNER: 7}
        matrix = build_comm_matrix(Cube(2, 2, 1), sizes)
        assert set(np.unique(matrix).tolist()) == {0, 3, 5}
        assert (matrix == 3).sum() == 8
        assert (matrix == 5).sum() == 4

    def test_trace_output(self, capsys):
        """verbosity > 1 prints per-node and per-neighbor lines."""
        build_comm_matrix(Cube(2, 1, 1), SIZES, verbosity=2)
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Node -> [0,0,0] -> 0",
            "  Face +x -> [1,0,0] -> 1",
            "Node -> [1,0,0] -> 1",
            "  Face -x -> [0,0,0] -> 0",
        ]

    def test_quiet_by_default(self, capsys):
        build_comm_matrix(Cube(2, 2, 2), SIZES)
        assert capsys.readouterr().out == ""


class TestSparseMatrix:
    """Test SparseCommMatrix."""

    def test_matches_dense(self, cube_4x3x2):
        """Sparse and dense accumulation agree."""
        dense = build_comm_matrix(cube_4x3x2, SIZES)
        sparse = build_sparse_comm_matrix(cube_4x3x2, SIZES)
        assert sparse.shape == dense.shape
        assert np.array_equal(sparse.to_dense(), dense)
        assert len(sparse) == np.count_nonzero(dense)

    def test_rows_match_dense(self, cube_3x3x3):
        """rows() and indexing yield dense rows."""
        dense = build_comm_matrix(cube_3x3x3, SIZES)
        sparse = build_sparse_comm_matrix(cube_3x3x3, SIZES)
        for i, row in enumerate(sparse.rows()):
            assert np.array_equal(row, dense[i])
        assert np.array_equal(sparse[13], dense[13])

    def test_row_lookup_tracks_accumulation(self):
        """Row indexing reflects every add on that source only."""
        sparse = SparseCommMatrix(4)
        sparse.add(1, 2, 5)
        sparse.add(2, 1, 9)
        sparse.add(1, 2, 3)
        sparse.add(1, 0, 1)
        assert sparse[1].tolist() == [1, 0, 8, 0]
        assert sparse[2].tolist() == [0, 9, 0, 0]
        assert [row.tolist() for row in sparse.rows()] == [
            [0, 0, 0, 0], [1, 0, 8, 0], [0, 9, 0, 0], [0, 0, 0, 0],
        ]

    def test_unset_entries_read_zero(self):
        sparse = SparseCommMatrix(3)
        sparse.add(0, 1, 5)
        sparse.add(0, 1, 2)
        assert sparse.get(0, 1) == 7
        assert sparse.get(1, 0) == 0
        assert sparse[2].tolist() == [0, 0, 0]


class TestMatrixStats:
    """Test MatrixStats."""

    def test_two_node_line(self):
        stats = MatrixStats.from_matrix(build_comm_matrix(Cube(2, 1, 1), SIZES))
        assert stats.num_nodes == 2
        assert stats.nonzero_entries == 2
        assert stats.total_bytes == 200
        assert stats.max_row_bytes == 100
        assert stats.symmetric is True

    def test_sparse_and_dense_agree(self, cube_4x3x2):
        dense = MatrixStats.from_matrix(build_comm_matrix(cube_4x3x2, SIZES))
        sparse = MatrixStats.from_matrix(build_sparse_comm_matrix(cube_4x3x2, SIZES))
        assert dense == sparse

    def test_detects_asymmetry(self):
        """A one-way entry is reported as not symmetric."""
        matrix = np.array([[0, 4], [0, 0]])
        assert MatrixStats.from_matrix(matrix).symmetric is False
        sparse = SparseCommMatrix(2)
        sparse.add(0, 1, 4)
        assert MatrixStats.from_matrix(sparse).symmetric is False
