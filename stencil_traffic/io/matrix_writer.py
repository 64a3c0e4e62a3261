"""
Flit matrix serialization.

Output format: one line per source node, N comma-separated flit counts
per line in destination order, each line terminated by a newline.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Union

import numpy as np

from ..core.flit import quantize_matrix
from ..core.matrix import CommMatrix, SparseCommMatrix


def _iter_rows(matrix: CommMatrix) -> Iterator[np.ndarray]:
    if isinstance(matrix, SparseCommMatrix):
        return matrix.rows()
    return iter(np.asarray(matrix))


def format_flit_rows(matrix: CommMatrix, bytes_per_flit: int) -> Iterator[str]:
    """
    Yield the serialized text of each row (without line terminator).

    Args:
        matrix: Byte matrix, dense or sparse.
        bytes_per_flit: Flit size in bytes.
    """
    for row in _iter_rows(matrix):
        flits = quantize_matrix(row, bytes_per_flit)
        yield ",".join(str(int(v)) for v in flits)


def write_flit_matrix(
    matrix: CommMatrix,
    bytes_per_flit: int,
    path: Union[str, Path],
) -> int:
    """
    Write the flit-quantized matrix to a text file.

    Args:
        matrix: Byte matrix, dense or sparse.
        bytes_per_flit: Flit size in bytes.
        path: Output file path.

    Returns:
        Number of rows written.

    Raises:
        OSError: If the file cannot be opened (including a missing
            parent directory) or written.
    """
    path = Path(path)

    rows = 0
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        for line in format_flit_rows(matrix, bytes_per_flit):
            f.write(line)
            f.write("\n")
            rows += 1
    return rows


def read_flit_matrix(path: Union[str, Path]) -> np.ndarray:
    """
    Read a flit matrix file back into an int64 array.

    Raises:
        ValueError: If the file is not square.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Matrix file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        rows = [
            [int(v) for v in line.split(",")]
            for line in f.read().splitlines()
            if line
        ]

    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError(f"Matrix in {path} is not {n}x{n}")
    return np.array(rows, dtype=np.int64).reshape(n, n)
