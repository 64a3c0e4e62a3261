"""
Byte to flit quantization.

A flit is the fixed-size unit of transfer on the network. Byte volumes
round up to whole flits; zero bytes stays zero flits.
"""

from __future__ import annotations

import numpy as np


def bytes_to_flits(num_bytes: int, bytes_per_flit: int) -> int:
    """
    Number of flits needed to carry num_bytes.

    Ceiling of the exact quotient, so 1 byte with 8 bytes per flit
    is 1 flit. Integer arithmetic keeps it exact for any size.
    """
    if bytes_per_flit <= 0:
        raise ValueError("bytes_per_flit must be positive")
    if num_bytes < 0:
        raise ValueError("num_bytes must be non-negative")
    return -(-num_bytes // bytes_per_flit)


def quantize_matrix(matrix: np.ndarray, bytes_per_flit: int) -> np.ndarray:
    """
    Quantize a byte matrix (or row) to flits elementwise.

    Args:
        matrix: Non-negative byte volumes.
        bytes_per_flit: Flit size in bytes.

    Returns:
        int64 array of the same shape.
    """
    if bytes_per_flit <= 0:
        raise ValueError("bytes_per_flit must be positive")
    matrix = np.asarray(matrix, dtype=np.int64)
    return (matrix + (bytes_per_flit - 1)) // bytes_per_flit
