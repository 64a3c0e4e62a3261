"""Matrix file input/output."""

from .matrix_writer import (
    format_flit_rows,
    write_flit_matrix,
    read_flit_matrix,
)

__all__ = [
    "format_flit_rows",
    "write_flit_matrix",
    "read_flit_matrix",
]
