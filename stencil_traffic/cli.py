"""
Command-line entry point.

Usage:
    stencil-traffic 4 4 4 1024 256 64 16 matrix.csv
    stencil-traffic 8 8 8 4096 512 64 32 matrix.csv -v 1
    stencil-traffic 2 2 2 100 10 1 8 out/matrix.csv --heatmap out/matrix.png
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import U32_MAX, StencilConfig
from .core.matrix import MatrixStats
from .io.matrix_writer import write_flit_matrix
from .traffic.stencil_generator import StencilTrafficGenerator


def positive_int(value: str) -> int:
    """argparse type: integer in [1, U32_MAX]."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    if number > U32_MAX:
        raise argparse.ArgumentTypeError(f"must be at most {U32_MAX}, got {number}")
    return number


def non_negative_int(value: str) -> int:
    """argparse type: integer in [0, U32_MAX]."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    if number > U32_MAX:
        raise argparse.ArgumentTypeError(f"must be at most {U32_MAX}, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stencil-traffic",
        description="Make a communication matrix representing a 27-point stencil workload",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  stencil-traffic 4 4 4 1024 256 64 16 matrix.csv
  stencil-traffic 8 8 8 4096 512 64 32 matrix.csv -v 1 --sparse
"""
    )

    parser.add_argument('x_nodes', type=positive_int,
                        help='Number of nodes in the virtual x dimension')
    parser.add_argument('y_nodes', type=positive_int,
                        help='Number of nodes in the virtual y dimension')
    parser.add_argument('z_nodes', type=positive_int,
                        help='Number of nodes in the virtual z dimension')
    parser.add_argument('face_msg_size', type=positive_int,
                        help='Message size of face communications (bytes)')
    parser.add_argument('edge_msg_size', type=positive_int,
                        help='Message size of edge communications (bytes)')
    parser.add_argument('corner_msg_size', type=positive_int,
                        help='Message size of corner communications (bytes)')
    parser.add_argument('bytes_per_flit', type=positive_int,
                        help='Bytes per flit')
    parser.add_argument('output_file', type=str,
                        help='Output csv file')

    parser.add_argument(
        '-v', '--verbosity',
        type=non_negative_int,
        default=0,
        help='Verbosity level: 1 = progress, 2 = per-node trace (default: 0)'
    )
    parser.add_argument(
        '--sparse',
        action='store_true',
        help='Accumulate into a sparse matrix (for large grids)'
    )
    parser.add_argument(
        '--heatmap',
        type=str,
        default=None,
        help='Also save a heatmap PNG of the flit matrix to this path'
    )
    parser.add_argument(
        '--save-config',
        type=str,
        default=None,
        help='Save the run parameters as YAML to this path'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = StencilConfig(
        x_nodes=args.x_nodes,
        y_nodes=args.y_nodes,
        z_nodes=args.z_nodes,
        face_msg_size=args.face_msg_size,
        edge_msg_size=args.edge_msg_size,
        corner_msg_size=args.corner_msg_size,
        bytes_per_flit=args.bytes_per_flit,
        output_file=args.output_file,
        verbosity=args.verbosity,
    )
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    if config.verbosity > 0:
        print(config.describe())

    generator = StencilTrafficGenerator(config)
    matrix = generator.generate(sparse=args.sparse)

    if config.verbosity > 0:
        generator.print_pattern()
        print(MatrixStats.from_matrix(matrix).summary())
        print(f"Writing matrix to file: {config.output_file}")

    try:
        write_flit_matrix(matrix, config.bytes_per_flit, config.output_file)
        if args.save_config:
            config.save(args.save_config)
    except OSError as e:
        print(f"Error: cannot write {e.filename or config.output_file}: {e.strerror or e}",
              file=sys.stderr)
        return 1

    if args.heatmap:
        import matplotlib.pyplot as plt
        from .core.flit import quantize_matrix
        from .visualization.heatmap import plot_traffic_heatmap

        dense = matrix.to_dense() if args.sparse else matrix
        fig = plot_traffic_heatmap(
            quantize_matrix(dense, config.bytes_per_flit),
            save_path=args.heatmap,
        )
        plt.close(fig)
        if config.verbosity > 0:
            print(f"Heatmap saved: {args.heatmap}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
