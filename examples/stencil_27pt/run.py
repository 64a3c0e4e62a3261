#!/usr/bin/env python3
"""
27-Point Stencil Example Runner.

Usage:
    python run.py                                 # Default config/halo_4x4x4.yaml
    python run.py -c config/halo_4x4x4.yaml       # Explicit config
    python run.py --heatmap                       # Also save a heatmap PNG
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from stencil_traffic.config import load_stencil_config
from stencil_traffic.core import MatrixStats, quantize_matrix
from stencil_traffic.io import write_flit_matrix
from stencil_traffic.traffic import StencilTrafficGenerator


def print_header(title: str) -> None:
    """Print formatted header."""
    print("\n" + "=" * 70)
    print(f" {title}")
    print("=" * 70)


def main() -> int:
    example_dir = Path(__file__).parent
    parser = argparse.ArgumentParser(description="Run a YAML-configured stencil example")
    parser.add_argument(
        '-c', '--config',
        type=str,
        default=str(example_dir / "config" / "halo_4x4x4.yaml"),
        help='Stencil YAML config'
    )
    parser.add_argument(
        '--heatmap',
        action='store_true',
        help='Save a heatmap PNG next to the output file'
    )
    args = parser.parse_args()

    config = load_stencil_config(args.config)
    output = Path(config.output_file)
    if not output.is_absolute():
        output = example_dir / output

    print_header(f"Stencil {config.x_nodes}x{config.y_nodes}x{config.z_nodes}")
    if config.verbosity > 0:
        print(config.describe())

    generator = StencilTrafficGenerator(config)
    matrix = generator.generate()
    generator.print_pattern()
    print(MatrixStats.from_matrix(matrix).summary())

    output.parent.mkdir(parents=True, exist_ok=True)
    rows = write_flit_matrix(matrix, config.bytes_per_flit, output)
    print(f"Wrote {rows} rows to {output}")

    if args.heatmap:
        from stencil_traffic.visualization import plot_traffic_heatmap
        png = output.with_suffix(".png")
        plot_traffic_heatmap(quantize_matrix(matrix, config.bytes_per_flit), save_path=str(png))
        print(f"Heatmap saved: {png}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
