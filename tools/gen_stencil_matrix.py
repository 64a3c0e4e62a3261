#!/usr/bin/env python3
"""
Stencil Matrix Generator.

Script wrapper around the stencil-traffic command for use from a checkout.

Usage:
    python tools/gen_stencil_matrix.py 4 4 4 1024 256 64 16 matrix.csv
    python tools/gen_stencil_matrix.py 2 2 2 100 10 1 8 matrix.csv -v 2
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from stencil_traffic.cli import main


if __name__ == "__main__":
    sys.exit(main())
