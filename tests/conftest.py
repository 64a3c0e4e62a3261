"""
Shared pytest fixtures for stencil traffic tests.

Provides stencil configurations and grids used across unit and
integration tests.
"""

import matplotlib
matplotlib.use("Agg")

import pytest

from stencil_traffic.config import StencilConfig
from stencil_traffic.core.cube import Cube


# ==============================================================================
# Configuration Fixtures
# ==============================================================================

@pytest.fixture
def stencil_config_factory(tmp_path):
    """Factory for creating validated stencil configurations."""
    def _create(
        dims=(3, 3, 3),
        face: int = 100,
        edge: int = 10,
        corner: int = 1,
        bytes_per_flit: int = 8,
        verbosity: int = 0,
    ) -> StencilConfig:
        xn, yn, zn = dims
        config = StencilConfig(
            x_nodes=xn,
            y_nodes=yn,
            z_nodes=zn,
            face_msg_size=face,
            edge_msg_size=edge,
            corner_msg_size=corner,
            bytes_per_flit=bytes_per_flit,
            output_file=str(tmp_path / "matrix.csv"),
            verbosity=verbosity,
        )
        config.validate()
        return config

    return _create


@pytest.fixture
def end_to_end_config(stencil_config_factory) -> StencilConfig:
    """Two nodes along x; sizes 10/20/30 bytes, 5 bytes per flit."""
    return stencil_config_factory(
        dims=(2, 1, 1), face=10, edge=20, corner=30, bytes_per_flit=5,
    )


# ==============================================================================
# Grid Fixtures
# ==============================================================================

@pytest.fixture
def cube_3x3x3() -> Cube:
    """Smallest grid with an interior node."""
    return Cube(3, 3, 3)


@pytest.fixture
def cube_4x3x2() -> Cube:
    """Non-cubic grid, distinct sizes per axis."""
    return Cube(4, 3, 2)
