"""
Configuration loader for stencil traffic generation.

Holds the run parameters of a 27-point stencil workload and loads/saves
them as YAML.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any, Tuple
from pathlib import Path
from enum import Enum
import yaml


# Largest value accepted for any size or count parameter (unsigned 32-bit)
U32_MAX = 2**32 - 1


class NeighborClass(Enum):
    """
    Neighbor classes of a 27-point stencil.

    The class is the number of axes that move by one step.
    """
    FACE = "face"      # 1 axis moves (6 directions)
    EDGE = "edge"      # 2 axes move (12 directions)
    CORNER = "corner"  # 3 axes move (8 directions)

    @classmethod
    def from_offset(cls, offset: Tuple[int, int, int]) -> "NeighborClass":
        """Classify a unit offset by how many axes it moves."""
        moved = sum(1 for d in offset if d != 0)
        if moved == 1:
            return cls.FACE
        if moved == 2:
            return cls.EDGE
        if moved == 3:
            return cls.CORNER
        raise ValueError(f"Offset {offset} is not a stencil neighbor")

    @property
    def label(self) -> str:
        """Capitalized name used in trace output."""
        return self.value.capitalize()


@dataclass
class StencilConfig:
    """
    Parameters of one stencil matrix generation run.

    Message sizes and bytes_per_flit are in bytes.
    """
    # Grid dimensions
    x_nodes: int = 1
    y_nodes: int = 1
    z_nodes: int = 1

    # Message size per neighbor class
    face_msg_size: int = 1
    edge_msg_size: int = 1
    corner_msg_size: int = 1

    # Quantization
    bytes_per_flit: int = 1

    # Output
    output_file: str = ""
    verbosity: int = 0

    @property
    def dims(self) -> Tuple[int, int, int]:
        """Grid dimensions as (xn, yn, zn)."""
        return (self.x_nodes, self.y_nodes, self.z_nodes)

    @property
    def num_nodes(self) -> int:
        """Total number of nodes in the grid."""
        return self.x_nodes * self.y_nodes * self.z_nodes

    @property
    def message_sizes(self) -> Dict[NeighborClass, int]:
        """Message size lookup keyed by neighbor class."""
        return {
            NeighborClass.FACE: self.face_msg_size,
            NeighborClass.EDGE: self.edge_msg_size,
            NeighborClass.CORNER: self.corner_msg_size,
        }

    def validate(self) -> None:
        """Validate configuration values."""
        for name in (
            "x_nodes", "y_nodes", "z_nodes",
            "face_msg_size", "edge_msg_size", "corner_msg_size",
            "bytes_per_flit",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be positive")
            if value > U32_MAX:
                raise ValueError(f"{name} must be at most {U32_MAX}")
        if not self.output_file:
            raise ValueError("output_file must not be empty")
        if self.verbosity < 0:
            raise ValueError("verbosity must be non-negative")

    def describe(self) -> str:
        """Parameter echo printed at verbosity > 0."""
        return "\n".join([
            f"xn={self.x_nodes}",
            f"yn={self.y_nodes}",
            f"zn={self.z_nodes}",
            f"face_msg_size={self.face_msg_size}",
            f"edge_msg_size={self.edge_msg_size}",
            f"corner_msg_size={self.corner_msg_size}",
            f"bytes_per_flit={self.bytes_per_flit}",
            f"output_file={self.output_file}",
        ]) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for YAML serialization."""
        return {
            "stencil": {
                "x_nodes": self.x_nodes,
                "y_nodes": self.y_nodes,
                "z_nodes": self.z_nodes,
                "face_msg_size": self.face_msg_size,
                "edge_msg_size": self.edge_msg_size,
                "corner_msg_size": self.corner_msg_size,
                "bytes_per_flit": self.bytes_per_flit,
                "output_file": str(self.output_file),
                "verbosity": self.verbosity,
            }
        }

    def save(self, path: Path) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def load_stencil_config(config_path: str | Path) -> StencilConfig:
    """
    Load stencil configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file.

    Returns:
        Validated StencilConfig instance.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Stencil config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    return _parse_stencil_config(data or {})


def _parse_stencil_config(data: Dict[str, Any]) -> StencilConfig:
    """Parse YAML data into StencilConfig."""
    stencil = data.get("stencil", data)  # Support both nested and flat format

    config = StencilConfig(
        x_nodes=stencil.get("x_nodes", 1),
        y_nodes=stencil.get("y_nodes", 1),
        z_nodes=stencil.get("z_nodes", 1),
        face_msg_size=stencil.get("face_msg_size", 1),
        edge_msg_size=stencil.get("edge_msg_size", 1),
        corner_msg_size=stencil.get("corner_msg_size", 1),
        bytes_per_flit=stencil.get("bytes_per_flit", 1),
        output_file=str(stencil.get("output_file", "")),
        verbosity=stencil.get("verbosity", 0),
    )

    config.validate()
    return config
