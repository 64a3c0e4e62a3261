"""
27-point stencil neighbor enumeration.

Every direction is one row of NEIGHBOR_OFFSETS. A direction yields a
neighbor only if the shifted coordinate stays inside the grid; there is
no wraparound.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from ..config import NeighborClass
from .cube import Cube, Coord


_AXES = ("x", "y", "z")


@dataclass(frozen=True)
class NeighborOffset:
    """One stencil direction."""
    dx: int
    dy: int
    dz: int
    neighbor_class: NeighborClass
    label: str  # e.g. "-x", "+y,-z", "-x,+y,+z"

    @property
    def delta(self) -> Coord:
        return (self.dx, self.dy, self.dz)


@dataclass(frozen=True)
class Neighbor:
    """A valid neighbor relationship discovered from a source node."""
    node_id: int
    coord: Coord
    neighbor_class: NeighborClass
    label: str


def _make_offset(label: str) -> NeighborOffset:
    """Build an offset from a direction label like '+z,-x'."""
    delta = [0, 0, 0]
    for part in label.split(","):
        sign, axis = part[0], part[1]
        delta[_AXES.index(axis)] = 1 if sign == "+" else -1
    dx, dy, dz = delta
    return NeighborOffset(dx, dy, dz, NeighborClass.from_offset((dx, dy, dz)), label)


NEIGHBOR_OFFSETS: Tuple[NeighborOffset, ...] = tuple(_make_offset(label) for label in (
    # Face
    "-x", "+x", "-y", "+y", "-z", "+z",
    # Edge: xy, yz, zx planes
    "-x,-y", "-x,+y", "+x,-y", "+x,+y",
    "-y,-z", "-y,+z", "+y,-z", "+y,+z",
    "-z,-x", "-z,+x", "+z,-x", "+z,+x",
    # Corner
    "-x,-y,-z", "-x,-y,+z", "-x,+y,-z", "-x,+y,+z",
    "+x,-y,-z", "+x,-y,+z", "+x,+y,-z", "+x,+y,+z",
))


def enumerate_neighbors(cube: Cube, x: int, y: int, z: int) -> List[Neighbor]:
    """
    List the valid neighbors of node (x, y, z).

    Args:
        cube: Grid the node belongs to.
        x, y, z: Source coordinate.

    Returns:
        Neighbors in NEIGHBOR_OFFSETS order (face, edge, corner).
    """
    neighbors = []
    for offset in NEIGHBOR_OFFSETS:
        nx, ny, nz = x + offset.dx, y + offset.dy, z + offset.dz
        if not cube.contains(nx, ny, nz):
            continue
        neighbors.append(Neighbor(
            node_id=cube.id(nx, ny, nz),
            coord=(nx, ny, nz),
            neighbor_class=offset.neighbor_class,
            label=offset.label,
        ))
    return neighbors
