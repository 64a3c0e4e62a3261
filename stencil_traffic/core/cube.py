"""
3D grid coordinate mapping.

Translates (x, y, z) node coordinates to linear node IDs and back.
IDs vary fastest in x, then y, then z.
"""

from __future__ import annotations
from typing import Iterator, Tuple


Coord = Tuple[int, int, int]


class Cube:
    """
    Regular 3D grid of xn * yn * zn nodes.

    Node ID formula: id = z * yn * xn + y * xn + x
    """

    def __init__(self, xn: int, yn: int, zn: int):
        """
        Initialize grid.

        Args:
            xn: Number of nodes along x.
            yn: Number of nodes along y.
            zn: Number of nodes along z.
        """
        if xn <= 0 or yn <= 0 or zn <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got ({xn}, {yn}, {zn})"
            )
        self.xn = xn
        self.yn = yn
        self.zn = zn

    @property
    def dims(self) -> Coord:
        return (self.xn, self.yn, self.zn)

    @property
    def num_nodes(self) -> int:
        """Total number of nodes."""
        return self.xn * self.yn * self.zn

    def contains(self, x: int, y: int, z: int) -> bool:
        """Check whether a coordinate lies inside the grid."""
        return 0 <= x < self.xn and 0 <= y < self.yn and 0 <= z < self.zn

    def id(self, x: int, y: int, z: int) -> int:
        """Convert (x, y, z) coordinate to node ID."""
        assert 0 <= x < self.xn, f"x={x} out of range [0, {self.xn})"
        assert 0 <= y < self.yn, f"y={y} out of range [0, {self.yn})"
        assert 0 <= z < self.zn, f"z={z} out of range [0, {self.zn})"
        return (z * self.yn * self.xn) + (y * self.xn) + x

    def coord(self, node_id: int) -> Coord:
        """Convert node ID to (x, y, z) coordinate."""
        assert 0 <= node_id < self.num_nodes, (
            f"node_id={node_id} out of range [0, {self.num_nodes})"
        )
        x = node_id % self.xn
        y = (node_id // self.xn) % self.yn
        z = node_id // (self.xn * self.yn)
        return (x, y, z)

    def coords(self) -> Iterator[Coord]:
        """Iterate all coordinates in node ID order."""
        for z in range(self.zn):
            for y in range(self.yn):
                for x in range(self.xn):
                    yield (x, y, z)

    def __repr__(self) -> str:
        return f"Cube({self.xn}x{self.yn}x{self.zn})"
