"""Planar straight-line graph and mesh representations.

This module defines the two products of the pipeline: the boundary graph
(PSLG) handed to the triangulator, and the triangle mesh it returns.
"""

from dataclasses import dataclass, field

import numpy as np

from bwmesh.domain.loop import LoopKind


def _empty_points() -> np.ndarray:
    return np.zeros((0, 2), dtype=float)


def _empty_pairs() -> np.ndarray:
    return np.zeros((0, 2), dtype=np.int64)


@dataclass(frozen=True)
class LoopSpan:
    """Where one accepted loop landed in the global vertex list.

    Attributes:
        source_index: Index of the loop in the tracer's flat order
        kind: Outer boundary or hole
        start: First vertex index of the loop
        stop: One past the last vertex index of the loop
    """

    source_index: int
    kind: LoopKind
    start: int
    stop: int

    @property
    def size(self) -> int:
        """Number of vertices (and edges) in the loop."""
        return self.stop - self.start


@dataclass(frozen=True, eq=False)
class PSLG:
    """Planar straight-line graph describing region boundaries.

    Attributes:
        vertices: (V, 2) boundary vertex coordinates
        edges: (E, 2) zero-based vertex index pairs, one per boundary segment
        holes: (H, 2) one point strictly inside each accepted hole
        loops: Per-loop vertex ranges, in processing order
    """

    vertices: np.ndarray = field(default_factory=_empty_points)
    edges: np.ndarray = field(default_factory=_empty_pairs)
    holes: np.ndarray = field(default_factory=_empty_points)
    loops: tuple[LoopSpan, ...] = field(default_factory=tuple)

    @property
    def num_vertices(self) -> int:
        """Number of boundary vertices."""
        return int(self.vertices.shape[0])

    @property
    def num_edges(self) -> int:
        """Number of boundary edges."""
        return int(self.edges.shape[0])

    @property
    def num_holes(self) -> int:
        """Number of hole indicator points."""
        return int(self.holes.shape[0])

    def is_empty(self) -> bool:
        """Check if the graph has no boundary at all.

        Returns:
            True if there are no edges
        """
        return self.num_edges == 0

    def has_valid_edges(self) -> bool:
        """Check that every edge index refers to an existing vertex.

        Returns:
            True if all indices are within [0, num_vertices)
        """
        if self.num_edges == 0:
            return True
        return bool(self.edges.min() >= 0 and self.edges.max() < self.num_vertices)


@dataclass(frozen=True, eq=False)
class Mesh:
    """Triangle mesh produced by the triangulator.

    Attributes:
        vertices: (W, 2) mesh vertex coordinates, boundary vertices plus
            Steiner points
        triangles: (F, 3) zero-based vertex index triples
    """

    vertices: np.ndarray = field(default_factory=_empty_points)
    triangles: np.ndarray = field(default_factory=lambda: np.zeros((0, 3), dtype=np.int64))

    @property
    def num_vertices(self) -> int:
        """Number of mesh vertices."""
        return int(self.vertices.shape[0])

    @property
    def num_triangles(self) -> int:
        """Number of triangles."""
        return int(self.triangles.shape[0])

    def total_area(self) -> float:
        """Sum of the unsigned triangle areas.

        Returns:
            Meshed area in square units
        """
        if self.num_triangles == 0:
            return 0.0
        a = self.vertices[self.triangles[:, 0]]
        b = self.vertices[self.triangles[:, 1]]
        c = self.vertices[self.triangles[:, 2]]
        cross = (b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1]) - (b[:, 1] - a[:, 1]) * (c[:, 0] - a[:, 0])
        return float(np.abs(cross).sum() / 2.0)
