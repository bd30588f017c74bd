"""Quality triangulation of the boundary graph.

Meshing itself is done by Shewchuk's Triangle through the ``triangle``
bindings. This module only packs the boundary graph into Triangle's input
dictionary and unpacks the result; Triangle's own errors propagate as-is.
"""

from typing import Protocol

import numpy as np
import triangle

from bwmesh.domain import TriangulationDirective


class Triangulator(Protocol):
    """Anything that meshes a boundary graph under a quality directive."""

    def triangulate(
        self,
        vertices: np.ndarray,
        edges: np.ndarray,
        holes: np.ndarray,
        directive: TriangulationDirective,
    ) -> tuple[np.ndarray, np.ndarray]: ...


class TriangleTriangulator:
    """Constrained Delaunay quality meshing with Triangle.

    Example:
        triangulator = TriangleTriangulator()
        W, F = triangulator.triangulate(V, E, H, directive)
    """

    def triangulate(
        self,
        vertices: np.ndarray,
        edges: np.ndarray,
        holes: np.ndarray,
        directive: TriangulationDirective,
    ) -> tuple[np.ndarray, np.ndarray]:
        """Mesh the region bounded by edges, excluding holes.

        Args:
            vertices: (V, 2) boundary vertices
            edges: (E, 2) boundary segments as vertex index pairs
            holes: (H, 2) one point inside each hole
            directive: Quality constraints

        Returns:
            Tuple of (mesh vertices (W, 2), triangles (F, 3))
        """
        data: dict[str, np.ndarray] = {
            "vertices": np.asarray(vertices, dtype=float).reshape(-1, 2),
            "segments": np.asarray(edges, dtype=np.int32).reshape(-1, 2),
        }
        holes = np.asarray(holes, dtype=float).reshape(-1, 2)
        if holes.shape[0] > 0:
            data["holes"] = holes

        result = triangle.triangulate(data, directive.to_switches())

        mesh_vertices = np.asarray(result["vertices"], dtype=float).reshape(-1, 2)
        triangles = np.asarray(
            result.get("triangles", np.zeros((0, 3))), dtype=np.int64
        ).reshape(-1, 3)
        return mesh_vertices, triangles
