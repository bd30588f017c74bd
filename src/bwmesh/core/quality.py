"""Default triangulation quality constraints.

When the caller gives no directive, the maximum triangle area is guessed
from the boundary itself: half the mean squared boundary edge length. The
halving biases the mesh toward triangles somewhat finer than the boundary
sampling.
"""

import numpy as np

from bwmesh.domain import PSLG, TriangulationDirective
from bwmesh.exceptions import EmptyBoundaryError

DEFAULT_MIN_ANGLE = 30.0

# Divisor applied to the mean squared edge length; changes default mesh density
AREA_TIGHTENING_FACTOR = 2.0


def squared_edge_lengths(vertices: np.ndarray, edges: np.ndarray) -> np.ndarray:
    """Squared Euclidean length of every edge.

    Args:
        vertices: (V, 2) vertex coordinates
        edges: (E, 2) vertex index pairs

    Returns:
        (E,) array of squared lengths
    """
    vertices = np.asarray(vertices, dtype=float).reshape(-1, 2)
    edges = np.asarray(edges, dtype=np.int64).reshape(-1, 2)
    deltas = vertices[edges[:, 0]] - vertices[edges[:, 1]]
    return np.sum(deltas**2, axis=1)


def average_squared_edge_length(vertices: np.ndarray, edges: np.ndarray) -> float:
    """Mean squared edge length divided by AREA_TIGHTENING_FACTOR.

    Args:
        vertices: (V, 2) vertex coordinates
        edges: (E, 2) vertex index pairs

    Returns:
        Area constraint for the default directive

    Raises:
        EmptyBoundaryError: If there are no edges
    """
    lengths = squared_edge_lengths(vertices, edges)
    if lengths.size == 0:
        raise EmptyBoundaryError()
    return float(lengths.mean() / AREA_TIGHTENING_FACTOR)


def default_directive(pslg: PSLG) -> TriangulationDirective:
    """Derive a quality directive from the boundary graph.

    Args:
        pslg: Assembled boundary graph

    Returns:
        Directive with a 30 degree minimum angle and the heuristic area bound

    Raises:
        EmptyBoundaryError: If the graph has no edges
    """
    return TriangulationDirective(
        min_angle=DEFAULT_MIN_ANGLE,
        max_area=average_squared_edge_length(pslg.vertices, pslg.edges),
        quiet=True,
    )


def resolve_directive(
    pslg: PSLG, explicit: TriangulationDirective | None
) -> tuple[TriangulationDirective, bool]:
    """Pick the directive for a triangulation request.

    Args:
        pslg: Assembled boundary graph
        explicit: Caller-supplied directive, used verbatim when given

    Returns:
        Tuple of (directive, derived) where derived is True if the quality
        heuristic produced it

    Raises:
        EmptyBoundaryError: If no directive was given and the graph is empty
    """
    if explicit is not None:
        return explicit, False
    return default_directive(pslg), True
