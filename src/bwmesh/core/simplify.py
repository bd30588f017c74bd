"""Douglas-Peucker simplification of polylines and closed polygons."""

import numpy as np

from bwmesh.core.geometry import chord_distances


def douglas_peucker(points: np.ndarray, tol: float) -> np.ndarray:
    """Simplify an open polyline with the Douglas-Peucker algorithm.

    Both endpoints are always kept. An interior point survives only if it
    lies farther than ``tol`` from the chord of the span it was found in.
    Among equally distant points the first one is chosen, which makes the
    result stable under repeated application.

    Args:
        points: (n, 2) polyline vertices
        tol: Maximum allowed deviation, >= 0

    Returns:
        (m, 2) array of retained vertices, m <= n, in original order

    Raises:
        ValueError: If tol is negative
    """
    if tol < 0:
        raise ValueError(f"Tolerance must be non-negative, got {tol}")

    points = np.asarray(points, dtype=float).reshape(-1, 2)
    n = points.shape[0]
    if n <= 2:
        return points.copy()

    keep = np.zeros(n, dtype=bool)
    keep[0] = keep[-1] = True

    stack = [(0, n - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue

        distances = chord_distances(points[first + 1 : last], points[first], points[last])
        farthest = int(np.argmax(distances))
        if distances[farthest] > tol:
            split = first + 1 + farthest
            keep[split] = True
            stack.append((first, split))
            stack.append((split, last))

    return points[keep]


def simplify_closed_polygon(points: np.ndarray, tol: float) -> np.ndarray:
    """Simplify a closed polygon to within ``tol``.

    The polygon is closed explicitly by repeating its first point, simplified
    as a polyline, and the repeated point is dropped again. A tolerance of 0
    returns the input unchanged.

    A polygon with at least two distinct points never comes back with fewer
    than two: if everything collapses onto the first point, the vertex
    farthest from it is kept as well. Loops this small are degenerate and
    left for the caller to discard.

    Args:
        points: (n, 2) polygon vertices, without a repeated closing point
        tol: Maximum allowed deviation, >= 0

    Returns:
        (m, 2) array of retained vertices

    Raises:
        ValueError: If tol is negative
    """
    if tol < 0:
        raise ValueError(f"Tolerance must be non-negative, got {tol}")
    if tol == 0:
        return points

    points = np.asarray(points, dtype=float).reshape(-1, 2)
    if points.shape[0] < 2:
        return points.copy()

    closed = np.vstack([points, points[:1]])
    simplified = douglas_peucker(closed, tol)[:-1]

    if simplified.shape[0] < 2:
        distances = chord_distances(points, points[0], points[0])
        farthest = int(np.argmax(distances))
        if distances[farthest] > 0:
            simplified = points[[0, farthest]]

    return simplified
