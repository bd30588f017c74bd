"""Interior point search for hole loops.

The triangulator removes every triangle reachable from a hole point without
crossing a boundary segment, so each hole needs one point strictly inside
its loop and outside anything nested in it (islands of foreground within
the hole).

The search uses horizontal scan lines placed halfway between consecutive
distinct vertex heights, so no scan line passes through a vertex. Crossings
of a scan line with the loop (and with nested loops) split it into spans;
the midpoint of the widest span that lies inside the loop and outside every
nested loop is returned. Scan lines are tried from the middle of the loop's
height outwards. This works for any simple polygon, convex or not.
"""

from collections.abc import Sequence

import numpy as np

from bwmesh.core.geometry import point_in_polygon, scanline_crossings, signed_area
from bwmesh.exceptions import DegenerateGeometryError

# Minimum half-width of an accepted span; keeps results off boundary edges
SPAN_EPSILON = 1e-8

# Loops with smaller absolute area are treated as collapsed
AREA_EPSILON = 1e-12

MAX_SCANLINE_ATTEMPTS = 64


def nested_loops(polygon: np.ndarray, loops: Sequence[np.ndarray]) -> list[np.ndarray]:
    """Select the loops lying inside ``polygon``.

    Loops are assumed not to cross, so testing one vertex per loop is enough.

    Args:
        polygon: (n, 2) enclosing loop
        loops: Candidate loops

    Returns:
        Loops with at least 3 vertices whose first vertex is inside polygon
    """
    nested: list[np.ndarray] = []
    for loop in loops:
        loop = np.asarray(loop, dtype=float).reshape(-1, 2)
        if loop.shape[0] < 3:
            continue
        if point_in_polygon(loop[0, 0], loop[0, 1], polygon):
            nested.append(loop)
    return nested


def find_interior_point(
    polygon: np.ndarray,
    obstacles: Sequence[np.ndarray] = (),
    max_attempts: int = MAX_SCANLINE_ATTEMPTS,
) -> np.ndarray:
    """Find a point strictly inside a simple polygon.

    Args:
        polygon: (n, 2) polygon vertices, n >= 3, implicitly closed
        obstacles: Other loops; those nested inside polygon are avoided
        max_attempts: Maximum number of scan lines to try

    Returns:
        (2,) array with the interior point

    Raises:
        DegenerateGeometryError: If the polygon has fewer than 3 vertices,
            zero area, or no interior span is found
    """
    polygon = np.asarray(polygon, dtype=float).reshape(-1, 2)
    n = polygon.shape[0]
    if n < 3:
        raise DegenerateGeometryError(f"Polygon has {n} vertices, at least 3 required")
    if abs(signed_area(polygon)) <= AREA_EPSILON:
        raise DegenerateGeometryError("Polygon has zero area")

    blockers = nested_loops(polygon, obstacles)

    y_min = float(polygon[:, 1].min())
    y_max = float(polygon[:, 1].max())
    heights = np.unique(np.concatenate([polygon[:, 1], *(b[:, 1] for b in blockers)]))
    heights = heights[(heights >= y_min) & (heights <= y_max)]

    candidates = (heights[:-1] + heights[1:]) / 2.0
    order = np.argsort(np.abs(candidates - (y_min + y_max) / 2.0), kind="stable")

    for y in candidates[order][:max_attempts]:
        point = _widest_interior_span(polygon, blockers, float(y))
        if point is not None:
            return point

    raise DegenerateGeometryError(
        f"No interior span found after {min(len(candidates), max_attempts)} scan lines"
    )


def _widest_interior_span(
    polygon: np.ndarray, blockers: list[np.ndarray], y: float
) -> np.ndarray | None:
    """Midpoint of the widest span on scan line y inside polygon and outside blockers."""
    crossings = [scanline_crossings(polygon, y)]
    crossings.extend(scanline_crossings(b, y) for b in blockers)
    xs = np.sort(np.concatenate(crossings))

    best: np.ndarray | None = None
    best_width = 2.0 * SPAN_EPSILON
    for x0, x1 in zip(xs[:-1], xs[1:]):
        width = x1 - x0
        if width <= best_width:
            continue
        x = (x0 + x1) / 2.0
        if not point_in_polygon(x, y, polygon):
            continue
        if any(point_in_polygon(x, y, b) for b in blockers):
            continue
        best = np.array([x, y])
        best_width = width

    return best
