"""Geometric operations on polygons and polylines.

This module provides core mathematical utilities for:
- Signed area calculation (shoelace formula)
- Point-in-polygon testing (ray casting algorithm)
- Distances from points to a chord
- Intersections of a polygon with a horizontal scan line

Polygons are (n, 2) float arrays, implicitly closed. All functions are pure
and stateless.
"""

import numpy as np


def signed_area(polygon: np.ndarray) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        polygon: (n, 2) array of polygon vertices

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> signed_area(np.array([[0, 0], [1, 0], [1, 1], [0, 1]]))  # CCW square
        1.0
        >>> signed_area(np.array([[0, 0], [0, 1], [1, 1], [1, 0]]))  # CW square
        -1.0
    """
    polygon = np.asarray(polygon, dtype=float)
    if polygon.shape[0] < 3:
        return 0.0

    x = polygon[:, 0]
    y = polygon[:, 1]
    return float((np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2.0)


def point_in_polygon(x: float, y: float, polygon: np.ndarray) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.
    Points exactly on an edge may be classified either way.

    Args:
        x: X coordinate of point to test
        y: Y coordinate of point to test
        polygon: (n, 2) array of polygon vertices

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = np.array([[0, 0], [2, 0], [2, 2], [0, 2]])
        >>> point_in_polygon(1.0, 1.0, square)  # Center
        True
        >>> point_in_polygon(3.0, 3.0, square)  # Outside
        False
    """
    polygon = np.asarray(polygon, dtype=float)
    if polygon.shape[0] < 3:
        return False

    xi = polygon[:, 0]
    yi = polygon[:, 1]
    xj = np.roll(xi, 1)
    yj = np.roll(yi, 1)

    straddles = (yi > y) != (yj > y)
    if not straddles.any():
        return False

    # Only straddling edges are evaluated, so yj - yi is never zero here
    xs = xi[straddles] + (y - yi[straddles]) * (xj[straddles] - xi[straddles]) / (
        yj[straddles] - yi[straddles]
    )
    return bool(np.count_nonzero(x < xs) % 2 == 1)


def chord_distances(points: np.ndarray, start: np.ndarray, end: np.ndarray) -> np.ndarray:
    """Distance from each point to the line through start and end.

    When start and end coincide (as for a closed curve), the distance to
    that single point is used instead.

    Args:
        points: (n, 2) array of points
        start: First chord endpoint
        end: Second chord endpoint

    Returns:
        (n,) array of non-negative distances
    """
    points = np.asarray(points, dtype=float)
    direction = np.asarray(end, dtype=float) - np.asarray(start, dtype=float)
    offsets = points - start
    length = float(np.hypot(direction[0], direction[1]))

    if length == 0.0:
        return np.hypot(offsets[:, 0], offsets[:, 1])

    cross = direction[0] * offsets[:, 1] - direction[1] * offsets[:, 0]
    return np.abs(cross) / length


def scanline_crossings(polygon: np.ndarray, y: float) -> np.ndarray:
    """X coordinates where a horizontal line crosses the polygon's edges.

    An edge counts as crossed when exactly one of its endpoints lies above
    the line (half-open rule), so the number of crossings is always even.

    Args:
        polygon: (n, 2) array of polygon vertices
        y: Height of the scan line

    Returns:
        Sorted array of crossing x coordinates
    """
    polygon = np.asarray(polygon, dtype=float)
    if polygon.shape[0] < 2:
        return np.zeros(0, dtype=float)

    xa = polygon[:, 0]
    ya = polygon[:, 1]
    xb = np.roll(xa, -1)
    yb = np.roll(ya, -1)

    crossed = (ya > y) != (yb > y)
    t = (y - ya[crossed]) / (yb[crossed] - ya[crossed])
    xs = xa[crossed] + t * (xb[crossed] - xa[crossed])
    return np.sort(xs)
