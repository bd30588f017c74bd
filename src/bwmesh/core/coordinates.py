"""Mapping between pixel indices and geometric coordinates.

Pixels are addressed by 1-indexed (row, column) pairs with the origin at the
top-left of the image. Geometric coordinates are right-handed and y-up, with
the origin at the bottom-left corner of the image, so pixel centers sit at
half-integer offsets.
"""

import numpy as np


def pixel_to_geometric(pixels: np.ndarray, height: int) -> np.ndarray:
    """Map pixel (row, column) pairs to geometric (x, y) points.

    Uses (x, y) = (c - 0.5, H - r + 0.5).

    Args:
        pixels: (n, 2) array of 1-indexed (row, column) pairs
        height: Image height in pixels

    Returns:
        (n, 2) float array of (x, y) points

    Examples:
        >>> pixel_to_geometric(np.array([[1, 1]]), height=4)
        array([[0.5, 3.5]])
    """
    pixels = np.asarray(pixels, dtype=float).reshape(-1, 2)
    x = pixels[:, 1] - 0.5
    y = height - pixels[:, 0] + 0.5
    return np.column_stack([x, y])


def geometric_to_pixel(points: np.ndarray, height: int) -> np.ndarray:
    """Map geometric (x, y) points back to pixel (row, column) pairs.

    Exact inverse of pixel_to_geometric. Values are left as floats; points
    that are not pixel centers map to fractional indices.

    Args:
        points: (n, 2) array of (x, y) points
        height: Image height in pixels

    Returns:
        (n, 2) float array of 1-indexed (row, column) pairs
    """
    points = np.asarray(points, dtype=float).reshape(-1, 2)
    row = height - points[:, 1] + 0.5
    col = points[:, 0] + 0.5
    return np.column_stack([row, col])
