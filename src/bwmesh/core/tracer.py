"""Boundary tracing of binary images.

Tracing is delegated to OpenCV's border following (``cv2.findContours``).
Outer loops run through the boundary pixels of each 8-connected foreground
region, islands inside holes included. Hole loops run through the boundary
pixels of each enclosed 4-connected background region, so a hole loop never
touches the outer loop around it, even across a 1-pixel wall.

OpenCV reports 0-indexed (x, y) pixel positions; the tracer converts them to
the 1-indexed (row, column) pairs the rest of the pipeline expects.
"""

from typing import Protocol

import cv2
import numpy as np

from bwmesh.domain import TracedBoundaries
from bwmesh.exceptions import ImageFormatError

# Values above this count as foreground
FOREGROUND_THRESHOLD = 0.5

# Index of the parent link in an OpenCV hierarchy entry
_PARENT = 3


class BoundaryTracer(Protocol):
    """Anything that traces a binary image into outer and hole loops."""

    def trace(self, image: np.ndarray) -> TracedBoundaries: ...


def binarize(image: np.ndarray) -> np.ndarray:
    """Threshold an image into a 0/1 uint8 mask.

    Args:
        image: 2D array of booleans or scalars

    Returns:
        (H, W) uint8 mask, 1 where image > FOREGROUND_THRESHOLD

    Raises:
        ImageFormatError: If the image is not two-dimensional
    """
    image = np.asarray(image)
    if image.ndim != 2:
        raise ImageFormatError(f"expected a 2D image, got shape {image.shape}")
    return (image.astype(float) > FOREGROUND_THRESHOLD).astype(np.uint8)


def _to_pixels(contour: np.ndarray, dx: int = 0, dy: int = 0) -> np.ndarray:
    """Convert an OpenCV contour to (row, column) pairs, shifted by (dx, dy)."""
    xy = contour.reshape(-1, 2).astype(np.int64)
    return np.column_stack([xy[:, 1] + dy, xy[:, 0] + dx])


class OpenCVBoundaryTracer:
    """Traces outer and hole boundaries with ``cv2.findContours``.

    With ``compress=True`` (default) straight runs are reduced to their
    endpoints, so an axis-aligned rectangle of pixels yields 4 points.
    With ``compress=False`` every boundary pixel is reported.

    Example:
        tracer = OpenCVBoundaryTracer()
        boundaries = tracer.trace(mask)
        print(boundaries.num_outer, len(boundaries.hole_loops))
    """

    def __init__(self, compress: bool = True) -> None:
        """Initialize the tracer.

        Args:
            compress: Reduce straight boundary runs to their endpoints
        """
        self.compress = compress

    @property
    def method(self) -> int:
        """OpenCV contour approximation method."""
        return cv2.CHAIN_APPROX_SIMPLE if self.compress else cv2.CHAIN_APPROX_NONE

    def trace(self, image: np.ndarray) -> TracedBoundaries:
        """Trace the foreground boundaries of an image.

        Args:
            image: 2D array; values > 0.5 are foreground

        Returns:
            TracedBoundaries with loops as 1-indexed (row, column) arrays

        Raises:
            ImageFormatError: If the image is not two-dimensional
        """
        mask = binarize(image)

        # A zero border keeps regions touching the image edge closed, and
        # shifts OpenCV's 0-indexed positions to 1-indexed ones
        padded = np.pad(mask, 1, mode="constant", constant_values=0)

        outer = self._trace_outer(padded)
        if not outer:
            return TracedBoundaries()

        holes = self._trace_holes(padded)
        return TracedBoundaries(outer_loops=tuple(outer), hole_loops=tuple(holes))

    def _trace_outer(self, padded: np.ndarray) -> list[np.ndarray]:
        contours, hierarchy = cv2.findContours(padded, cv2.RETR_CCOMP, self.method)
        if hierarchy is None:
            return []
        return [
            _to_pixels(contour)
            for contour, links in zip(contours, hierarchy[0])
            if links[_PARENT] < 0
        ]

    def _trace_holes(self, padded: np.ndarray) -> list[np.ndarray]:
        background = (1 - padded).astype(np.uint8)
        count, labels, stats, _ = cv2.connectedComponentsWithStats(background, connectivity=4)

        # The padded border belongs to the background surrounding everything
        outside = labels[0, 0]

        holes: list[np.ndarray] = []
        for label in range(1, count):
            if label == outside:
                continue
            # Holes never reach the padded border, so a 1-pixel margin fits
            left = stats[label, cv2.CC_STAT_LEFT] - 1
            top = stats[label, cv2.CC_STAT_TOP] - 1
            width = stats[label, cv2.CC_STAT_WIDTH] + 2
            height = stats[label, cv2.CC_STAT_HEIGHT] + 2
            region = (labels[top : top + height, left : left + width] == label).astype(np.uint8)

            contours, _ = cv2.findContours(region, cv2.RETR_EXTERNAL, self.method)
            holes.extend(_to_pixels(contour, dx=left, dy=top) for contour in contours)
        return holes
