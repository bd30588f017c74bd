"""Boundary graph assembly from traced pixel loops.

This module turns tracer output into the planar straight-line graph handed
to the triangulator:
- Pixel loops are mapped to geometric coordinates and optionally simplified
- Loops left with 2 or fewer vertices are skipped (not an error)
- Each hole loop gets one interior point
- Accepted loops are concatenated into global vertex and edge arrays

Loops are processed in tracer order, outer loops first, so the resulting
indices are deterministic.
"""

from collections.abc import Sequence

import numpy as np

from bwmesh.core.coordinates import pixel_to_geometric
from bwmesh.core.hole_locator import find_interior_point
from bwmesh.core.simplify import simplify_closed_polygon
from bwmesh.domain import PSLG, BoundaryLoop, LoopSpan, TracedBoundaries
from bwmesh.exceptions import DegenerateGeometryError, HoleLocationError
from bwmesh.utils import MeshingLogger

# Loops with fewer vertices enclose no area
MIN_LOOP_VERTICES = 3


def concatenate_loops(loops: Sequence[BoundaryLoop], hole_points: Sequence[np.ndarray]) -> PSLG:
    """Concatenate self-contained loops into one boundary graph.

    Each loop's edges are offset by the number of vertices preceding it, in
    a single pass over the accepted loops.

    Args:
        loops: Accepted loops in processing order
        hole_points: One interior point per accepted hole loop

    Returns:
        PSLG with global vertex, edge and hole arrays
    """
    holes = (
        np.vstack(hole_points).astype(float) if len(hole_points) else np.zeros((0, 2), dtype=float)
    )
    if not loops:
        return PSLG(holes=holes)

    sizes = np.array([len(loop) for loop in loops], dtype=np.int64)
    offsets = np.concatenate([[0], np.cumsum(sizes)[:-1]])

    vertices = np.vstack([loop.vertices for loop in loops])
    edges = np.vstack([loop.edges(int(offset)) for loop, offset in zip(loops, offsets)])
    spans = tuple(
        LoopSpan(
            source_index=loop.source_index,
            kind=loop.kind,
            start=int(offset),
            stop=int(offset + size),
        )
        for loop, offset, size in zip(loops, offsets, sizes)
    )

    return PSLG(vertices=vertices, edges=edges, holes=holes, loops=spans)


class LoopAssembler:
    """Classifies, filters and concatenates traced loops.

    The assembler holds no per-run state and can be reused across images.

    Example:
        assembler = LoopAssembler(tol=0.5)
        pslg = assembler.assemble(boundaries, height=image.shape[0])
    """

    def __init__(self, tol: float = 0.0, logger: MeshingLogger | None = None) -> None:
        """Initialize the assembler.

        Args:
            tol: Douglas-Peucker tolerance; 0 disables simplification
            logger: Optional meshing logger for per-loop events
        """
        if tol < 0:
            raise ValueError(f"Tolerance must be non-negative, got {tol}")
        self.tol = tol
        self.logger = logger

    def prepare_loop(self, pixels: np.ndarray, height: int) -> np.ndarray:
        """Map a pixel loop to geometric coordinates and simplify it.

        Args:
            pixels: (n, 2) 1-indexed (row, column) pairs
            height: Image height in pixels

        Returns:
            (m, 2) geometric loop vertices
        """
        vertices = pixel_to_geometric(pixels, height)
        if self.tol > 0:
            vertices = simplify_closed_polygon(vertices, self.tol)
        return vertices

    def accept_loops(
        self, boundaries: TracedBoundaries, height: int
    ) -> tuple[list[BoundaryLoop], list[np.ndarray]]:
        """Run the per-loop stages and collect accepted loops.

        Args:
            boundaries: Tracer output
            height: Image height in pixels

        Returns:
            Tuple of (accepted loops, hole points)

        Raises:
            HoleLocationError: If a hole loop has no usable interior point
        """
        accepted: list[BoundaryLoop] = []
        hole_points: list[np.ndarray] = []

        for index, kind, pixels in boundaries.iter_loops():
            vertices = self.prepare_loop(pixels, height)
            kind_name = kind.name.lower()

            if vertices.shape[0] < MIN_LOOP_VERTICES:
                if self.logger is not None:
                    self.logger.log_loop_skipped(index, kind_name, int(vertices.shape[0]))
                continue

            loop = BoundaryLoop(vertices=vertices, kind=kind, source_index=index)

            if loop.is_hole:
                try:
                    point = find_interior_point(
                        vertices, obstacles=[other.vertices for other in accepted]
                    )
                except DegenerateGeometryError as e:
                    raise HoleLocationError(index, str(e)) from e
                hole_points.append(point)
                if self.logger is not None:
                    self.logger.log_hole_point(index, float(point[0]), float(point[1]))

            accepted.append(loop)
            if self.logger is not None:
                self.logger.log_loop_accepted(index, kind_name, len(loop))

        return accepted, hole_points

    def assemble(self, boundaries: TracedBoundaries, height: int) -> PSLG:
        """Build the boundary graph for one image.

        Args:
            boundaries: Tracer output
            height: Image height in pixels

        Returns:
            PSLG with vertices, edges and hole points

        Raises:
            HoleLocationError: If a hole loop has no usable interior point
        """
        accepted, hole_points = self.accept_loops(boundaries, height)
        pslg = concatenate_loops(accepted, hole_points)
        if self.logger is not None:
            self.logger.log_pslg(pslg.num_vertices, pslg.num_edges, pslg.num_holes)
        return pslg
