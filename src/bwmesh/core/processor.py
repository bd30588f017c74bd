"""Meshing pipeline orchestration.

This module coordinates the full image-to-mesh workflow:
load image -> trace boundaries -> assemble boundary graph -> pick quality
directive -> triangulate.

Key components:
- MeshResult: The five pipeline outputs plus run metadata
- ImageMesher: Orchestrator class with injectable tracer and triangulator
- bwmesh: Convenience entry point taking named or paired options
"""

import time
import traceback
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np
import structlog

from bwmesh.config import BWMeshSettings, MeshOptions, parse_options, parse_parameter_pairs
from bwmesh.core.assembler import LoopAssembler
from bwmesh.core.quality import resolve_directive
from bwmesh.core.tracer import BoundaryTracer, OpenCVBoundaryTracer, binarize
from bwmesh.core.triangulator import TriangleTriangulator, Triangulator
from bwmesh.domain import PSLG, Mesh, TriangulationDirective
from bwmesh.exceptions import InvalidOptionError
from bwmesh.io import read_mask
from bwmesh.utils import MeshingLogger, MeshingStats, configure_logging

ImageInput = np.ndarray | str | Path


@dataclass(frozen=True, eq=False)
class MeshResult:
    """Outputs of one meshing run.

    Unpacks in the order W, F, V, E, H:

        W, F, V, E, H = bwmesh(image)

    Attributes:
        mesh: Triangle mesh (W, F)
        pslg: Boundary graph the mesh was built from (V, E, H)
        directive: Directive the triangulator was called with
        stats: Counts and timing of the run
    """

    mesh: Mesh
    pslg: PSLG
    directive: TriangulationDirective
    stats: MeshingStats = field(default_factory=MeshingStats)

    def __iter__(self) -> Iterator[np.ndarray]:
        yield self.mesh.vertices
        yield self.mesh.triangles
        yield self.pslg.vertices
        yield self.pslg.edges
        yield self.pslg.holes


def load_image(image: ImageInput) -> np.ndarray:
    """Accept an in-memory image or a path to an image file.

    Args:
        image: 2D array, or path to a file decoded with Pillow

    Returns:
        2D array
    """
    if isinstance(image, (str, Path)):
        return read_mask(Path(image))
    return np.asarray(image)


class ImageMesher:
    """Orchestrates meshing of a black and white image.

    Manages the complete workflow:
    1. Load the image (path or array)
    2. Trace outer and hole boundaries
    3. Assemble the boundary graph (map, simplify, filter, hole points)
    4. Resolve the triangulation directive
    5. Triangulate

    Example:
        settings = BWMeshSettings(options=MeshOptions(tol=0.5))
        mesher = ImageMesher(settings)
        result = mesher.mesh(Path("shape.png"))
    """

    def __init__(
        self,
        settings: BWMeshSettings | None = None,
        tracer: BoundaryTracer | None = None,
        triangulator: Triangulator | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the mesher.

        Args:
            settings: Meshing and logging settings (defaults if None)
            tracer: Boundary tracer (OpenCV tracer if None)
            triangulator: Triangulator (Triangle if None)
            logger: Bound logger (configured from settings.logging if None)
        """
        self.settings = settings or BWMeshSettings()
        self.tracer = tracer or OpenCVBoundaryTracer()
        self.triangulator = triangulator or TriangleTriangulator()
        if logger is None:
            logger = configure_logging(
                log_file=self.settings.logging.log_file,
                console_level=self.settings.logging.log_level,
                file_level=self.settings.logging.file_log_level,
            )
        self.logger = logger

    @property
    def options(self) -> MeshOptions:
        """Meshing options in effect."""
        return self.settings.options

    def _trace_and_assemble(self, image: ImageInput, meshing_logger: MeshingLogger) -> PSLG:
        mask = binarize(load_image(image))
        height = mask.shape[0]

        boundaries = self.tracer.trace(mask)
        meshing_logger.log_tracing_complete(boundaries.num_outer, len(boundaries.hole_loops))

        assembler = LoopAssembler(tol=self.options.tol, logger=meshing_logger)
        return assembler.assemble(boundaries, height)

    def build_pslg(self, image: ImageInput) -> tuple[PSLG, MeshingStats]:
        """Trace and assemble the boundary graph without triangulating.

        Args:
            image: 2D array or path to an image file

        Returns:
            Tuple of (boundary graph, stats)

        Raises:
            ImageError: If the image cannot be loaded or is not 2D
            HoleLocationError: If a hole loop has no usable interior point
        """
        meshing_logger = MeshingLogger(self.logger)
        stats = meshing_logger.stats
        stats.start_time = time.time()

        pslg = self._trace_and_assemble(image, meshing_logger)

        stats.end_time = time.time()
        return pslg, stats

    def mesh(self, image: ImageInput) -> MeshResult:
        """Mesh an image.

        Args:
            image: 2D array or path to an image file

        Returns:
            MeshResult with mesh, boundary graph, directive and stats

        Raises:
            ImageError: If the image cannot be loaded or is not 2D
            DegenerateGeometryError: If a hole point cannot be placed, or the
                boundary is empty and no directive was supplied
            Exception: Triangulator failures, propagated unchanged
        """
        meshing_logger = MeshingLogger(self.logger)
        stats = meshing_logger.stats
        stats.start_time = time.time()

        self.logger.info("Starting meshing", tol=self.options.tol)

        try:
            pslg = self._trace_and_assemble(image, meshing_logger)

            directive, derived = resolve_directive(pslg, self.options.explicit_directive())
            meshing_logger.log_directive(directive.to_switches(), derived)

            triangulate_start = time.time()
            vertices, triangles = self.triangulator.triangulate(
                pslg.vertices, pslg.edges, pslg.holes, directive
            )
            mesh = Mesh(vertices=vertices, triangles=triangles)
            meshing_logger.log_mesh(
                mesh.num_vertices,
                mesh.num_triangles,
                (time.time() - triangulate_start) * 1000,
            )
        except Exception as e:
            meshing_logger.log_error(e, traceback.format_exc())
            raise

        stats.end_time = time.time()

        self.logger.info(
            "Meshing complete",
            loops=stats.loops_accepted,
            skipped=stats.loops_skipped,
            triangles=stats.triangles,
            duration_seconds=round(stats.duration_seconds, 3),
        )

        return MeshResult(mesh=mesh, pslg=pslg, directive=directive, stats=stats)


def bwmesh(image: ImageInput, *pairs: Any, **options: Any) -> MeshResult:
    """Construct a mesh from a black and white image.

    Options may be given as keywords or as alternating name/value pairs,
    using either Python names or their CamelCase aliases:

        bwmesh(mask, tol=0.5)
        bwmesh(mask, "Tol", 0.5, "TriangleFlags", "q25a2")

    Options are validated before the image is touched. An option may be
    given as a pair or as a keyword, not both.

    Args:
        image: 2D array (grayscale values are thresholded at 0.5) or path to
            an image file (its alpha channel is used when present)
        *pairs: Alternating option names and values
        **options: Named options (tol / Tol, triangle_flags / TriangleFlags)

    Returns:
        MeshResult, unpackable as W, F, V, E, H

    Raises:
        ConfigurationError: If an option is unknown, missing, invalid or
            given twice
        ImageError: If the image cannot be loaded or is not 2D
        DegenerateGeometryError: If the geometry cannot be meshed
    """
    mesh_options = _collect_options(pairs, options)
    mesher = ImageMesher(BWMeshSettings(options=mesh_options))
    return mesher.mesh(image)


def _collect_options(pairs: Sequence[Any], options: dict[str, Any]) -> MeshOptions:
    paired = parse_parameter_pairs(pairs)
    if not options:
        return paired
    named = parse_options(**options)
    duplicates = sorted(paired.model_fields_set & named.model_fields_set)
    if duplicates:
        raise InvalidOptionError(duplicates[0], "given both as a name/value pair and as a keyword")
    return paired.model_copy(update={name: getattr(named, name) for name in named.model_fields_set})
