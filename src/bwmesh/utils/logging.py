"""Logging utilities for bwmesh."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class MeshingStats:
    """Statistics from a meshing run."""

    loops_traced: int = 0
    outer_loops: int = 0
    hole_loops: int = 0
    loops_skipped: int = 0
    vertices: int = 0
    edges: int = 0
    hole_points: int = 0
    mesh_vertices: int = 0
    triangles: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def loops_accepted(self) -> int:
        """Loops that made it into the boundary graph."""
        return self.loops_traced - self.loops_skipped

    @property
    def duration_seconds(self) -> float:
        """Calculate meshing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_bwmesh", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._bwmesh = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._bwmesh = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("bwmesh")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class MeshingLogger:
    """Logger for tracking pipeline progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = MeshingStats()

    def log_tracing_complete(self, outer_count: int, hole_count: int) -> None:
        """Log boundary tracing results."""
        self._logger.info(
            "Boundaries traced",
            outer=outer_count,
            holes=hole_count,
        )
        self._stats.loops_traced = outer_count + hole_count
        self._stats.outer_loops = outer_count
        self._stats.hole_loops = hole_count

    def log_loop_accepted(self, loop_index: int, kind: str, vertex_count: int) -> None:
        """Log a loop entering the boundary graph."""
        self._logger.debug(
            "Loop accepted",
            loop=loop_index,
            kind=kind,
            vertices=vertex_count,
        )

    def log_loop_skipped(self, loop_index: int, kind: str, vertex_count: int) -> None:
        """Log a degenerate loop dropped from the boundary graph."""
        self._logger.debug(
            "Loop skipped",
            loop=loop_index,
            kind=kind,
            vertices=vertex_count,
            reason="degenerate",
        )
        self._stats.loops_skipped += 1

    def log_hole_point(self, loop_index: int, x: float, y: float) -> None:
        """Log a hole indicator point."""
        self._logger.debug(
            "Hole point placed",
            loop=loop_index,
            x=round(x, 6),
            y=round(y, 6),
        )

    def log_pslg(self, vertices: int, edges: int, holes: int) -> None:
        """Log the assembled boundary graph."""
        self._logger.info(
            "Boundary graph assembled",
            vertices=vertices,
            edges=edges,
            holes=holes,
        )
        self._stats.vertices = vertices
        self._stats.edges = edges
        self._stats.hole_points = holes

    def log_directive(self, switches: str, derived: bool) -> None:
        """Log the triangulation directive in use."""
        self._logger.info(
            "Triangulation directive",
            switches=switches,
            source="quality heuristic" if derived else "caller",
        )

    def log_mesh(self, vertices: int, triangles: int, duration_ms: float) -> None:
        """Log the triangulator output."""
        self._logger.info(
            "Mesh generated",
            vertices=vertices,
            triangles=triangles,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.mesh_vertices = vertices
        self._stats.triangles = triangles

    def log_error(self, error: Exception, traceback: str | None = None) -> None:
        """Log a failed meshing run."""
        self._logger.error(
            "Meshing failed",
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )

    @property
    def stats(self) -> MeshingStats:
        """Get current meshing statistics."""
        return self._stats
