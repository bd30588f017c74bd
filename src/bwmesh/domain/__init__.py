"""Domain models for bwmesh.

This module contains the data passed between pipeline stages: traced pixel
loops, accepted boundary loops, the boundary graph (PSLG), triangulation
directives and the resulting mesh. All models are:

- Immutable (frozen dataclasses); arrays are never modified after creation
- Independent of the tracing and triangulation libraries

Key classes:
- TracedBoundaries: Outer and hole pixel loops from the tracer
- BoundaryLoop: A loop accepted into the boundary graph
- PSLG: Global vertex, edge and hole point arrays
- TriangulationDirective: Quality constraints for the triangulator
- Mesh: Output vertices and triangles
"""

from bwmesh.domain.directive import TriangulationDirective
from bwmesh.domain.loop import BoundaryLoop, LoopKind, TracedBoundaries
from bwmesh.domain.pslg import PSLG, LoopSpan, Mesh

__all__: list[str] = [
    # Enums
    "LoopKind",
    # Core types
    "TracedBoundaries",
    "BoundaryLoop",
    "LoopSpan",
    "PSLG",
    "TriangulationDirective",
    "Mesh",
]
