"""Core processing algorithms for bwmesh.

This module contains the core algorithms for:

- Boundary tracing (outer and hole loops of a binary image)
- Geometry operations (signed area, point-in-polygon, scan-line crossings)
- Polyline simplification (Douglas-Peucker on closed loops)
- Hole location (a point strictly inside each hole)
- Boundary graph assembly and quality heuristics
- Triangulation through Triangle

Key functions:
- pixel_to_geometric: Map pixel coordinates to the y-up geometric frame
- signed_area: Calculate polygon area using shoelace formula
- point_in_polygon: Test if point is inside polygon
- douglas_peucker: Simplify an open polyline
- simplify_closed_polygon: Simplify a closed loop
- find_interior_point: Locate a point strictly inside a loop
- resolve_directive: Choose the triangulation directive
- bwmesh: Mesh an image in one call

Key classes:
- OpenCVBoundaryTracer: Traces boundaries with OpenCV
- LoopAssembler: Builds the boundary graph from traced loops
- TriangleTriangulator: Meshes the boundary graph with Triangle
- ImageMesher: Orchestrates the full pipeline
"""

from bwmesh.core.assembler import LoopAssembler, concatenate_loops
from bwmesh.core.coordinates import geometric_to_pixel, pixel_to_geometric
from bwmesh.core.geometry import (
    chord_distances,
    point_in_polygon,
    scanline_crossings,
    signed_area,
)
from bwmesh.core.hole_locator import find_interior_point, nested_loops
from bwmesh.core.processor import ImageMesher, MeshResult, bwmesh
from bwmesh.core.quality import (
    average_squared_edge_length,
    default_directive,
    resolve_directive,
)
from bwmesh.core.simplify import douglas_peucker, simplify_closed_polygon
from bwmesh.core.tracer import BoundaryTracer, OpenCVBoundaryTracer, binarize
from bwmesh.core.triangulator import TriangleTriangulator, Triangulator

__all__ = [
    # Tracing
    "BoundaryTracer",
    "OpenCVBoundaryTracer",
    "binarize",
    # Processor classes
    "ImageMesher",
    "MeshResult",
    "bwmesh",
    # Assembly
    "LoopAssembler",
    "concatenate_loops",
    # Triangulation
    "TriangleTriangulator",
    "Triangulator",
    "average_squared_edge_length",
    "default_directive",
    "resolve_directive",
    # Geometry functions
    "chord_distances",
    "douglas_peucker",
    "find_interior_point",
    "geometric_to_pixel",
    "nested_loops",
    "pixel_to_geometric",
    "point_in_polygon",
    "scanline_crossings",
    "signed_area",
    "simplify_closed_polygon",
]
