"""Boundary loop types.

This module defines the loop types flowing through the pipeline:
- LoopKind: Enum distinguishing outer boundaries from hole boundaries
- TracedBoundaries: Tracer output, outer loops and hole loops kept apart
- BoundaryLoop: An accepted loop in geometric coordinates

Pixel loops are (n, 2) integer arrays of 1-indexed (row, column) pairs.
Geometric loops are (n, 2) float arrays of (x, y) pairs. Both are implicitly
closed: the last point connects back to the first.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

import numpy as np


class LoopKind(Enum):
    """Role of a boundary loop.

    - OUTER: Boundary of a connected foreground region
    - HOLE: Boundary of a background region enclosed by foreground
    """

    OUTER = auto()
    HOLE = auto()


@dataclass(frozen=True, eq=False)
class TracedBoundaries:
    """Ordered boundary loops returned by a boundary tracer.

    Keeping outer and hole loops in separate sequences replaces the flat
    "loops plus outer count" convention. The flat view is still available
    through ``loops`` and ``num_outer``; in it, outer loops always come first.

    Attributes:
        outer_loops: Pixel loops bounding foreground regions
        hole_loops: Pixel loops bounding holes in foreground regions
    """

    outer_loops: tuple[np.ndarray, ...] = field(default_factory=tuple)
    hole_loops: tuple[np.ndarray, ...] = field(default_factory=tuple)

    @classmethod
    def from_flat(cls, loops: Sequence[np.ndarray], num_outer: int) -> "TracedBoundaries":
        """Build from a flat loop sequence whose first ``num_outer`` loops are outer.

        Args:
            loops: All loops, outer loops first
            num_outer: Number of leading outer loops

        Returns:
            TracedBoundaries instance

        Raises:
            ValueError: If num_outer is outside [0, len(loops)]
        """
        if not 0 <= num_outer <= len(loops):
            raise ValueError(
                f"num_outer must be between 0 and {len(loops)}, got {num_outer}"
            )
        arrays = [np.asarray(loop, dtype=np.int64).reshape(-1, 2) for loop in loops]
        return cls(
            outer_loops=tuple(arrays[:num_outer]),
            hole_loops=tuple(arrays[num_outer:]),
        )

    @property
    def num_outer(self) -> int:
        """Number of outer loops (the leading loops of the flat view)."""
        return len(self.outer_loops)

    @property
    def loops(self) -> list[np.ndarray]:
        """Flat loop list: outer loops followed by hole loops."""
        return [*self.outer_loops, *self.hole_loops]

    def __len__(self) -> int:
        return len(self.outer_loops) + len(self.hole_loops)

    def is_empty(self) -> bool:
        """Check if the tracer found no boundaries at all.

        Returns:
            True for an all-background image
        """
        return len(self) == 0

    def iter_loops(self) -> Iterator[tuple[int, LoopKind, np.ndarray]]:
        """Iterate in flat order.

        Yields:
            Tuples of (flat index, kind, pixel loop)
        """
        for index, loop in enumerate(self.outer_loops):
            yield index, LoopKind.OUTER, loop
        offset = len(self.outer_loops)
        for index, loop in enumerate(self.hole_loops):
            yield offset + index, LoopKind.HOLE, loop


@dataclass(frozen=True, eq=False)
class BoundaryLoop:
    """A boundary loop accepted into the boundary graph.

    Each accepted loop is a self-contained unit: its edges are expressed
    relative to its own vertices and only offset when loops are concatenated.

    Attributes:
        vertices: (n, 2) geometric coordinates, n >= 3
        kind: Outer boundary or hole
        source_index: Index of the loop in the tracer's flat order
    """

    vertices: np.ndarray
    kind: LoopKind
    source_index: int

    def __len__(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def is_hole(self) -> bool:
        """True if this loop bounds a hole."""
        return self.kind == LoopKind.HOLE

    def edges(self, offset: int = 0) -> np.ndarray:
        """Cyclic edge list of this loop.

        Edge i joins vertex i to vertex i+1, and the last vertex back to the
        first, following the loop's traversal direction.

        Args:
            offset: Index of this loop's first vertex in the global list

        Returns:
            (n, 2) integer array of vertex index pairs
        """
        n = len(self)
        start = np.arange(n, dtype=np.int64)
        return np.column_stack([start, np.roll(start, -1)]) + offset

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the loop.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        mins = self.vertices.min(axis=0)
        maxs = self.vertices.max(axis=0)
        return (float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with vertices as nested lists
        """
        return {
            "vertices": self.vertices.tolist(),
            "kind": self.kind.name,
            "source_index": self.source_index,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BoundaryLoop":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by to_dict()

        Returns:
            BoundaryLoop instance
        """
        return cls(
            vertices=np.asarray(data["vertices"], dtype=float).reshape(-1, 2),
            kind=LoopKind[data["kind"]],
            source_index=data["source_index"],
        )
