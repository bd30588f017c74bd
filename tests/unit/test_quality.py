"""Unit tests for the default triangulation quality heuristic."""

import numpy as np
import pytest

from bwmesh.core.quality import (
    AREA_TIGHTENING_FACTOR,
    DEFAULT_MIN_ANGLE,
    average_squared_edge_length,
    default_directive,
    resolve_directive,
    squared_edge_lengths,
)
from bwmesh.domain import PSLG, TriangulationDirective
from bwmesh.exceptions import DegenerateGeometryError, EmptyBoundaryError


@pytest.fixture
def rectangle_pslg() -> PSLG:
    """3 x 1 rectangle: squared edge lengths 9, 1, 9, 1."""
    return PSLG(
        vertices=np.array([[0.0, 0.0], [3.0, 0.0], [3.0, 1.0], [0.0, 1.0]]),
        edges=np.array([[0, 1], [1, 2], [2, 3], [3, 0]]),
    )


class TestSquaredEdgeLengths:
    """Tests for squared edge length helpers."""

    def test_lengths(self, rectangle_pslg: PSLG) -> None:
        """Test squared lengths of each edge."""
        lengths = squared_edge_lengths(rectangle_pslg.vertices, rectangle_pslg.edges)
        np.testing.assert_allclose(lengths, [9.0, 1.0, 9.0, 1.0])

    def test_average_halved(self, rectangle_pslg: PSLG) -> None:
        """Test that the mean squared length is divided by the tightening factor."""
        value = average_squared_edge_length(rectangle_pslg.vertices, rectangle_pslg.edges)
        assert AREA_TIGHTENING_FACTOR == 2.0
        assert value == pytest.approx(2.5)

    def test_order_independent(self, rectangle_pslg: PSLG) -> None:
        """Test that permuting edges does not change the result."""
        rng = np.random.default_rng(11)
        edges = rectangle_pslg.edges[rng.permutation(4)][:, ::-1]
        a = average_squared_edge_length(rectangle_pslg.vertices, rectangle_pslg.edges)
        b = average_squared_edge_length(rectangle_pslg.vertices, edges)
        assert a == pytest.approx(b)

    def test_empty_edges(self) -> None:
        """Test that an empty edge set fails instead of returning NaN."""
        with pytest.raises(EmptyBoundaryError):
            average_squared_edge_length(np.zeros((0, 2)), np.zeros((0, 2), dtype=int))


class TestDefaultDirective:
    """Tests for default_directive and resolve_directive."""

    def test_default_directive(self, rectangle_pslg: PSLG) -> None:
        """Test minimum angle, area bound and quiet flag."""
        directive = default_directive(rectangle_pslg)

        assert directive.min_angle == DEFAULT_MIN_ANGLE == 30.0
        assert directive.max_area == pytest.approx(2.5)
        assert directive.quiet
        assert directive.to_switches() == "pq30a2.50000000000000000Q"

    def test_empty_graph_is_degenerate(self) -> None:
        """Test that an empty graph raises a degenerate geometry error."""
        with pytest.raises(DegenerateGeometryError, match="no edges"):
            default_directive(PSLG())

    def test_explicit_directive_used_verbatim(self) -> None:
        """Test that an explicit directive skips the heuristic, even for an empty graph."""
        explicit = TriangulationDirective.from_flags("q20a1")
        directive, derived = resolve_directive(PSLG(), explicit)

        assert directive is explicit
        assert not derived

    def test_derived_when_not_given(self, rectangle_pslg: PSLG) -> None:
        """Test that the heuristic runs when no directive is given."""
        directive, derived = resolve_directive(rectangle_pslg, None)
        assert derived
        assert directive.max_area == pytest.approx(2.5)
