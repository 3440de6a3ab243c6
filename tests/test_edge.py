"""Tests for lattice edges."""

import pytest
from py_witness.core.edge import Edge, EdgeKind
from py_witness.core.errors import GridError, InvalidEdge
from py_witness.core.vertex import GridVector2


class TestEdgeConstruction:
    """Test canonical edge construction."""

    def test_canonical_order(self):
        """Test that endpoint order does not matter."""
        forward = Edge(1, 3, EdgeKind.DOT)
        backward = Edge(3, 1, EdgeKind.DOT)

        assert forward == backward
        assert backward.start == 1
        assert backward.end == 3
        assert backward.endpoints() == (1, 3)

    def test_kind_is_not_identity(self):
        """Test that equality and hashing only use the endpoints."""
        gap = Edge(0, 1, EdgeKind.GAP)
        dot = Edge(1, 0, EdgeKind.DOT)

        assert gap == dot
        assert hash(gap) == hash(dot)
        assert len({gap, dot}) == 1

    def test_default_kind(self):
        """Test that edges are plain unless told otherwise."""
        assert Edge(0, 1).kind == EdgeKind.PLAIN

    def test_total_order(self):
        """Test that edges sort by their endpoint pair."""
        edges = [Edge(4, 5), Edge(1, 0), Edge(3, 1), Edge(0, 3)]

        assert [e.endpoints() for e in sorted(edges)] == [(0, 1), (0, 3), (1, 3), (4, 5)]

    def test_endpoints_are_read_only(self):
        """Test that endpoints cannot be reassigned while the kind can."""
        edge = Edge(1, 4)

        with pytest.raises(AttributeError):
            edge.start = 5
        with pytest.raises(AttributeError):
            edge.end = 0

        edge.kind = EdgeKind.DOT
        assert edge.endpoints() == (1, 4)
        assert edge.kind == EdgeKind.DOT
        assert hash(edge) == hash(Edge(4, 1))

    def test_equal_endpoints_rejected(self):
        """Test that a vertex cannot be joined to itself."""
        with pytest.raises(InvalidEdge) as excinfo:
            Edge(2, 2)

        assert excinfo.value.start == 2
        assert isinstance(excinfo.value, GridError)
        assert isinstance(excinfo.value, ValueError)

    def test_lattice_checked_constructor(self):
        """Test that Edge.new accepts horizontal and vertical neighbours."""
        size = GridVector2(2, 2)

        assert Edge.new(0, 1, size=size) == Edge(0, 1)
        assert Edge.new(4, 1, size=size) == Edge(1, 4)
        assert Edge.new(7, 8, EdgeKind.GAP, size=(2, 2)).kind == EdgeKind.GAP

    @pytest.mark.parametrize("a,b", [
        (0, 4),   # diagonal
        (0, 2),   # two steps apart
        (2, 3),   # consecutive ids on different rows
        (0, 9),   # off the board
        (5, 5),   # same vertex
    ])
    def test_lattice_checked_constructor_rejects(self, a, b):
        """Test that Edge.new rejects anything but lattice edges."""
        with pytest.raises(InvalidEdge):
            Edge.new(a, b, size=GridVector2(2, 2))


class TestEdgePredicates:
    """Test edge adjacency predicates."""

    def test_connects_to(self):
        """Test endpoint membership."""
        edge = Edge(3, 4)

        assert edge.connects_to(3)
        assert edge.connects_to(4)
        assert not edge.connects_to(5)

    def test_connects_to_edge(self):
        """Test that edges sharing an endpoint are connected."""
        assert Edge(0, 1).connects_to_edge(Edge(1, 4))
        assert Edge(0, 1).connects_to_edge(Edge(0, 3))
        assert not Edge(0, 1).connects_to_edge(Edge(3, 4))

    def test_shared_vertex(self):
        """Test finding the shared endpoint."""
        assert Edge(0, 1).shared_vertex_with(Edge(1, 4)) == 1
        assert Edge(1, 4).shared_vertex_with(Edge(3, 4)) == 4
        assert Edge(0, 1).shared_vertex_with(Edge(3, 4)) is None

    def test_other_endpoint(self):
        """Test walking across an edge."""
        edge = Edge(1, 4)

        assert edge.other_endpoint(1) == 4
        assert edge.other_endpoint(4) == 1
        assert edge.other_endpoint(0) is None
