"""
Undirected lattice edges.

An edge joins two vertex ids. The pair is stored in canonical form
(start <= end) so two constructions of the same connection compare and
hash equal regardless of argument order. Only the endpoints take part in
equality, ordering and hashing. The endpoints are read-only; the kind tag
is puzzle content and may be edited after the grid is built.
"""

from enum import IntEnum
from functools import total_ordering
from typing import Optional, Tuple

from .errors import InvalidEdge
from .vertex import GridVector2, id_to_position


class EdgeKind(IntEnum):
    """Puzzle content of an edge."""

    GAP = 0  # broken in the middle, the line cannot cross it
    PLAIN = 1
    DOT = 2  # the solution line must run along this edge


@total_ordering
class Edge:
    """Canonical undirected connection between two vertex ids."""

    __slots__ = ("_start", "_end", "kind")

    def __init__(self, start: int, end: int, kind: EdgeKind = EdgeKind.PLAIN):
        if start == end:
            raise InvalidEdge(start, end, "endpoints must differ")
        if start > end:
            start, end = end, start
        self._start = start
        self._end = end
        self.kind = kind

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints() == other.endpoints()

    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints() < other.endpoints()

    def __hash__(self):
        return hash(self.endpoints())

    def __repr__(self):
        return f"Edge(start={self._start}, end={self._end}, kind={self.kind!r})"

    @classmethod
    def new(cls, a: int, b: int, kind: EdgeKind = EdgeKind.PLAIN,
            size: Optional[GridVector2] = None) -> "Edge":
        """
        Build an edge, rejecting connections that are not lattice edges.

        Args:
            a, b: Endpoint vertex ids, in any order
            kind: Edge content tag
            size: Board size; when given, both ids must be on the board and
                  lattice-adjacent (horizontal or vertical neighbours)

        Returns:
            Canonical Edge

        Raises:
            InvalidEdge: equal, off-board or non-adjacent endpoints
        """
        if size is not None:
            size = GridVector2(*size)
            pos_a = id_to_position(size, a)
            pos_b = id_to_position(size, b)
            if pos_a is None or pos_b is None:
                raise InvalidEdge(a, b, f"endpoint outside a {size.x}x{size.y} board")
            if a != b and not pos_a.is_immediately_next_to(pos_b):
                raise InvalidEdge(a, b, "endpoints are not lattice neighbours")
        return cls(a, b, kind)

    def endpoints(self) -> Tuple[int, int]:
        return self.start, self.end

    def connects_to(self, vertex: int) -> bool:
        return vertex == self.start or vertex == self.end

    def connects_to_edge(self, other: "Edge") -> bool:
        """True if the two edges share at least one endpoint."""
        return self.connects_to(other.start) or self.connects_to(other.end)

    def shared_vertex_with(self, other: "Edge") -> Optional[int]:
        """
        Vertex shared with another edge.

        Identical edges share both endpoints; the lower id is returned.
        """
        if other.connects_to(self.start):
            return self.start
        if other.connects_to(self.end):
            return self.end
        return None

    def other_endpoint(self, vertex: int) -> Optional[int]:
        if vertex == self.start:
            return self.end
        if vertex == self.end:
            return self.start
        return None
