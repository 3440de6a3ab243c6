"""
Board cells and their puzzle symbols.

A cell is a face of the lattice, described by the ordered cycle of edges
bounding it. The order in which the edges are supplied is the cell's
winding order (clockwise or anticlockwise, whichever the caller chose) and
is what renderers use to turn the cell into a polygon.

Cell symbols only carry data here; checking a drawn solution against them
is left to a rule engine.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Tuple, Union

import structlog

from .edge import Edge
from .errors import InvalidCellContent, InvalidTriangleCount, NotEnoughEdges, NotInWindingOrder

logger = structlog.get_logger()


class Color(Enum):
    """Colors available to squares and stars."""

    BLACK = "black"
    WHITE = "white"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    ORANGE = "orange"
    PURPLE = "purple"
    CYAN = "cyan"
    MAGENTA = "magenta"


class TriangleCount(IntEnum):
    """Number of triangles drawn in a cell. Only 1, 2 and 3 exist."""

    ONE = 1
    TWO = 2
    THREE = 3

    @classmethod
    def from_value(cls, value: int) -> "TriangleCount":
        """Narrow a plain integer, raising InvalidTriangleCount for anything but 1-3."""
        # bool is an int subclass but never a meaningful count
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidTriangleCount(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidTriangleCount(value) from None


@dataclass(frozen=True)
class Blank:
    """Empty cell."""


@dataclass(frozen=True)
class Square:
    """Colored square: must be segregated from symbols of other colors."""

    color: Color


@dataclass(frozen=True)
class Star:
    """Colored star: must pair with exactly one other symbol of its color."""

    color: Color


@dataclass(frozen=True)
class Triangle:
    """Triangles: the line must touch this cell's edges `count` times."""

    count: TriangleCount

    def __post_init__(self):
        # Frozen, so go through object.__setattr__ to store the narrowed value
        object.__setattr__(self, "count", TriangleCount.from_value(self.count))


CellContent = Union[Blank, Square, Star, Triangle]


def check_content(content) -> CellContent:
    """Return content unchanged if it is a cell symbol, else raise InvalidCellContent."""
    if not isinstance(content, (Blank, Square, Star, Triangle)):
        raise InvalidCellContent(content)
    return content


def walk_boundary(edges: Tuple[Edge, ...]) -> List[int]:
    """
    Derive the boundary vertices of an edge cycle in winding order.

    The first vertex is the endpoint of edges[0] that is not shared with
    edges[1]; every following vertex is the far endpoint of the next edge
    relative to the previous vertex. The walk must come back to the first
    vertex after the last edge.

    Args:
        edges: Boundary edges in winding order, at least 3

    Returns:
        One vertex per edge

    Raises:
        NotInWindingOrder: the walk breaks or does not close
    """
    shared = edges[0].shared_vertex_with(edges[1])
    if shared is None:
        raise NotInWindingOrder(0)
    first = edges[0].other_endpoint(shared)

    vertices = [first]
    current = first
    for position, edge in enumerate(edges):
        current = edge.other_endpoint(current)
        if current is None:
            raise NotInWindingOrder(position)
        vertices.append(current)

    if current != first:
        raise NotInWindingOrder()
    return vertices[:len(edges)]


@dataclass(eq=False)
class Cell:
    """
    One lattice face: an ordered boundary of shared edges plus a symbol.

    Edges are shared with the neighbouring cell and with the owning grid's
    edge table. The boundary is fixed at construction; the content may be
    replaced later.
    """

    edges: Tuple[Edge, ...]
    content: CellContent = field(default_factory=Blank)

    def __post_init__(self):
        self.edges = tuple(self.edges)
        check_content(self.content)
        if len(self.edges) < 3:
            logger.warning("Rejected cell", reason="not enough edges", edges=len(self.edges))
            raise NotEnoughEdges(len(self.edges))

        count = len(self.edges)
        for position, edge in enumerate(self.edges):
            following = self.edges[(position + 1) % count]
            # consecutive edges must share exactly one vertex
            if edge == following or not edge.connects_to_edge(following):
                logger.warning("Rejected cell", reason="edges not in winding order",
                               position=position)
                raise NotInWindingOrder(position)

        try:
            self._winding = walk_boundary(self.edges)
        except NotInWindingOrder as exc:
            logger.warning("Rejected cell", reason="boundary does not close",
                           position=exc.position)
            raise

    def vertices_in_winding_order(self) -> List[int]:
        """Boundary vertex ids in the same winding order as the edges."""
        return list(self._winding)

    def has_edge(self, edge: Edge) -> bool:
        return edge in self.edges

    def has_vertex(self, vertex: int) -> bool:
        return any(e.connects_to(vertex) for e in self.edges)
