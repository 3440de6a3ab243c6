"""
Lattice vertices and the coordinate <-> id mapping.

A board that is W cells wide and H cells tall sits on a lattice of
(W+1) x (H+1) vertices. Vertices are identified by a dense integer id:

    id = x + (W + 1) * y

so ids run left to right, then top to bottom. All lookups are bounds
checked and return None instead of raising for positions or ids that are
not on the board.
"""

from enum import IntEnum
from typing import NamedTuple, Optional


class VertexKind(IntEnum):
    """Puzzle content of a lattice vertex."""

    ABSENT = 0  # not part of the board
    PLAIN = 1
    DOT = 2  # the solution line must pass through this vertex


class GridVector2(NamedTuple):
    """Integer lattice coordinate, also used for board sizes."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "GridVector2":
        return GridVector2(self.x + dx, self.y + dy)

    def is_immediately_next_to(self, other: "GridVector2") -> bool:
        """True when other is exactly one step up, down, left or right (never diagonal)."""
        return abs(self.x - other.x) + abs(self.y - other.y) == 1


def vertex_count(size: GridVector2) -> int:
    """Number of lattice vertices for a board of the given size."""
    return (size.x + 1) * (size.y + 1)


def vertex_exists(size: GridVector2, vertex_id: int) -> bool:
    return 0 <= vertex_id < vertex_count(size)


def position_to_id(size: GridVector2, pos: GridVector2) -> Optional[int]:
    """
    Map a lattice position to its vertex id.

    Args:
        size: Board size in cells
        pos: Lattice coordinate, 0 <= x <= size.x and 0 <= y <= size.y

    Returns:
        Vertex id, or None if the position is off the lattice
    """
    if not (0 <= pos.x <= size.x and 0 <= pos.y <= size.y):
        return None
    return pos.x + (size.x + 1) * pos.y


def id_to_position(size: GridVector2, vertex_id: int) -> Optional[GridVector2]:
    """
    Inverse of position_to_id.

    Args:
        size: Board size in cells
        vertex_id: Vertex id to locate

    Returns:
        Lattice coordinate, or None if the id is out of range
    """
    if not vertex_exists(size, vertex_id):
        return None
    row_length = size.x + 1
    return GridVector2(vertex_id % row_length, vertex_id // row_length)
