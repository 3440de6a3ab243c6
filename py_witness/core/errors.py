"""Exceptions raised by the puzzle grid model."""

from typing import Optional


class GridError(ValueError):
    """Base class for invalid puzzle grid input."""


class InvalidGridSize(GridError):
    """Board dimensions are empty or larger than the configured maximum."""

    def __init__(self, width: int, height: int, reason: str):
        self.width = width
        self.height = height
        super().__init__(f"Invalid grid size {width}x{height}: {reason}")


class InvalidEdge(GridError):
    """Edge endpoints are equal, off the board, or not lattice neighbours."""

    def __init__(self, start: int, end: int, reason: str):
        self.start = start
        self.end = end
        super().__init__(f"Invalid edge ({start}, {end}): {reason}")


class InvalidCellTopology(GridError):
    """The supplied boundary edges do not describe a closed cell."""


class NotEnoughEdges(InvalidCellTopology):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"A cell needs at least 3 boundary edges, got {count}")


class NotInWindingOrder(InvalidCellTopology):
    def __init__(self, position: Optional[int] = None):
        # Index of the edge where the boundary walk broke, if known
        self.position = position
        if position is None:
            message = "Cell edges do not form a closed boundary"
        else:
            message = f"Cell edge {position} does not continue the boundary walk"
        super().__init__(message)


class InvalidTriangleCount(GridError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Triangle count must be 1, 2 or 3, got {value!r}")


class UnknownHandle(GridError):
    """A vertex, edge or cell handle is not owned by the grid."""

    def __init__(self, kind: str, handle: int):
        self.kind = kind
        self.handle = handle
        super().__init__(f"Unknown {kind} handle: {handle}")


class InvalidCellContent(GridError):
    """A cell symbol is not one of Blank, Square, Star or Triangle."""

    def __init__(self, content):
        self.content = content
        super().__init__(f"Not a cell symbol: {content!r}")
