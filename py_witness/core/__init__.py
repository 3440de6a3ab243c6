"""
Core puzzle grid model.
"""

from .vertex import GridVector2, VertexKind, position_to_id, id_to_position
from .edge import Edge, EdgeKind
from .cell import Cell, CellContent, Blank, Square, Star, Triangle, TriangleCount, Color
from .grid import Grid
from .errors import (
    GridError, InvalidGridSize, InvalidEdge, InvalidCellTopology,
    NotEnoughEdges, NotInWindingOrder, InvalidTriangleCount, InvalidCellContent, UnknownHandle
)

__all__ = ['GridVector2', 'VertexKind', 'position_to_id', 'id_to_position',
           'Edge', 'EdgeKind',
           'Cell', 'CellContent', 'Blank', 'Square', 'Star', 'Triangle', 'TriangleCount', 'Color',
           'Grid',
           'GridError', 'InvalidGridSize', 'InvalidEdge', 'InvalidCellTopology',
           'NotEnoughEdges', 'NotInWindingOrder', 'InvalidTriangleCount', 'InvalidCellContent',
           'UnknownHandle']
