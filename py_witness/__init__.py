"""
Witness-style line puzzle boards.

This package provides:
- The lattice model: vertices, edges and cells with their puzzle symbols
- Grid construction for rectangular boards
- Topology queries: edge/cell adjacency and region flood fill
"""

from .core import (
    GridVector2, VertexKind, Edge, EdgeKind,
    Cell, Blank, Square, Star, Triangle, TriangleCount, Color,
    Grid, GridError, InvalidCellTopology, NotEnoughEdges, NotInWindingOrder
)

__all__ = ['GridVector2', 'VertexKind', 'Edge', 'EdgeKind',
           'Cell', 'Blank', 'Square', 'Star', 'Triangle', 'TriangleCount', 'Color',
           'Grid', 'GridError', 'InvalidCellTopology', 'NotEnoughEdges', 'NotInWindingOrder']
