"""
Witness puzzle grid.

The grid owns every vertex, edge and cell of a rectangular board and hands
out integer handles into its tables:

    +---+---+---+
    |   |   |   |
    +---+---+---+
    |   |   |   |
    +---+---+---+

is a 3x2 board: 12 vertices, 17 edges and 6 cells. Construction runs once,
vertices -> edges -> cells, and nothing is added or removed afterwards.
Only the content tags (vertex kind, edge kind, cell symbol) may change.

Handle conventions:
- vertex id:  x + (W + 1) * y over the (W+1) x (H+1) lattice
- edge id:    insertion order; for each lattice point in vertex id order,
              the edge to its left neighbour, then the edge to the one above
- cell id:    x + W * y over the W x H board
"""

from collections import deque
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np
import structlog

from ..config import Settings, settings
from .cell import Cell, CellContent, check_content
from .edge import Edge, EdgeKind
from .errors import InvalidGridSize, UnknownHandle
from .vertex import (
    GridVector2,
    VertexKind,
    id_to_position,
    position_to_id,
    vertex_count,
    vertex_exists,
)

logger = structlog.get_logger()

VectorLike = Union[GridVector2, Tuple[int, int]]


class Grid:
    """A Witness puzzle board: lattice vertices, edges and cells."""

    def __init__(self, size: VectorLike, config: Optional[Settings] = None):
        """
        Build the full lattice for a board of the given size.

        Args:
            size: (width, height) in cells
            config: Settings providing the maximum board size; defaults to
                    the module-level settings

        Raises:
            InvalidGridSize: width or height below 1 or above the maximum
        """
        config = config or settings
        size = GridVector2(*size)
        self._check_size(size, config)

        logger.info("Building lattice", width=size.x, height=size.y)

        self.size = size
        self._vertex_kinds = np.full(vertex_count(size), int(VertexKind.PLAIN), dtype=np.int8)

        ids = np.arange(vertex_count(size))
        self._positions = np.column_stack((ids % (size.x + 1), ids // (size.x + 1)))
        self._positions.setflags(write=False)

        self._edges: List[Edge] = []
        self._edge_index: Dict[Edge, int] = {}
        self._build_edges()

        self._cells: List[Cell] = []
        # edge id -> ids of the (at most two) cells it bounds
        self._edge_cells: List[List[int]] = [[] for _ in self._edges]
        self._build_cells()

        logger.info("Lattice built",
                    vertices=len(self._vertex_kinds),
                    edges=len(self._edges),
                    cells=len(self._cells))

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "Grid":
        """Build a board with the configured default size."""
        config = config or settings
        return cls(GridVector2(config.default_width, config.default_height), config)

    @staticmethod
    def _check_size(size: GridVector2, config: Settings) -> None:
        reason = None
        if size.x < 1 or size.y < 1:
            reason = "a board needs at least one cell"
        elif config.max_width is not None and size.x > config.max_width:
            reason = f"wider than the maximum width {config.max_width}"
        elif config.max_height is not None and size.y > config.max_height:
            reason = f"taller than the maximum height {config.max_height}"
        if reason is not None:
            logger.warning("Rejected grid size", width=size.x, height=size.y, reason=reason)
            raise InvalidGridSize(size.x, size.y, reason)

    def _build_edges(self) -> None:
        """Join every lattice point to its left neighbour and the one above."""
        for vertex_id in range(vertex_count(self.size)):
            pos = id_to_position(self.size, vertex_id)
            if pos.x != 0:
                self._add_edge(Edge.new(vertex_id, vertex_id - 1, size=self.size))
            if pos.y != 0:
                self._add_edge(Edge.new(vertex_id, vertex_id - (self.size.x + 1), size=self.size))

    def _add_edge(self, edge: Edge) -> None:
        self._edge_index[edge] = len(self._edges)
        self._edges.append(edge)

    def _build_cells(self) -> None:
        """Create one cell per unit square, bounded top, right, bottom, left."""
        for y in range(self.size.y):
            for x in range(self.size.x):
                corner = GridVector2(x, y)
                top_left = position_to_id(self.size, corner)
                top_right = position_to_id(self.size, corner.offset(1, 0))
                bottom_left = position_to_id(self.size, corner.offset(0, 1))
                bottom_right = position_to_id(self.size, corner.offset(1, 1))

                boundary = [
                    self.find_edge(top_left, top_right),
                    self.find_edge(top_right, bottom_right),
                    self.find_edge(bottom_left, bottom_right),
                    self.find_edge(top_left, bottom_left),
                ]

                cell_id = len(self._cells)
                self._cells.append(Cell(tuple(self._edges[e] for e in boundary)))
                for edge_id in boundary:
                    self._edge_cells[edge_id].append(cell_id)

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Edge table; an edge's position is its handle."""
        return tuple(self._edges)

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Cell table; a cell's position is its handle."""
        return tuple(self._cells)

    def vertex_ids(self) -> range:
        return range(vertex_count(self.size))

    def edge(self, edge_id: int) -> Optional[Edge]:
        if 0 <= edge_id < len(self._edges):
            return self._edges[edge_id]
        return None

    def cell(self, cell_id: int) -> Optional[Cell]:
        if 0 <= cell_id < len(self._cells):
            return self._cells[cell_id]
        return None

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def vertex_exists(self, vertex_id: int) -> bool:
        return vertex_exists(self.size, vertex_id)

    def vertex_id(self, pos: VectorLike) -> Optional[int]:
        return position_to_id(self.size, GridVector2(*pos))

    def vertex_position(self, vertex_id: int) -> Optional[GridVector2]:
        return id_to_position(self.size, vertex_id)

    def vertex_kind(self, vertex_id: int) -> Optional[VertexKind]:
        if not self.vertex_exists(vertex_id):
            return None
        return VertexKind(int(self._vertex_kinds[vertex_id]))

    def set_vertex_kind(self, vertex_id: int, kind: VertexKind) -> None:
        if not self.vertex_exists(vertex_id):
            raise UnknownHandle("vertex", vertex_id)
        self._vertex_kinds[vertex_id] = int(VertexKind(kind))

    def vertex_positions(self) -> np.ndarray:
        """(V, 2) read-only array of lattice coordinates indexed by vertex id."""
        return self._positions

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def find_edge(self, a: int, b: int) -> Optional[int]:
        """Handle of the edge joining two vertices, or None if they are not joined."""
        if a == b:
            return None
        return self._edge_index.get(Edge(a, b))

    def edges_touching_vertex(self, vertex_id: int) -> List[int]:
        """Handles of the edges ending at a vertex, in table order."""
        return [i for i, edge in enumerate(self._edges) if edge.connects_to(vertex_id)]

    def set_edge_kind(self, edge_id: int, kind: EdgeKind) -> None:
        edge = self.edge(edge_id)
        if edge is None:
            raise UnknownHandle("edge", edge_id)
        edge.kind = EdgeKind(kind)

    def edge_positions(self, edge_id: int) -> Optional[np.ndarray]:
        """(2, 2) array with the lattice coordinates of both endpoints."""
        edge = self.edge(edge_id)
        if edge is None:
            return None
        return self._positions[[edge.start, edge.end]]

    def cells_bordering_edge(self, edge_id: int) -> List[int]:
        """Cells on either side of an edge; a single cell on the board boundary."""
        if self.edge(edge_id) is None:
            return []
        return list(self._edge_cells[edge_id])

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------

    def cell_at(self, pos: VectorLike) -> Optional[int]:
        x, y = pos
        if 0 <= x < self.size.x and 0 <= y < self.size.y:
            return x + self.size.x * y
        return None

    def cell_position(self, cell_id: int) -> Optional[GridVector2]:
        if self.cell(cell_id) is None:
            return None
        return GridVector2(cell_id % self.size.x, cell_id // self.size.x)

    def set_cell_content(self, cell_id: int, content: CellContent) -> None:
        cell = self.cell(cell_id)
        if cell is None:
            raise UnknownHandle("cell", cell_id)
        cell.content = check_content(content)

    def cell_polygon(self, cell_id: int) -> Optional[np.ndarray]:
        """(n, 2) array of boundary coordinates in winding order, for drawing."""
        cell = self.cell(cell_id)
        if cell is None:
            return None
        return self._positions[cell.vertices_in_winding_order()]

    def cell_edge_ids(self, cell_id: int) -> List[int]:
        """Handles of a cell's boundary edges in winding order."""
        cell = self.cell(cell_id)
        if cell is None:
            return []
        return [self._edge_index[edge] for edge in cell.edges]

    def cell_across_edge(self, cell_id: int, edge_id: int) -> Optional[int]:
        """
        The cell on the other side of an edge.

        Returns None when the edge lies on the board boundary, or when the
        edge does not border the given cell at all.
        """
        if self.cell(cell_id) is None or self.edge(edge_id) is None:
            return None
        bordering = self._edge_cells[edge_id]
        if cell_id not in bordering:
            return None
        for other in bordering:
            if other != cell_id:
                return other
        return None

    def cells_adjacent_to(self, cell_id: int) -> List[int]:
        """Cells sharing a boundary edge with this one, sorted by handle."""
        return sorted(set(self._neighbours(cell_id)))

    def _neighbours(self, cell_id: int, barrier: FrozenSet[int] = frozenset()) -> Iterator[int]:
        for edge_id in self.cell_edge_ids(cell_id):
            if edge_id in barrier:
                continue
            other = self.cell_across_edge(cell_id, edge_id)
            if other is not None:
                yield other

    # ------------------------------------------------------------------
    # Regions
    # ------------------------------------------------------------------

    def flood_fill_region(self, start: int, barrier: Iterable[int] = ()) -> List[int]:
        """
        Collect the region containing a cell.

        Breadth-first search over cells sharing an edge, never crossing an
        edge listed in `barrier` (typically the edges covered by a drawn
        solution line).

        Args:
            start: Cell handle to start from
            barrier: Edge handles that separate cells

        Returns:
            Cell handles in visiting order, starting with `start`;
            empty if `start` is not a cell of this grid
        """
        if self.cell(start) is None:
            return []
        blocked = frozenset(barrier)

        region = [start]
        visited = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in self._neighbours(current, blocked):
                if neighbour not in visited:
                    visited.add(neighbour)
                    region.append(neighbour)
                    queue.append(neighbour)

        logger.debug("Flood fill complete", start=start, cells=len(region),
                     barrier=len(blocked))
        return region

    def partition_regions(self, barrier: Iterable[int] = ()) -> List[List[int]]:
        """
        Split the whole board into regions separated by `barrier` edges.

        Regions are listed in order of their lowest cell handle.
        """
        blocked = frozenset(barrier)
        region_ids = np.full(len(self._cells), -1, dtype=np.int32)
        regions: List[List[int]] = []

        for cell_id in range(len(self._cells)):
            if region_ids[cell_id] != -1:
                continue
            region = self.flood_fill_region(cell_id, blocked)
            region_ids[region] = len(regions)
            regions.append(region)

        logger.debug("Regions marked", regions=len(regions), barrier=len(blocked))
        return regions

    def __repr__(self) -> str:
        return (f"Grid(size={self.size.x}x{self.size.y}, vertices={len(self._vertex_kinds)}, "
                f"edges={len(self._edges)}, cells={len(self._cells)})")
