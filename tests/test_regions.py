"""Tests for region flood fill and partitioning."""

import pytest
from py_witness.core.grid import Grid


def column_barrier(grid, x):
    """Edge handles of the full vertical lattice line at column x."""
    return [
        grid.find_edge(grid.vertex_id((x, y)), grid.vertex_id((x, y + 1)))
        for y in range(grid.size.y)
    ]


class TestFloodFill:
    """Test region flood fill."""

    @pytest.mark.parametrize("start", [0, 1, 2, 3])
    def test_two_by_two_is_one_region(self, start):
        """Test that an open 2x2 board fills completely from any cell."""
        grid = Grid((2, 2))
        region = grid.flood_fill_region(start)

        assert sorted(region) == [0, 1, 2, 3]
        assert region[0] == start

    def test_breadth_first_order(self):
        """Test that cells are visited nearest first."""
        grid = Grid((3, 1))

        assert grid.flood_fill_region(0) == [0, 1, 2]
        assert grid.flood_fill_region(1) == [1, 2, 0]  # right edge comes before left

    @pytest.mark.parametrize("width,height", [(1, 4), (3, 3), (5, 2)])
    def test_fills_whole_board(self, width, height):
        """Test that nothing is visited twice and nothing is missed."""
        grid = Grid((width, height))
        region = grid.flood_fill_region(0)

        assert len(region) == len(set(region)) == width * height

    def test_barrier_splits_board(self):
        """Test that barrier edges are not crossed."""
        grid = Grid((2, 2))
        barrier = column_barrier(grid, 1)

        assert sorted(grid.flood_fill_region(0, barrier)) == [0, 2]
        assert sorted(grid.flood_fill_region(3, barrier)) == [1, 3]

    def test_partial_barrier_does_not_split(self):
        """Test that a barrier with a hole leaves the board connected."""
        grid = Grid((2, 2))
        barrier = column_barrier(grid, 1)[:1]

        assert sorted(grid.flood_fill_region(0, barrier)) == [0, 1, 2, 3]

    def test_enclosed_cell(self):
        """Test a cell fully surrounded by the barrier."""
        grid = Grid((3, 3))
        barrier = grid.cell_edge_ids(4)

        assert grid.flood_fill_region(4, barrier) == [4]
        assert sorted(grid.flood_fill_region(0, barrier)) == [0, 1, 2, 3, 5, 6, 7, 8]

    def test_unknown_start(self):
        """Test that an unknown start cell gives an empty region."""
        grid = Grid((2, 2))

        assert grid.flood_fill_region(4) == []
        assert grid.flood_fill_region(-1) == []


class TestPartitionRegions:
    """Test splitting the board into regions."""

    def test_open_board(self):
        """Test that an open board is a single region."""
        grid = Grid((3, 2))
        regions = grid.partition_regions()

        assert len(regions) == 1
        assert sorted(regions[0]) == list(range(6))

    def test_column_split(self):
        """Test two vertical lines cutting a board into three strips."""
        grid = Grid((3, 2))
        barrier = column_barrier(grid, 1) + column_barrier(grid, 2)
        regions = grid.partition_regions(barrier)

        assert [sorted(r) for r in regions] == [[0, 3], [1, 4], [2, 5]]

    def test_regions_cover_board(self):
        """Test that regions are disjoint and cover every cell."""
        grid = Grid((4, 4))
        barrier = grid.cell_edge_ids(5) + column_barrier(grid, 3)
        regions = grid.partition_regions(barrier)

        cells = [c for region in regions for c in region]
        assert sorted(cells) == list(range(16))
        assert [5] in regions
        assert [r[0] for r in regions] == sorted(r[0] for r in regions)
