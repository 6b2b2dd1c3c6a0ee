"""
Tests for grid coordinates and directions.
"""
import pytest

from rainbow_snake.grid import Cell, Direction, Grid


class TestInBounds:
    """Tests for the bounds predicate."""

    @pytest.mark.parametrize("cell", [Cell(0, 0), Cell(4, 4), Cell(0, 4), Cell(2, 3)])
    def test_accepts_cells_inside(self, cell):
        assert Grid(5).in_bounds(cell)

    @pytest.mark.parametrize(
        "cell", [Cell(-1, 0), Cell(0, -1), Cell(5, 0), Cell(0, 5), Cell(5, 5), Cell(-3, 7)]
    )
    def test_rejects_cells_outside(self, cell):
        assert not Grid(5).in_bounds(cell)

    def test_exactly_size_squared_cells_are_in_bounds(self):
        """Scanning a margin around the board finds only the board itself."""
        grid = Grid(4)
        inside = [
            Cell(x, y) for x in range(-2, 6) for y in range(-2, 6) if grid.in_bounds(Cell(x, y))
        ]
        assert len(inside) == grid.capacity == 16

    def test_cells_iterates_row_major(self):
        assert list(Grid(2).cells()) == [Cell(0, 0), Cell(1, 0), Cell(0, 1), Cell(1, 1)]


class TestDirection:
    """Tests for headings."""

    def test_offsets(self):
        origin = Cell(3, 3)
        assert origin.offset(Direction.UP) == Cell(3, 2)
        assert origin.offset(Direction.DOWN) == Cell(3, 4)
        assert origin.offset(Direction.LEFT) == Cell(2, 3)
        assert origin.offset(Direction.RIGHT) == Cell(4, 3)

    @pytest.mark.parametrize(
        "direction,reverse",
        [
            (Direction.UP, Direction.DOWN),
            (Direction.DOWN, Direction.UP),
            (Direction.LEFT, Direction.RIGHT),
            (Direction.RIGHT, Direction.LEFT),
        ],
    )
    def test_opposite(self, direction, reverse):
        assert direction.opposite is reverse
        assert reverse.is_reverse_of(direction)

    def test_perpendicular_is_not_reverse(self):
        assert not Direction.UP.is_reverse_of(Direction.LEFT)

    def test_cell_is_immutable(self):
        cell = Cell(1, 2)
        with pytest.raises(AttributeError):
            cell.x = 5
