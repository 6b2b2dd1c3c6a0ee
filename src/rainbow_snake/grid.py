"""Grid coordinates, headings and the bounds predicate."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, NamedTuple


class Direction(Enum):
    """Heading with its unit vector; y grows downwards like screen space."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))

    def is_reverse_of(self, other: Direction) -> bool:
        return self.opposite is other


class Cell(NamedTuple):
    x: int
    y: int

    def offset(self, direction: Direction) -> Cell:
        return Cell(self.x + direction.dx, self.y + direction.dy)


class Grid:
    """Square board of ``size`` x ``size`` cells."""

    def __init__(self, size: int) -> None:
        self.size = size

    @property
    def capacity(self) -> int:
        return self.size * self.size

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.size and 0 <= cell.y < self.size

    def cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""
        for y in range(self.size):
            for x in range(self.size):
                yield Cell(x, y)

    def __repr__(self) -> str:
        return f"Grid({self.size})"
