"""Food placement on free grid cells."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .actor import ActorState
from .grid import Cell, Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Placed:
    cell: Cell


@dataclass(frozen=True, slots=True)
class BoardFull:
    """No free cell is left for a target."""


PlacementResult = Placed | BoardFull


class TargetSpawner:
    """Uniformly samples an unoccupied cell with a bounded number of rolls."""

    def __init__(
        self,
        grid: Grid,
        *,
        max_attempts: int = 64,
        rng: random.Random | None = None,
    ) -> None:
        self.grid = grid
        self.max_attempts = max_attempts
        self.rng = rng or random.Random()

    def place(self, actor: ActorState) -> PlacementResult:
        size = self.grid.size
        for _ in range(self.max_attempts):
            cell = Cell(self.rng.randrange(size), self.rng.randrange(size))
            if not actor.occupies(cell):
                return Placed(cell)

        # Rolls exhausted: crowded board, fall back to an exact scan.
        occupied = set(actor.cells())
        free = [cell for cell in self.grid.cells() if cell not in occupied]
        if not free:
            logger.info(
                "Board full: %d segments on %d cells", len(actor), self.grid.capacity
            )
            return BoardFull()
        logger.debug(
            "Random placement gave up after %d rolls; picking from %d free cells",
            self.max_attempts,
            len(free),
        )
        return Placed(self.rng.choice(free))
