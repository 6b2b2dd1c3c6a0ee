"""One-cell movement step with wall/self collision and growth."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .actor import BASE, ActorState, Segment
from .grid import Cell, Direction, Grid
from .spawner import Placed, TargetSpawner

logger = logging.getLogger(__name__)

WALL = "wall"
SELF = "self"


@dataclass(frozen=True, slots=True)
class Continue:
    actor: ActorState


@dataclass(frozen=True, slots=True)
class Grew:
    actor: ActorState
    target: Cell


@dataclass(frozen=True, slots=True)
class Collided:
    cell: Cell
    reason: str


@dataclass(frozen=True, slots=True)
class BoardFull:
    """The actor ate the last fruit that could fit on the board."""

    actor: ActorState


TickOutcome = Continue | Grew | Collided | BoardFull


class MovementEngine:
    """Advances the actor; owns geometry and length, never color."""

    def __init__(self, grid: Grid, spawner: TargetSpawner) -> None:
        self.grid = grid
        self.spawner = spawner

    @staticmethod
    def resolve_direction(current: Direction, requested: Direction | None) -> Direction:
        """Heading for the next tick; a 180-degree turn keeps ``current``."""
        if requested is None or requested is current:
            return current
        if requested.is_reverse_of(current):
            logger.debug("Rejected reverse turn %s -> %s", current.name, requested.name)
            return current
        return requested

    def tick(
        self,
        direction: Direction,
        actor: ActorState,
        target: Cell,
        cascade_tick: int = 0,
    ) -> TickOutcome:
        """Move the actor one cell in ``direction``.

        Collision is checked against every segment, tail included, before
        anything is mutated; a Collided outcome leaves ``actor`` untouched.
        """
        new_head = actor.head.cell.offset(direction)

        if not self.grid.in_bounds(new_head):
            return Collided(new_head, WALL)
        if actor.occupies(new_head):
            return Collided(new_head, SELF)

        actor.push_head(Segment(new_head, BASE, cascade_tick))

        if new_head != target:
            actor.drop_tail()
            return Continue(actor)

        placement = self.spawner.place(actor)
        if isinstance(placement, Placed):
            return Grew(actor, placement.cell)
        return BoardFull(actor)
