"""Run-state machine tying the engine, the cascade and the two clocks together."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum

from .actor import ActorState, ColorState
from .cascade import CascadeAnimator, color_for
from .config import Color, GameConfig
from .engine import BoardFull, Collided, Continue, Grew, MovementEngine
from .events import Signal
from .grid import Cell, Direction, Grid
from .scheduler import PeriodicHandle, Scheduler
from .spawner import Placed, TargetSpawner
from .speed import recompute

logger = logging.getLogger(__name__)


class RunState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class GridSnapshot:
    """Read-only copy of everything a renderer needs for one frame."""

    grid_size: int
    cells: tuple[Cell, ...]
    colors: tuple[ColorState, ...]
    target: Cell | None
    score: int
    state: RunState
    period: int

    @property
    def head(self) -> Cell:
        return self.cells[0]


class GameSession:
    """Owns one snake run from reset to game over.

    Two periodic handles drive it: the simulation clock calls :meth:`tick`
    at the score-dependent period, the animation clock calls
    :meth:`advance_cascade` at ``config.animation_period``. Both are
    created on the injected scheduler and cancelled on pause/game over.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.scheduler = scheduler or Scheduler()
        self.grid = Grid(self.config.grid_size)
        self.spawner = TargetSpawner(
            self.grid, max_attempts=self.config.spawn_attempts, rng=rng
        )
        self.engine = MovementEngine(self.grid, self.spawner)
        self.cascade = CascadeAnimator(self.config.palette_size)

        self.on_grew = Signal("grew")
        self.on_collided = Signal("collided")
        self.on_board_full = Signal("board_full")

        self._sim_clock: PeriodicHandle | None = None
        self._anim_clock: PeriodicHandle | None = None

        self.state = RunState.NOT_STARTED
        self.actor: ActorState
        self.target: Cell | None = None
        self.score = 0
        self.period = self.config.base_speed
        self.direction = self.config.start_direction
        self.pending_direction: Direction | None = None
        self.reset()

    # --- Lifecycle ------------------------------------------------------

    def reset(self) -> None:
        """Discard the current run and rebuild it from the config."""
        self._stop_clocks()
        self.state = RunState.NOT_STARTED
        self.score = 0
        self.period = recompute(
            0, self.config.base_speed, self.config.speed_decrement, self.config.min_speed
        )
        self.direction = self.config.start_direction
        self.pending_direction = None
        self.cascade.reset()
        self.actor = ActorState.spawn(self.config.start_cell)
        placement = self.spawner.place(self.actor)
        self.target = placement.cell if isinstance(placement, Placed) else None

    def start(self) -> None:
        """Begin a fresh run; also the way out of GAME_OVER."""
        if self.state in (RunState.RUNNING, RunState.PAUSED):
            logger.debug("start() ignored while %s", self.state.value)
            return
        self.reset()
        self.state = RunState.RUNNING
        self._start_clocks()
        logger.info("Run started on a %dx%d grid", self.grid.size, self.grid.size)

    # --- Inputs -----------------------------------------------------------

    def request_direction_change(self, direction: Direction) -> None:
        """Buffer a heading for the next tick; the last request wins."""
        if self.state is not RunState.RUNNING:
            logger.debug("Direction %s ignored while %s", direction.name, self.state.value)
            return
        self.pending_direction = direction

    def request_pause_toggle(self) -> None:
        if self.state is RunState.RUNNING:
            self._stop_clocks()
            self.state = RunState.PAUSED
            logger.info("Paused at score %d", self.score)
        elif self.state is RunState.PAUSED:
            self.state = RunState.RUNNING
            self._start_clocks()
            logger.info("Resumed with a %d ms period", self.period)
        else:
            logger.debug("Pause toggle ignored while %s", self.state.value)

    # --- Clock callbacks --------------------------------------------------

    def tick(self) -> None:
        """Simulation clock: one movement step."""
        if self.state is not RunState.RUNNING or self.target is None:
            return

        self.direction = self.engine.resolve_direction(
            self.direction, self.pending_direction
        )
        self.pending_direction = None

        outcome = self.engine.tick(
            self.direction, self.actor, self.target, self.cascade.tick
        )
        if isinstance(outcome, Collided):
            self._game_over()
            logger.info(
                "Collided with %s at %s, final score %d",
                outcome.reason,
                tuple(outcome.cell),
                self.score,
            )
            self.on_collided.emit(outcome.cell, outcome.reason)
        elif isinstance(outcome, BoardFull):
            self.score += 1
            self.target = None
            self._game_over()
            logger.info("Board full, final score %d", self.score)
            self.on_board_full.emit(self.score)
        elif isinstance(outcome, Grew):
            self.score += 1
            self.target = outcome.target
            self._apply_speed()
            self.cascade.start(self.actor)
            self.on_grew.emit(self.score)
        elif isinstance(outcome, Continue):
            self.cascade.admit(self.actor.head)

    def advance_cascade(self) -> None:
        """Animation clock: one step of the rainbow wave."""
        if self.state is not RunState.RUNNING:
            return
        self.cascade.advance(self.actor)

    # --- Outputs -----------------------------------------------------------

    def get_run_state(self) -> RunState:
        return self.state

    def get_score(self) -> int:
        return self.score

    def get_cell_color(self, x: int, y: int) -> Color:
        """Body first, then target, then background."""
        cell = Cell(x, y)
        segment = self.actor.segment_at(cell)
        if segment is not None:
            return color_for(segment, self.config.palette, self.config.snake_color)
        if cell == self.target:
            return self.config.target_color
        return self.config.background_color

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(
            grid_size=self.grid.size,
            cells=tuple(self.actor.cells()),
            colors=tuple(segment.color for segment in self.actor),
            target=self.target,
            score=self.score,
            state=self.state,
            period=self.period,
        )

    # --- Internals ----------------------------------------------------------

    def _apply_speed(self) -> None:
        self.period = recompute(
            self.score,
            self.config.base_speed,
            self.config.speed_decrement,
            self.config.min_speed,
        )
        # Restart rather than retime so no tick lands on the old period.
        if self._sim_clock is not None:
            self._sim_clock.cancel()
        self._sim_clock = self.scheduler.every(self.period, self.tick, name="simulation")

    def _start_clocks(self) -> None:
        self._stop_clocks()
        self._sim_clock = self.scheduler.every(self.period, self.tick, name="simulation")
        self._anim_clock = self.scheduler.every(
            self.config.animation_period, self.advance_cascade, name="animation"
        )

    def _stop_clocks(self) -> None:
        for handle in (self._sim_clock, self._anim_clock):
            if handle is not None:
                handle.cancel()
        self._sim_clock = None
        self._anim_clock = None

    def _game_over(self) -> None:
        self._stop_clocks()
        self.state = RunState.GAME_OVER
