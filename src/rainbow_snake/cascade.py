"""Staggered rainbow wave that runs on its own clock along the snake."""

from __future__ import annotations

import logging
from enum import Enum

from .actor import BASE, PASSED, ActorState, Base, Passed, Phase, Segment
from .config import Color

logger = logging.getLogger(__name__)


class CascadeState(Enum):
    IDLE = "idle"
    ACTIVE = "active"


class CascadeAnimator:
    """Colors segments head-to-tail, one palette step per animation tick.

    Each segment waits until ``cascade_start_tick`` before stepping through
    the palette once; the head starts immediately and every segment behind
    it starts one tick later than its predecessor. The animator only writes
    ``color`` and ``cascade_start_tick``; it never adds or removes segments.
    """

    def __init__(self, palette_size: int) -> None:
        if palette_size < 1:
            raise ValueError("palette_size must be at least 1")
        self.palette_size = palette_size
        self.state = CascadeState.IDLE
        self.tick = 0

    @property
    def active(self) -> bool:
        return self.state is CascadeState.ACTIVE

    def reset(self) -> None:
        self.state = CascadeState.IDLE
        self.tick = 0

    def start(self, actor: ActorState) -> None:
        """Launch a new wave from the head (called when the snake grows)."""
        for index, segment in enumerate(actor):
            segment.cascade_start_tick = self.tick + index
            if isinstance(segment.color, Passed):
                segment.color = BASE
        actor.head.color = Phase(0)
        if not self.active:
            logger.debug("Cascade started at tick %d over %d segments", self.tick, len(actor))
        self.state = CascadeState.ACTIVE

    def admit(self, segment: Segment) -> None:
        """Take in a head the engine just added.

        The wave front is already behind a head prepended while Active, so
        it joins as Passed and the wave can still settle while the snake
        keeps moving. While Idle it stays Base for the next start().
        """
        if self.active:
            segment.color = PASSED

    def advance(self, actor: ActorState) -> None:
        """Step the wave by one animation tick; no-op while idle."""
        if not self.active:
            return

        self.tick += 1
        settled = True
        for segment in actor:
            if segment.cascade_start_tick <= self.tick:
                self._step_segment(segment)
            if not isinstance(segment.color, Passed):
                settled = False

        if settled:
            for segment in actor:
                segment.color = BASE
            self.state = CascadeState.IDLE
            logger.debug("Cascade finished at tick %d", self.tick)

    def _step_segment(self, segment: Segment) -> None:
        color = segment.color
        if isinstance(color, Base):
            segment.color = Phase(0)
        elif isinstance(color, Phase):
            following = color.index + 1
            segment.color = Phase(following) if following < self.palette_size else PASSED


def color_for(
    segment: Segment, palette: tuple[Color, ...], base_color: Color
) -> Color:
    """Display color of a segment: its palette entry or the base body color."""
    if isinstance(segment.color, Phase):
        return palette[segment.color.index]
    return base_color
