"""Snake body: ordered segments plus their per-segment color state."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator

from .grid import Cell


@dataclass(frozen=True, slots=True)
class Base:
    """Base snake color; the current wave has not reached this segment."""


@dataclass(frozen=True, slots=True)
class Phase:
    """Segment is showing palette entry ``index``."""

    index: int


@dataclass(frozen=True, slots=True)
class Passed:
    """The wave went by; renders like Base but no longer participates."""


ColorState = Base | Phase | Passed

BASE = Base()
PASSED = Passed()


@dataclass(slots=True)
class Segment:
    cell: Cell
    color: ColorState = BASE
    cascade_start_tick: int = 0


class ActorState:
    """Head-first collection of segments; the head lives at index 0."""

    def __init__(self, segments: Iterator[Segment] | list[Segment]) -> None:
        self._segments: deque[Segment] = deque(segments)
        if not self._segments:
            raise ValueError("an actor needs at least one segment")

    @classmethod
    def spawn(cls, cell: Cell) -> ActorState:
        """Fresh single-segment actor used at the start of every run."""
        return cls([Segment(cell)])

    # --- Accessors ------------------------------------------------------

    @property
    def head(self) -> Segment:
        return self._segments[0]

    @property
    def tail(self) -> Segment:
        return self._segments[-1]

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __getitem__(self, index: int) -> Segment:
        return self._segments[index]

    def cells(self) -> list[Cell]:
        return [segment.cell for segment in self._segments]

    def occupies(self, cell: Cell) -> bool:
        return any(segment.cell == cell for segment in self._segments)

    def segment_at(self, cell: Cell) -> Segment | None:
        for segment in self._segments:
            if segment.cell == cell:
                return segment
        return None

    # --- Geometry (movement engine only) --------------------------------

    def push_head(self, segment: Segment) -> None:
        self._segments.appendleft(segment)

    def drop_tail(self) -> Segment:
        return self._segments.pop()

    def __repr__(self) -> str:
        return f"ActorState({[tuple(cell) for cell in self.cells()]})"
