"""Score-driven movement period."""

from __future__ import annotations


def recompute(score: int, base_speed: int, decrement: int, min_speed: int) -> int:
    """Return the tick period in ms for ``score``: every fruit shaves
    ``decrement`` off ``base_speed`` until ``min_speed`` is reached."""
    if score < 0:
        raise ValueError(f"score cannot be negative, got {score}")
    return max(base_speed - score * decrement, min_speed)
