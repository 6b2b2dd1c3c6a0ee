"""Centralized configuration and palette definitions for Rainbow Snake."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .grid import Cell, Direction

Color = tuple[int, int, int]


class ConfigError(ValueError):
    """Raised when a GameConfig cannot describe a playable run."""


GRID_SIZE: int = 20  # 20x20 cells
CELL_PIXELS: int = 24
HUD_HEIGHT: int = 48
FONT_NAME: str = "consolas"
FONT_SIZE: int = 24
FPS: int = 120

BASE_SPEED: int = 150  # ms between moves at score 0
SPEED_DECREMENT: int = 10  # ms shaved off per fruit
MIN_SPEED: int = 50
ANIMATION_PERIOD: int = 300  # rainbow clock, independent of game speed
SPAWN_ATTEMPTS: int = 64

START_CELL: Cell = Cell(5, 5)  # clamped towards the centre on small grids
START_DIRECTION: Direction = Direction.RIGHT

RAINBOW: tuple[Color, ...] = (
    (255, 0, 0),
    (255, 127, 0),
    (255, 255, 0),
    (0, 255, 0),
    (0, 0, 255),
    (75, 0, 130),
    (139, 0, 255),
)
SNAKE_COLOR: Color = (76, 175, 80)
TARGET_COLOR: Color = (255, 0, 0)
BACKGROUND_COLOR: Color = (255, 255, 255)

PALETTE = {
    "grid": (225, 225, 225),
    "hud": (24, 24, 24),
    "text": (240, 240, 240),
    "overlay": (10, 10, 10, 170),
}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(f"RAINBOW_SNAKE_{name}")
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"RAINBOW_SNAKE_{name} must be an integer, got {raw!r}") from exc


def default_start_cell(grid_size: int) -> Cell:
    """START_CELL, pulled in to the middle of grids too small to hold it."""
    return Cell(min(START_CELL.x, grid_size // 2), min(START_CELL.y, grid_size // 2))


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Settings fixed at construction and re-applied on every reset."""

    grid_size: int = GRID_SIZE
    base_speed: int = BASE_SPEED
    speed_decrement: int = SPEED_DECREMENT
    min_speed: int = MIN_SPEED
    animation_period: int = ANIMATION_PERIOD
    palette: tuple[Color, ...] = RAINBOW
    snake_color: Color = SNAKE_COLOR
    target_color: Color = TARGET_COLOR
    background_color: Color = BACKGROUND_COLOR
    start_cell: Cell | None = None
    start_direction: Direction = START_DIRECTION
    spawn_attempts: int = SPAWN_ATTEMPTS

    def __post_init__(self) -> None:
        if self.grid_size < 2:
            raise ConfigError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.min_speed <= 0:
            raise ConfigError(f"min_speed must be positive, got {self.min_speed}")
        if self.base_speed < self.min_speed:
            raise ConfigError(
                f"base_speed ({self.base_speed}) is below min_speed ({self.min_speed})"
            )
        if self.speed_decrement < 0:
            raise ConfigError("speed_decrement cannot be negative")
        if self.animation_period <= 0:
            raise ConfigError(
                f"animation_period must be positive, got {self.animation_period}"
            )
        if not self.palette:
            raise ConfigError("palette needs at least one color")
        if self.spawn_attempts < 1:
            raise ConfigError("spawn_attempts must be at least 1")
        if self.start_cell is None:
            object.__setattr__(self, "start_cell", default_start_cell(self.grid_size))
        x, y = self.start_cell
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise ConfigError(
                f"start_cell {tuple(self.start_cell)} is outside a "
                f"{self.grid_size}x{self.grid_size} grid"
            )

    @property
    def palette_size(self) -> int:
        return len(self.palette)

    @classmethod
    def from_env(cls) -> GameConfig:
        """Build a config honoring RAINBOW_SNAKE_* environment overrides."""
        return cls(
            grid_size=_env_int("GRID_SIZE", GRID_SIZE),
            base_speed=_env_int("BASE_SPEED", BASE_SPEED),
            speed_decrement=_env_int("SPEED_DECREMENT", SPEED_DECREMENT),
            min_speed=_env_int("MIN_SPEED", MIN_SPEED),
            animation_period=_env_int("ANIMATION_PERIOD", ANIMATION_PERIOD),
        )
