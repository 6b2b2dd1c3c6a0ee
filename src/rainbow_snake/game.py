"""Pygame front end: window, keyboard decoding, HUD and sound hooks."""

from __future__ import annotations

import logging

import pygame

from .audio import AudioEngine
from .config import CELL_PIXELS, FONT_NAME, FONT_SIZE, FPS, HUD_HEIGHT, PALETTE, GameConfig
from .grid import Cell, Direction
from .session import GameSession, RunState

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def direction_for_key(key: int) -> Direction | None:
    return KEY_TO_DIRECTION.get(key)


class RainbowSnake:
    """Draws a GameSession and feeds it input; holds no game rules."""

    def __init__(self, config: GameConfig | None = None) -> None:
        pygame.init()
        self.session = GameSession(config or GameConfig.from_env())
        self.board_px = self.session.grid.size * CELL_PIXELS
        self.fullscreen = False
        self.window = pygame.display.set_mode(
            (self.board_px, self.board_px + HUD_HEIGHT), pygame.SCALED
        )
        pygame.display.set_caption("Rainbow Snake")
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.audio = AudioEngine()

        self.session.on_grew.connect(self._on_grew)
        self.session.on_collided.connect(self._on_collided)
        self.session.on_board_full.connect(self._on_board_full)

    # --- Session hooks ----------------------------------------------------

    def _on_grew(self, score: int) -> None:
        self.audio.play("eat")

    def _on_collided(self, cell: Cell, reason: str) -> None:
        self.audio.play_game_over()

    def _on_board_full(self, score: int) -> None:
        self.audio.play("eat")

    # --- Input --------------------------------------------------------------

    def handle_events(self) -> bool:
        """Translate window/keyboard events into session requests."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue

            if event.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
            if event.key in (pygame.K_f, pygame.K_F11):
                self._toggle_fullscreen()
                continue

            state = self.session.get_run_state()
            if state in (RunState.NOT_STARTED, RunState.GAME_OVER):
                if event.key in (pygame.K_RETURN, pygame.K_SPACE):
                    self.session.start()
                continue

            if event.key == pygame.K_SPACE:
                self.session.request_pause_toggle()
                continue

            direction = direction_for_key(event.key)
            if direction is not None:
                self.session.request_direction_change(direction)
        return True

    def _toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        flags = pygame.SCALED | (pygame.FULLSCREEN if self.fullscreen else 0)
        self.window = pygame.display.set_mode(
            (self.board_px, self.board_px + HUD_HEIGHT), flags
        )

    # --- Draw ---------------------------------------------------------------

    def _draw_board(self) -> None:
        size = self.session.grid.size
        for y in range(size):
            for x in range(size):
                rect = pygame.Rect(
                    x * CELL_PIXELS, HUD_HEIGHT + y * CELL_PIXELS, CELL_PIXELS, CELL_PIXELS
                )
                pygame.draw.rect(self.window, self.session.get_cell_color(x, y), rect)
                pygame.draw.rect(self.window, PALETTE["grid"], rect, width=1)

    def _draw_hud(self) -> None:
        pygame.draw.rect(self.window, PALETTE["hud"], (0, 0, self.board_px, HUD_HEIGHT))
        text = f"Score: {self.session.get_score()}   Speed: {self.session.period} ms"
        label = self.font.render(text, True, PALETTE["text"])
        self.window.blit(label, (12, (HUD_HEIGHT - label.get_height()) // 2))

    def _draw_overlay(self, lines: list[str]) -> None:
        overlay = pygame.Surface((self.board_px, self.board_px), pygame.SRCALPHA)
        overlay.fill(PALETTE["overlay"])
        self.window.blit(overlay, (0, HUD_HEIGHT))
        total = len(lines) * (FONT_SIZE + 8)
        top = HUD_HEIGHT + (self.board_px - total) // 2
        for i, line in enumerate(lines):
            label = self.font.render(line, True, PALETTE["text"])
            rect = label.get_rect(center=(self.board_px // 2, top + i * (FONT_SIZE + 8)))
            self.window.blit(label, rect)

    def draw(self) -> None:
        self._draw_board()
        self._draw_hud()
        state = self.session.get_run_state()
        if state is RunState.NOT_STARTED:
            self._draw_overlay(["Rainbow Snake", "ENTER to start"])
        elif state is RunState.PAUSED:
            self._draw_overlay(["Paused", "SPACE to resume"])
        elif state is RunState.GAME_OVER:
            self._draw_overlay(
                ["Game Over", f"Score: {self.session.get_score()}", "ENTER to play again"]
            )

    # --- Main loop ----------------------------------------------------------

    def start(self) -> None:
        """Handle input, feed elapsed time to the clocks, then render."""
        clock = pygame.time.Clock()
        running = True
        while running:
            elapsed = clock.tick(FPS)
            running = self.handle_events()
            self.session.scheduler.advance(elapsed)
            self.draw()
            pygame.display.update()
        self.close()

    def close(self) -> None:
        """Detach from the session and shut pygame down."""
        self.session.on_grew.disconnect(self._on_grew)
        self.session.on_collided.disconnect(self._on_collided)
        self.session.on_board_full.disconnect(self._on_board_full)
        pygame.quit()
