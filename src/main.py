"""Entry point for the Rainbow Snake game."""

from __future__ import annotations

import logging
import os

from rainbow_snake.game import RainbowSnake


def main() -> None:
    logging.basicConfig(
        level=os.getenv("RAINBOW_SNAKE_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = RainbowSnake()
    game.start()


if __name__ == "__main__":
    main()
