"""
Tests for the pygame front end's key decoding.
"""
import pygame
import pytest

from rainbow_snake.game import direction_for_key
from rainbow_snake.grid import Direction


class TestKeyDecoding:
    """Tests for arrow and WASD mapping."""

    @pytest.mark.parametrize(
        "key,direction",
        [
            (pygame.K_UP, Direction.UP),
            (pygame.K_w, Direction.UP),
            (pygame.K_DOWN, Direction.DOWN),
            (pygame.K_s, Direction.DOWN),
            (pygame.K_LEFT, Direction.LEFT),
            (pygame.K_a, Direction.LEFT),
            (pygame.K_RIGHT, Direction.RIGHT),
            (pygame.K_d, Direction.RIGHT),
        ],
    )
    def test_movement_keys(self, key, direction):
        assert direction_for_key(key) is direction

    def test_other_keys_are_not_directions(self):
        assert direction_for_key(pygame.K_SPACE) is None
        assert direction_for_key(pygame.K_p) is None
