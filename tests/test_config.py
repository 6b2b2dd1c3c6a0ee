"""
Tests for GameConfig validation and environment overrides.
"""
import pytest

from rainbow_snake.config import RAINBOW, ConfigError, GameConfig
from rainbow_snake.grid import Cell, Direction


class TestDefaults:
    """Tests for the stock configuration."""

    def test_classic_values(self):
        config = GameConfig()
        assert config.grid_size == 20
        assert (config.base_speed, config.speed_decrement, config.min_speed) == (150, 10, 50)
        assert config.animation_period == 300
        assert config.palette_size == len(RAINBOW) == 7
        assert config.start_cell == Cell(5, 5)
        assert config.start_direction is Direction.RIGHT

    @pytest.mark.parametrize("size", [2, 3, 4, 5])
    def test_small_grids_get_a_start_cell_inside(self, size):
        config = GameConfig(grid_size=size)
        x, y = config.start_cell
        assert 0 <= x < size and 0 <= y < size
        assert config.start_cell == Cell(size // 2, size // 2)

    def test_explicit_start_cell_is_kept(self):
        assert GameConfig(grid_size=5, start_cell=Cell(0, 4)).start_cell == Cell(0, 4)

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            GameConfig().grid_size = 30


class TestValidation:
    """Tests for rejected settings."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"grid_size": 1},
            {"min_speed": 0},
            {"base_speed": 40, "min_speed": 50},
            {"speed_decrement": -5},
            {"animation_period": 0},
            {"palette": ()},
            {"spawn_attempts": 0},
            {"grid_size": 5, "start_cell": Cell(5, 2)},
        ],
    )
    def test_bad_settings_raise(self, overrides):
        with pytest.raises(ConfigError):
            GameConfig(**overrides)

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


class TestFromEnv:
    """Tests for RAINBOW_SNAKE_* overrides."""

    def test_reads_overrides(self, monkeypatch):
        monkeypatch.setenv("RAINBOW_SNAKE_GRID_SIZE", "12")
        monkeypatch.setenv("RAINBOW_SNAKE_BASE_SPEED", "200")
        monkeypatch.setenv("RAINBOW_SNAKE_ANIMATION_PERIOD", "250")
        config = GameConfig.from_env()
        assert config.grid_size == 12
        assert config.base_speed == 200
        assert config.animation_period == 250
        assert config.min_speed == 50

    def test_small_grid_from_env(self, monkeypatch):
        monkeypatch.setenv("RAINBOW_SNAKE_GRID_SIZE", "4")
        config = GameConfig.from_env()
        assert config.grid_size == 4
        assert config.start_cell == Cell(2, 2)

    def test_blank_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("RAINBOW_SNAKE_MIN_SPEED", "  ")
        assert GameConfig.from_env().min_speed == 50

    def test_garbage_raises(self, monkeypatch):
        monkeypatch.setenv("RAINBOW_SNAKE_SPEED_DECREMENT", "fast")
        with pytest.raises(ConfigError):
            GameConfig.from_env()
