"""
Tests for the speed controller.
"""
import pytest

from rainbow_snake.speed import recompute


class TestRecompute:
    """Tests for the score to period mapping."""

    def test_floors_at_min_speed(self):
        assert recompute(score=100, base_speed=150, decrement=10, min_speed=50) == 50

    def test_each_point_shaves_decrement(self):
        assert recompute(0, 150, 10, 50) == 150
        assert recompute(1, 150, 10, 50) == 140
        assert recompute(7, 150, 10, 50) == 80

    def test_monotonic_non_increasing(self):
        periods = [recompute(score, 150, 10, 50) for score in range(40)]
        assert periods == sorted(periods, reverse=True)
        assert min(periods) == 50

    def test_zero_decrement_keeps_base(self):
        assert recompute(30, 120, 0, 50) == 120

    def test_negative_score_rejected(self):
        with pytest.raises(ValueError):
            recompute(-1, 150, 10, 50)
