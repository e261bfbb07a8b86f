"""Tests for the default settings."""

from snakefade import config


class TestSettings:
    def test_defaults_match_module_constants(self):
        s = config.Settings()
        assert s.move_interval == config.MOVE_INTERVAL == 0.1
        assert s.food_count == config.NUM_FOODS == 3
        assert s.food_decay == config.FOOD_DECAY_SPEED == 0.002
        assert s.food_life == config.INIT_FOOD_LIFE == 1.0
        assert s.food_expiry == config.FOOD_EXPIRY == 0.1
        assert s.restart_delay == config.RESTART_DELAY == 1.0
        assert s.spawn == (2, 2)
        assert s.clamp_food is True

    def test_replace_leaves_other_fields(self):
        s = config.Settings()._replace(food_count=7)
        assert s.food_count == 7
        assert s.move_interval == config.MOVE_INTERVAL
