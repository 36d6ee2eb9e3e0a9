"""
Unit tests for configuration validation

Tests the configuration validation system including:
- Game configuration validation
- File persistence of settings
- Context manager for temporary config changes
"""

import pytest
from pydantic import ValidationError

from paddle_arena.utils.config import (
    GameConfig,
    game_config,
    game_config_tmp,
    load_config_from_file,
)


class TestGameConfigValidation:
    """Test game configuration validation"""

    def test_valid_default_config(self):
        """Test that default configuration is valid"""
        config = GameConfig()

        assert config.VARIANT == "breakout"
        assert (config.ARENA_WIDTH, config.ARENA_HEIGHT) == (768, 1024)
        assert config.STEP_MS == 20
        assert config.finger_radius() == pytest.approx(20.0)

    def test_pong_variant_is_valid(self):
        assert GameConfig(VARIANT="pong").VARIANT == "pong"

    def test_unknown_variant(self):
        """Test validation catches unknown variants"""
        with pytest.raises(ValidationError, match="Unknown variant"):
            GameConfig(VARIANT="tennis")

    def test_zero_step(self):
        """Test validation catches a non-positive step"""
        with pytest.raises(ValidationError):
            GameConfig(STEP_MS=0)

    def test_zero_ball_velocity(self):
        """Test validation catches a ball that never moves"""
        with pytest.raises(ValidationError, match="zero vector"):
            GameConfig(BALL_VELOCITY=(0.0, 0.0))

    def test_ball_larger_than_arena(self):
        with pytest.raises(ValidationError, match="BALL_SIDE"):
            GameConfig(BALL_SIDE=800)

    def test_paddle_wider_than_arena(self):
        with pytest.raises(ValidationError, match="PADDLE_WIDTH"):
            GameConfig(PADDLE_WIDTH=800)

    def test_brick_grid_too_wide(self):
        """Test validation catches a brick grid leaving the arena"""
        with pytest.raises(ValidationError, match="Brick grid"):
            GameConfig(BRICK_COLS=20)

    def test_brick_grid_ignored_for_pong(self):
        """The two-paddle arena has no bricks to fit"""
        assert GameConfig(VARIANT="pong", BRICK_COLS=20).BRICK_COLS == 20

    def test_assignment_is_validated(self):
        """Test that assignment goes through validation"""
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.ARENA_WIDTH = -1
        assert config.ARENA_WIDTH == 768

    def test_paddle_start_outside_arena(self):
        with pytest.raises(ValidationError, match="PADDLE_START_X"):
            GameConfig(PADDLE_START_X=700.0)

    @pytest.mark.parametrize("start", [(760.0, 300.0), (300.0, 1010.0), (-1.0, 300.0)])
    def test_ball_start_outside_arena(self, start):
        """The ball must start fully inside the arena"""
        with pytest.raises(ValidationError, match="BALL_START"):
            GameConfig(BALL_START=start)

    def test_overlapping_input_bands(self):
        """Two-paddle pointer bands must stay apart"""
        with pytest.raises(ValidationError, match="INPUT_BAND"):
            GameConfig(VARIANT="pong", INPUT_BAND=512)
        assert GameConfig(VARIANT="pong", INPUT_BAND=511).INPUT_BAND == 511
        assert GameConfig(INPUT_BAND=600).INPUT_BAND == 600

    def test_reset_to_defaults(self):
        config = GameConfig(ARENA_WIDTH=1200, BRICK_COLS=20, VARIANT="pong")
        config.reset_to_defaults()
        assert config == GameConfig()


class TestConfigFiles:
    """Test saving and loading configuration files"""

    def test_save_and_load(self, tmp_path):
        """Saved settings load back into an equal config"""
        path = tmp_path / "arena.json"
        config = GameConfig(VARIANT="pong", BALL_VELOCITY=(0.3, -0.1))

        config.save_to_file(str(path))

        assert GameConfig.load_from_file(str(path)) == config

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GameConfig.load_from_file(str(tmp_path / "missing.json"))

    def test_load_into_global_config(self, tmp_path):
        """The global config takes every loaded field"""
        path = tmp_path / "arena.json"
        GameConfig(VARIANT="pong", FPS=30).save_to_file(str(path))

        try:
            assert load_config_from_file(str(path)) is True
            assert game_config.VARIANT == "pong"
            assert game_config.FPS == 30
        finally:
            game_config.reset_to_defaults()

    def test_load_into_global_config_missing(self, tmp_path):
        assert load_config_from_file(str(tmp_path / "missing.json")) is False
        assert game_config == GameConfig()


class TestTemporaryConfig:
    """Test context manager for temporary config changes"""

    def test_values_restored(self):
        with game_config_tmp(VARIANT="pong", FPS=30):
            assert game_config.VARIANT == "pong"
            assert game_config.FPS == 30
        assert game_config.VARIANT == "breakout"
        assert game_config.FPS == 60

    def test_values_restored_on_error(self):
        with pytest.raises(RuntimeError):
            with game_config_tmp(STEP_MS=10):
                raise RuntimeError("boom")
        assert game_config.STEP_MS == 20

    def test_invalid_value_rejected(self):
        with pytest.raises(ValidationError):
            with game_config_tmp(FPS=30, VARIANT="tennis"):
                pass
        assert game_config.VARIANT == "breakout"
        assert game_config.FPS == 60

    def test_dependent_values_restored(self):
        """A wider arena and the brick grid it allows are restored together"""
        with game_config_tmp(ARENA_WIDTH=2000, BRICK_COLS=30):
            assert game_config.BRICK_COLS == 30
        assert game_config == GameConfig()

    def test_partial_change_restored(self):
        """A value rejected midway leaves the earlier ones restored"""
        with pytest.raises(ValidationError):
            with game_config_tmp(ARENA_WIDTH=2000, BRICK_COLS=30, STEP_MS=0):
                pass
        assert game_config == GameConfig()
