"""
Paddle Arena game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)

VARIANTS = ("breakout", "pong")

DEFAULT_CONFIG_FILE = "paddle_arena_config.json"


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Mutable, with every assignment validated
    model_config = {"validate_assignment": True}

    # Game variant: single paddle with bricks, or two paddles
    VARIANT: str = Field(default="breakout", description="Entity set: breakout or pong")

    # Arena dimensions
    ARENA_WIDTH: int = Field(default=768, gt=0, description="Arena width in pixels")
    ARENA_HEIGHT: int = Field(default=1024, gt=0, description="Arena height in pixels")

    # Simulation timing
    STEP_MS: int = Field(default=20, gt=0, description="Fixed simulation step in milliseconds")
    REFINE_FRACTION: float = Field(
        default=0.1, gt=0, le=1.0, description="Step fraction used to refine square overlaps"
    )

    # Paddles
    PADDLE_WIDTH: int = Field(default=100, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: int = Field(default=20, gt=0, description="Paddle height in pixels")
    PADDLE_MARGIN: int = Field(default=80, ge=0, description="Paddle distance from the edge")
    PADDLE_SPEED: float = Field(default=1.5, gt=0, description="Paddle speed in pixels/ms")
    PADDLE_START_X: float = Field(default=180.0, ge=0, description="Paddle initial position")
    FINGER_RADIUS_RATIO: float = Field(
        default=0.2, ge=0, le=0.5, description="Dead-zone half-width as a paddle width ratio"
    )

    # Ball
    BALL_SIDE: int = Field(default=20, gt=0, description="Ball side length in pixels")
    BALL_START: tuple[float, float] = Field(default=(300.0, 300.0), description="Ball position")
    BALL_VELOCITY: tuple[float, float] = Field(
        default=(-0.2, -0.2), description="Ball initial velocity in pixels/ms"
    )

    # Bricks (breakout variant only)
    BRICK_ROWS: int = Field(default=3, ge=0, description="Number of brick rows")
    BRICK_COLS: int = Field(default=12, ge=0, description="Number of brick columns")
    BRICK_WIDTH: int = Field(default=50, gt=0, description="Brick width in pixels")
    BRICK_HEIGHT: int = Field(default=30, gt=0, description="Brick height in pixels")
    BRICK_ORIGIN_X: int = Field(default=80, ge=0, description="Left edge of the brick grid")
    BRICK_ORIGIN_Y: int = Field(default=100, ge=0, description="Top edge of the brick grid")

    # Input
    INPUT_BAND: int = Field(default=100, gt=0, description="Pointer band height per paddle")
    RESET_KEY: str = Field(default="r", min_length=1, description="Key that resets the game")
    QUIT_KEY: str = Field(default="escape", min_length=1, description="Key that quits")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    WINDOW_TITLE: str = Field(default="Paddle Arena", description="Window caption")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(80, 80, 80), description="RGB color")
    ENTITY_COLOR: tuple[int, int, int] = Field(default=(200, 200, 200), description="RGB color")
    OBSTACLE_COLOR: tuple[int, int, int] = Field(default=(200, 100, 200), description="RGB color")

    @field_validator("VARIANT")
    @classmethod
    def validate_variant(cls, v: str) -> str:
        """Validate variant name exists"""
        if v not in VARIANTS:
            raise ValueError(f"Unknown variant '{v}'. Available: {list(VARIANTS)}")
        return v

    @field_validator("BALL_VELOCITY")
    @classmethod
    def validate_ball_velocity(cls, v: tuple[float, float]) -> tuple[float, float]:
        """A ball moving along a single axis never reaches the other walls"""
        if v[0] == 0 and v[1] == 0:
            raise ValueError("BALL_VELOCITY must not be the zero vector")
        return v

    @field_validator("BALL_SIDE")
    @classmethod
    def validate_ball_side(cls, v: int, info: ValidationInfo) -> int:
        """Validate that the ball fits in the arena"""
        width = info.data.get("ARENA_WIDTH", 768) if info.data else 768
        height = info.data.get("ARENA_HEIGHT", 1024) if info.data else 1024
        if v >= min(width, height):
            raise ValueError(f"BALL_SIDE ({v}) must be smaller than the arena")
        return v

    @model_validator(mode="after")
    def validate_arena_dimensions(self) -> "GameConfig":
        """Validate arena is large enough for game elements"""
        if self.PADDLE_WIDTH >= self.ARENA_WIDTH:
            raise ValueError(f"ARENA_WIDTH must be larger than PADDLE_WIDTH ({self.PADDLE_WIDTH})")

        min_height = 2 * (self.PADDLE_MARGIN + self.PADDLE_HEIGHT)
        if self.ARENA_HEIGHT < min_height:
            raise ValueError(f"ARENA_HEIGHT must be at least {min_height} pixels")

        if self.PADDLE_START_X > self.ARENA_WIDTH - self.PADDLE_WIDTH:
            raise ValueError(
                f"PADDLE_START_X ({self.PADDLE_START_X}) puts the paddle outside the arena"
            )

        ball_x, ball_y = self.BALL_START
        if not (
            0 <= ball_x <= self.ARENA_WIDTH - self.BALL_SIDE
            and 0 <= ball_y <= self.ARENA_HEIGHT - self.BALL_SIDE
        ):
            raise ValueError(f"BALL_START {self.BALL_START} puts the ball outside the arena")

        if self.VARIANT == "pong":
            if self.PADDLE_MARGIN < self.PADDLE_HEIGHT:
                raise ValueError("PADDLE_MARGIN must leave room for the top paddle")
            # Top band [0, INPUT_BAND] and bottom band [height - INPUT_BAND, height]
            if 2 * self.INPUT_BAND >= self.ARENA_HEIGHT:
                raise ValueError(
                    f"INPUT_BAND ({self.INPUT_BAND}) makes the two paddle bands overlap"
                )

        if self.VARIANT == "breakout" and self.BRICK_ROWS and self.BRICK_COLS:
            grid_right = self.BRICK_ORIGIN_X + self.BRICK_COLS * self.BRICK_WIDTH
            grid_bottom = self.BRICK_ORIGIN_Y + self.BRICK_ROWS * self.BRICK_HEIGHT
            if grid_right > self.ARENA_WIDTH or grid_bottom > self.ARENA_HEIGHT:
                raise ValueError("Brick grid does not fit inside the arena")

        return self

    def finger_radius(self) -> float:
        """Dead-zone half-width around the paddle center"""
        return self.FINGER_RADIUS_RATIO * self.PADDLE_WIDTH

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = DEFAULT_CONFIG_FILE) -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = DEFAULT_CONFIG_FILE) -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        _copy_fields(self, GameConfig())


def _copy_fields(target: GameConfig, source: GameConfig) -> None:
    """Copies every field of a validated config onto another"""
    # source is valid as a whole; per-field assignment could trip the model
    # validator on intermediate combinations
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(target, field_name, getattr(source, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = DEFAULT_CONFIG_FILE) -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False

    _copy_fields(game_config, loaded_config)
    logger.info("Loaded configuration from %s", filepath)
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> None:
    """Helper to change config values, each assignment validated"""
    for name, new_value in kwargs.items():
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    saved = game_config.model_copy()
    try:
        _change_values(game_config, **kwargs)
        yield
    finally:
        # Restored as a whole; field by field could fail on dependent values
        _copy_fields(game_config, saved)
