"""
Fixed-step simulation for Paddle Arena
"""

import logging
from typing import Any

from paddle_arena.core.collision import BounceResolver
from paddle_arena.core.entities import Ball
from paddle_arena.core.entities import FrameSnapshot
from paddle_arena.core.entities import Paddle
from paddle_arena.core.entities import Rect
from paddle_arena.core.entities import SimulationState
from paddle_arena.utils.config import GameConfig
from paddle_arena.utils.config import game_config

logger = logging.getLogger(__name__)


def create_paddles(config: GameConfig) -> list[Paddle]:
    """Paddles for the configured variant, top first"""

    def make(y: int, band: tuple[float, float] | None) -> Paddle:
        return Paddle(
            config.PADDLE_START_X,
            y,
            config.PADDLE_WIDTH,
            config.PADDLE_HEIGHT,
            config.ARENA_WIDTH,
            config.PADDLE_SPEED,
            config.finger_radius(),
            band,
        )

    bottom_y = config.ARENA_HEIGHT - config.PADDLE_MARGIN
    if config.VARIANT == "pong":
        top_y = config.PADDLE_MARGIN - config.PADDLE_HEIGHT
        return [
            make(top_y, (0, config.INPUT_BAND)),
            make(bottom_y, (config.ARENA_HEIGHT - config.INPUT_BAND, config.ARENA_HEIGHT)),
        ]
    return [make(bottom_y, None)]


def create_obstacles(config: GameConfig) -> list[Rect]:
    """Brick grid, row by row"""
    if config.VARIANT != "breakout":
        return []

    return [
        Rect(
            config.BRICK_ORIGIN_X + config.BRICK_WIDTH * col,
            config.BRICK_ORIGIN_Y + config.BRICK_HEIGHT * row,
            config.BRICK_WIDTH,
            config.BRICK_HEIGHT,
        )
        for row in range(config.BRICK_ROWS)
        for col in range(config.BRICK_COLS)
    ]


def create_ball(config: GameConfig) -> Ball:
    x, y = config.BALL_START
    vx, vy = config.BALL_VELOCITY
    return Ball(x, y, vx, vy, config.BALL_SIDE, config.ARENA_WIDTH, config.ARENA_HEIGHT)


class Simulation:
    """Owns the simulation state and advances it one fixed step at a time"""

    def __init__(self, config: GameConfig | None = None):
        self.config = config if config is not None else game_config
        self.reset()

    @property
    def step_ms(self) -> float:
        return self.resolver.step_ms

    def reset(self) -> None:
        """Rebuilds every entity from the configuration"""
        self.resolver = BounceResolver(
            self.config.STEP_MS,
            self.config.REFINE_FRACTION,
            bottom_wall=self.config.VARIANT == "pong",
        )
        self.state = SimulationState(
            paddles=create_paddles(self.config),
            ball=create_ball(self.config),
            obstacles=create_obstacles(self.config),
        )
        logger.debug(
            "Reset %s arena: %d paddle(s), %d obstacle(s)",
            self.config.VARIANT,
            len(self.state.paddles),
            len(self.state.obstacles),
        )

    def step(self) -> dict[str, list]:
        """Advances the simulation by exactly one fixed step and returns its events"""
        for paddle in self.state.paddles:
            paddle.advance(self.step_ms)
        self.state.ball.advance(self.step_ms)

        return self.resolver.resolve(self.state, self.state.ball.rect())

    def paddle_for(self, y: float) -> int | None:
        """Index of the paddle whose input band contains arena height y"""
        for index, paddle in enumerate(self.state.paddles):
            if paddle.accepts(y):
                return index
        return None

    def set_target(self, index: int, x: float) -> None:
        self.state.paddles[index].target = x

    def snapshot(self, lag: float = 0.0) -> FrameSnapshot:
        """Rectangles extrapolated by lag milliseconds; the state is left untouched"""
        return FrameSnapshot(
            paddles=tuple(paddle.rect(lag) for paddle in self.state.paddles),
            ball=self.state.ball.rect(lag),
            obstacles=tuple(self.state.obstacles),
        )

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        ball = self.state.ball
        return {
            "variant": self.config.VARIANT,
            "ball_position": ball.position.to_tuple(),
            "ball_velocity": ball.velocity.to_tuple(),
            "paddle_positions": [(p.x, p.y) for p in self.state.paddles],
            "paddle_targets": [p.target for p in self.state.paddles],
            "obstacles": [r.to_tuple() for r in self.state.obstacles],
            "field_bounds": (0, self.config.ARENA_WIDTH, 0, self.config.ARENA_HEIGHT),
        }
