"""
Core module of Paddle Arena game
"""

from paddle_arena.core.clock import FixedStepAccumulator
from paddle_arena.core.entities import Ball
from paddle_arena.core.entities import FrameSnapshot
from paddle_arena.core.entities import Paddle
from paddle_arena.core.entities import Rect
from paddle_arena.core.entities import SimulationState
from paddle_arena.core.entities import Vector2D
from paddle_arena.core.physics import Simulation

__all__ = [
    "Ball",
    "Paddle",
    "Rect",
    "Vector2D",
    "SimulationState",
    "FrameSnapshot",
    "FixedStepAccumulator",
    "Simulation",
]
