"""
Utility modules of Paddle Arena
"""

from paddle_arena.utils.config import GameConfig
from paddle_arena.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
