"""
Paddle Arena - fixed-step Breakout/Pong arena
"""

__version__ = "0.1.0"
