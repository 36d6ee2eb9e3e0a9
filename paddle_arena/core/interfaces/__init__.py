"""
Interfaces between the simulation core and its collaborators
"""

from paddle_arena.core.interfaces.renderer import RendererProtocol

__all__ = ["RendererProtocol"]
