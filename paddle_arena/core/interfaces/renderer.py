"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from paddle_arena.core.entities import FrameSnapshot
from paddle_arena.core.input import InputEvent


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The renderer is both the drawing surface and the event source of the
    windowing layer. It only ever reads snapshots.
    """

    def render_frame(self, snapshot: FrameSnapshot) -> None:
        """
        Draw a single frame.

        Args:
            snapshot: Interpolated rectangles of paddles, ball and obstacles
        """
        ...

    def present(self) -> None:
        """Show the drawn frame"""
        ...

    def poll_events(self) -> list[InputEvent]:
        """
        Drain every pending input event.

        Returns:
            Events translated to the game's input vocabulary, in arrival order
        """
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...

    def is_active(self) -> bool:
        """Check if renderer is still active (window not closed)"""
        ...
