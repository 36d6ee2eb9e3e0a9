"""
Input mapping for Paddle Arena

Platform events are translated into ``InputEvent`` values by the renderer;
the mapper turns them into paddle targets and reset/quit commands.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from paddle_arena.core.physics import Simulation

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Input event kinds understood by the game"""

    QUIT = "quit"
    POINTER_DOWN = "pointer_down"
    POINTER_MOTION = "pointer_motion"
    KEY_DOWN = "key_down"


POINTER_EVENTS = (EventType.POINTER_DOWN, EventType.POINTER_MOTION)


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    Attributes:
        type: Kind of event
        x: Horizontal pointer position, normalized to [0, 1]
        y: Vertical pointer position, normalized to [0, 1]
        key: Key name for KEY_DOWN events (e.g. "r", "escape")
    """

    type: EventType
    x: float = 0.0
    y: float = 0.0
    key: str = ""

    def __post_init__(self) -> None:
        if not (0.0 <= self.x <= 1.0 and 0.0 <= self.y <= 1.0):
            raise ValueError(f"Pointer coordinates must be normalized, got ({self.x}, {self.y})")


class InputMapper:
    """Applies input events to a simulation"""

    def __init__(self, simulation: Simulation):
        self.simulation = simulation

    def handle_event(self, event: InputEvent) -> str | None:
        """
        Handle one input event

        Returns:
            "move", "reset" or "quit" for events that did something, else None
        """
        config = self.simulation.config

        if event.type in POINTER_EVENTS:
            index = self.simulation.paddle_for(event.y * config.ARENA_HEIGHT)
            if index is None:
                return None
            self.simulation.set_target(index, event.x * config.ARENA_WIDTH)
            return "move"

        if event.type == EventType.KEY_DOWN:
            if event.key == config.RESET_KEY:
                self.simulation.reset()
                logger.info("Game reset")
                return "reset"
            if event.key == config.QUIT_KEY:
                return "quit"
            return None

        if event.type == EventType.QUIT:
            return "quit"

        return None
