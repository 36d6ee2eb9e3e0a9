"""
PyGame renderer for Paddle Arena game
"""

import logging

import pygame

from paddle_arena.core.entities import FrameSnapshot
from paddle_arena.core.entities import Rect
from paddle_arena.core.input import EventType
from paddle_arena.core.input import InputEvent
from paddle_arena.utils.config import GameConfig
from paddle_arena.utils.config import game_config

logger = logging.getLogger(__name__)


class RendererInitError(RuntimeError):
    """The display could not be created"""


def _normalize(value: float, extent: int) -> float:
    return min(max(value / extent, 0.0), 1.0)


def translate_event(event: pygame.event.Event, width: int, height: int) -> InputEvent | None:
    """
    Translate a pygame event into the game's input vocabulary.

    Touch coordinates arrive normalized; mouse coordinates are normalized by
    the window size. Mouse motion only counts while the left button is held
    (a drag), and mouse events synthesized from touches are dropped.

    Returns:
        InputEvent, or None for events the game does not care about
    """
    if event.type == pygame.QUIT:
        return InputEvent(EventType.QUIT)

    if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
        kind = EventType.POINTER_DOWN if event.type == pygame.FINGERDOWN else EventType.POINTER_MOTION
        return InputEvent(kind, _normalize(event.x, 1), _normalize(event.y, 1))

    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION):
        if getattr(event, "touch", False):
            return None
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != 1:
                return None
            kind = EventType.POINTER_DOWN
        else:
            if not event.buttons[0]:
                return None
            kind = EventType.POINTER_MOTION
        x, y = event.pos
        return InputEvent(kind, _normalize(x, width), _normalize(y, height))

    if event.type == pygame.KEYDOWN:
        return InputEvent(EventType.KEY_DOWN, key=pygame.key.name(event.key))

    return None


class PygameRenderer:
    """PyGame-based renderer and event source for Paddle Arena"""

    def __init__(
        self, width: int | None = None, height: int | None = None, config: GameConfig | None = None
    ):
        """Initialize the PyGame renderer"""
        self.config = config if config is not None else game_config
        self.width = width or self.config.ARENA_WIDTH
        self.height = height or self.config.ARENA_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Create the display
        try:
            self.screen = pygame.display.set_mode((self.width, self.height))
        except pygame.error as e:
            pygame.quit()
            raise RendererInitError(
                f"Could not create a {self.width}x{self.height} window: {e}"
            ) from e
        pygame.display.set_caption(self.config.WINDOW_TITLE)

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        # Colors
        self.background_color: tuple[int, int, int] = self.config.BACKGROUND_COLOR
        self.entity_color: tuple[int, int, int] = self.config.ENTITY_COLOR
        self.obstacle_color: tuple[int, int, int] = self.config.OBSTACLE_COLOR

        self.active = True
        logger.info("Display created (%dx%d)", self.width, self.height)

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_rect(self, rect: Rect, color: tuple[int, int, int], width: int = 0) -> None:
        """Fill a rectangle, or outline it when width > 0"""
        pygame.draw.rect(self.screen, color, pygame.Rect(*rect.to_tuple()), width)

    def draw_obstacles(self, obstacles: tuple[Rect, ...]) -> None:
        """Draw obstacles filled, outlined in the background color"""
        for obstacle in obstacles:
            self.draw_rect(obstacle, self.obstacle_color)
        for obstacle in obstacles:
            self.draw_rect(obstacle, self.background_color, 1)

    def render_frame(self, snapshot: FrameSnapshot) -> None:
        """Render the complete frame"""
        self.clear_screen()
        for paddle in snapshot.paddles:
            self.draw_rect(paddle, self.entity_color)
        self.draw_rect(snapshot.ball, self.entity_color)
        self.draw_obstacles(snapshot.obstacles)

    def present(self) -> None:
        """Present the rendered frame and maintain frame rate"""
        pygame.display.flip()
        self.clock.tick(self.config.FPS)

    def poll_events(self) -> list[InputEvent]:
        """Drain the pygame event queue"""
        events = []
        for event in pygame.event.get():
            translated = translate_event(event, self.width, self.height)
            if translated is None:
                continue
            if translated.type == EventType.QUIT:
                self.active = False
            events.append(translated)
        return events

    def is_active(self) -> bool:
        return self.active

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        self.active = False
        pygame.quit()
