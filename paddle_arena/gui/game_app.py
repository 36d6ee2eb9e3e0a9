"""
Main game application with PyGame GUI
"""

import json
import logging

from pydantic import ValidationError

from paddle_arena.core.game_loop import GameLoop
from paddle_arena.core.physics import Simulation
from paddle_arena.gui.pygame_renderer import PygameRenderer
from paddle_arena.gui.pygame_renderer import RendererInitError
from paddle_arena.utils.config import DEFAULT_CONFIG_FILE
from paddle_arena.utils.config import GameConfig
from paddle_arena.utils.config import game_config
from paddle_arena.utils.config import load_config_from_file
from paddle_arena.utils.logging import configure_logging

logger = logging.getLogger(__name__)


class ArenaApp:
    """Main application class for Paddle Arena with PyGame GUI"""

    def __init__(self, config: GameConfig | None = None) -> None:
        """Initialize the application"""
        self.config = config if config is not None else game_config

        self.simulation = Simulation(self.config)
        self.renderer = PygameRenderer(self.config.ARENA_WIDTH, self.config.ARENA_HEIGHT, self.config)
        self.loop = GameLoop(self.simulation, self.renderer)

        logger.info("Paddle Arena initialized (%s variant)", self.config.VARIANT)

    def run(self) -> None:
        """Main application loop"""
        try:
            self.loop.run()
        except Exception:
            logger.exception("Error during execution")
            raise
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        logger.info("Cleaning up resources...")
        self.renderer.cleanup()


def main() -> int:
    """Main entry point, returns the process exit status"""
    configure_logging()

    try:
        load_config_from_file()
    except (ValidationError, json.JSONDecodeError) as e:
        logger.error("Invalid configuration file %s: %s", DEFAULT_CONFIG_FILE, e)
        return 1

    try:
        app = ArenaApp()
    except RendererInitError as e:
        logger.error("Cannot start Paddle Arena: %s", e)
        return 1

    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("User interruption")
    except Exception:
        return 1

    logger.info("Paddle Arena closed properly.")
    return 0
