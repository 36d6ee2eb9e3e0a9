"""
Frame driver for Paddle Arena

Each frame runs, in strict order:
  1. accumulate elapsed wall time and simulate zero or more fixed steps
  2. drain and apply all pending input events
  3. render one frame extrapolated by the leftover lag
"""

import logging

from paddle_arena.core.clock import FixedStepAccumulator
from paddle_arena.core.clock import FrameTimer
from paddle_arena.core.input import InputMapper
from paddle_arena.core.interfaces.renderer import RendererProtocol
from paddle_arena.core.physics import Simulation

logger = logging.getLogger(__name__)


class GameLoop:
    """Single-threaded fixed-step loop; the only state is running or not"""

    def __init__(
        self,
        simulation: Simulation,
        renderer: RendererProtocol,
        input_mapper: InputMapper | None = None,
        accumulator: FixedStepAccumulator | None = None,
        timer: FrameTimer | None = None,
    ):
        self.simulation = simulation
        self.renderer = renderer
        self.input_mapper = input_mapper or InputMapper(simulation)
        self.accumulator = accumulator or FixedStepAccumulator(simulation.step_ms)
        self.timer = timer or FrameTimer()
        self.running = True

    def frame(self, elapsed_ms: float | None = None) -> int:
        """
        Runs one frame.

        Args:
            elapsed_ms: Wall time since the previous frame; read from the
                timer when omitted

        Returns:
            Number of fixed steps simulated
        """
        if elapsed_ms is None:
            elapsed_ms = self.timer.elapsed_ms()

        steps = self.accumulator.advance(elapsed_ms)
        for _ in range(steps):
            events = self.simulation.step()
            if events["obstacles_destroyed"]:
                logger.debug("Obstacles left: %d", len(self.simulation.state.obstacles))

        for event in self.renderer.poll_events():
            action = self.input_mapper.handle_event(event)
            if action == "reset":
                # The rebuilt state is drawn without extrapolation
                self.accumulator.reset()
            elif action == "quit":
                # Observed at the top of the next frame
                self.running = False

        self.renderer.render_frame(self.simulation.snapshot(self.accumulator.lag))
        self.renderer.present()
        return steps

    def run(self) -> None:
        """Main loop, until a quit event or the window closes"""
        logger.info("Game loop started (%s variant)", self.simulation.config.VARIANT)
        while self.running and self.renderer.is_active():
            self.frame()
        logger.info("Game loop stopped, %d steps since the last reset", self.accumulator.total_steps)
