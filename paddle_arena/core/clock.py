"""
Frame timing for Paddle Arena

Wall time arrives in irregular frame-sized chunks; the accumulator turns it
into a whole number of fixed simulation steps plus a leftover lag used to
extrapolate entities when rendering.
"""

import time
from collections.abc import Callable


class FixedStepAccumulator:
    """Accumulates variable frame durations into fixed-step counts"""

    def __init__(self, step_ms: float):
        if step_ms <= 0:
            raise ValueError(f"step_ms must be > 0, got {step_ms}")
        self.step_ms = step_ms
        self.lag = 0.0
        self.total_steps = 0

    def advance(self, elapsed_ms: float) -> int:
        """
        Adds elapsed wall time and discharges whole steps.

        Args:
            elapsed_ms: Wall time since the previous frame, in milliseconds

        Returns:
            Number of fixed steps to simulate this frame; ``lag`` keeps the
            remainder, always smaller than one step.
        """
        if elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must not be negative, got {elapsed_ms}")

        self.lag += elapsed_ms
        steps = 0
        while self.lag >= self.step_ms:
            self.lag -= self.step_ms
            steps += 1

        self.total_steps += steps
        return steps

    def reset(self) -> None:
        self.lag = 0.0
        self.total_steps = 0


class FrameTimer:
    """Monotonic high-resolution clock measuring time between frames"""

    def __init__(self, time_source: Callable[[], float] | None = None):
        # time_source returns seconds
        self._time_source = time_source or time.perf_counter
        self._last: float | None = None

    def elapsed_ms(self) -> float:
        """Milliseconds since the previous call, 0 on the first call"""
        now = self._time_source()
        if self._last is None:
            elapsed = 0.0
        else:
            elapsed = max(0.0, now - self._last) * 1000.0
        self._last = now
        return elapsed
