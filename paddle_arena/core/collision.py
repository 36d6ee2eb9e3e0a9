"""
Collision detection system for Paddle Arena

Everything is axis-aligned rectangle overlap. A bounce is resolved by
looking at the shape of the overlap ("sliver"): a tall, thin overlap means
the ball came in from the side, a wide one means it came from above or
below.
"""

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from paddle_arena.core.entities import Ball
from paddle_arena.core.entities import Rect
from paddle_arena.core.entities import SimulationState

logger = logging.getLogger(__name__)


def intersect_rects(a: Rect, b: Rect) -> Rect | None:
    """Overlap of two rectangles, None when they do not overlap"""
    return a.intersect(b)


def first_overlapping(rects: Sequence[Rect], rect: Rect) -> int | None:
    """Index of the first rectangle overlapping rect, in sequence order"""
    if not rects:
        return None

    boxes = np.array([r.to_tuple() for r in rects], dtype=np.int64)
    lefts = np.maximum(boxes[:, 0], rect.x)
    rights = np.minimum(boxes[:, 0] + boxes[:, 2], rect.right)
    tops = np.maximum(boxes[:, 1], rect.y)
    bottoms = np.minimum(boxes[:, 1] + boxes[:, 3], rect.bottom)

    hits = np.flatnonzero((rights > lefts) & (bottoms > tops))
    if hits.size == 0:
        return None
    return int(hits[0])


class BounceResolver:
    """Decides, once per fixed step, how the ball reflects"""

    def __init__(self, step_ms: float, refine_fraction: float = 0.1, bottom_wall: bool = False):
        self.step_ms = step_ms
        self.refine_fraction = refine_fraction
        # Without a bottom wall the ball rests on the floor (no losing state)
        self.bottom_wall = bottom_wall

    def sliver(self, ball: Ball, overlap: Rect) -> Rect:
        """
        Narrows a square overlap using where the ball was just before impact.

        A square overlap says nothing about the penetration direction; the
        ball rectangle a fraction of a step earlier trims it into a sliver.
        """
        if overlap.w != overlap.h:
            return overlap

        earlier = ball.rect(-self.refine_fraction * self.step_ms)
        refined = overlap.intersect(earlier)
        if refined is None:
            return overlap
        return refined

    def bounce(self, ball: Ball, overlap: Rect) -> str:
        """Walks the ball back two steps and flips one velocity axis. Returns "x" or "y"."""
        sliver = self.sliver(ball, overlap)

        ball.position = ball.moved(-2 * self.step_ms)

        if sliver.is_portrait():
            ball.flip_x()
            return "x"
        ball.flip_y()
        return "y"

    def bounce_walls(self, ball: Ball) -> list[str]:
        """Reflects off the arena boundaries. Returns the walls touched."""
        walls = []
        max_x = ball.arena_width - ball.side
        max_y = ball.arena_height - ball.side

        if ball.position.y <= 0:
            ball.flip_y()
            walls.append("top")
        elif self.bottom_wall and ball.position.y >= max_y:
            ball.flip_y()
            walls.append("bottom")

        if ball.position.x <= 0:
            ball.flip_x()
            walls.append("left")
        elif ball.position.x >= max_x:
            ball.flip_x()
            walls.append("right")

        return walls

    def resolve(self, state: SimulationState, ball_rect: Rect) -> dict[str, list]:
        """
        Resolves every collision for a step that has already been advanced.

        Args:
            state: Simulation state after paddles and ball moved by one step
            ball_rect: Ball rectangle at the end of the step

        Returns:
            Dictionary with events that occurred:
            {
                "paddle_hits": [...],
                "wall_bounces": [...],
                "obstacles_destroyed": [...]
            }
        """
        events: dict[str, list[Any]] = {
            "paddle_hits": [],
            "wall_bounces": [],
            "obstacles_destroyed": [],
        }
        ball = state.ball

        for index, paddle in enumerate(state.paddles):
            paddle_rect = paddle.rect()
            if ball_rect.has_intersection(paddle_rect):
                axis = self.bounce(ball, intersect_rects(ball_rect, paddle_rect))
                events["paddle_hits"].append({"paddle": index, "axis": axis})

        events["wall_bounces"] = self.bounce_walls(ball)

        # At most one obstacle breaks per step
        hit_index = first_overlapping(state.obstacles, ball_rect)
        if hit_index is not None:
            obstacle = state.obstacles.pop(hit_index)
            overlap = intersect_rects(ball_rect, obstacle)
            if overlap is not None:
                axis = self.bounce(ball, overlap)
                events["obstacles_destroyed"].append(
                    {"index": hit_index, "rect": obstacle.to_tuple(), "axis": axis}
                )
                logger.debug("Obstacle %s destroyed, bounce on %s", obstacle.to_tuple(), axis)

        return events
