"""
Paddle Arena game entities: ball, paddles, rectangles

Positions are in arena pixels, times in milliseconds and velocities in
pixels per millisecond. Every entity can compute where it *would* be after
a time delta (``moved*``/``rect``) without touching its stored state; only
``advance`` mutates.
"""

from dataclasses import dataclass


def clamp(low: float, high: float, value: float) -> float:
    """Clamps value into [low, high]"""
    return min(max(low, value), high)


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned integer rectangle (x, y, width, height)"""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def intersect(self, other: "Rect") -> "Rect | None":
        """Returns the overlapping rectangle, or None when the projections do not overlap"""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def has_intersection(self, other: "Rect") -> bool:
        return self.intersect(other) is not None

    def is_portrait(self) -> bool:
        """Taller than wide"""
        return self.h > self.w

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)


class Paddle:
    """Player paddle moving horizontally towards a pointer target"""

    def __init__(
        self,
        x: float,
        y: int,
        width: int,
        height: int,
        arena_width: int,
        speed: float,
        finger_radius: float,
        input_band: tuple[float, float] | None = None,
    ):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.arena_width = arena_width
        self.speed = speed
        self.finger_radius = finger_radius
        # Vertical pointer band (arena units) routed to this paddle, None for everywhere
        self.input_band = input_band
        self.target = x

    def direction(self) -> int:
        """-1, 0 or 1 depending on where the target sits relative to the dead-zone"""
        mid_x = self.x + self.width / 2
        if self.target < mid_x - self.finger_radius:
            return -1
        if self.target > mid_x + self.finger_radius:
            return 1
        return 0

    def velocity(self) -> float:
        return self.speed * self.direction()

    def moved_x(self, dt: float) -> float:
        """Position after dt milliseconds, clamped inside the arena"""
        return clamp(0, self.arena_width - self.width, self.x + self.velocity() * dt)

    def advance(self, dt: float) -> None:
        self.x = self.moved_x(dt)

    def rect(self, lag: float = 0.0) -> Rect:
        """Collision rectangle, extrapolated by lag milliseconds"""
        return Rect(int(self.moved_x(lag)), self.y, self.width, self.height)

    def accepts(self, y: float) -> bool:
        """Whether a pointer at arena height y drives this paddle"""
        if self.input_band is None:
            return True
        low, high = self.input_band
        return low <= y <= high


class Ball:
    """Game ball, a square of fixed side"""

    def __init__(
        self,
        x: float,
        y: float,
        vx: float,
        vy: float,
        side: int,
        arena_width: int,
        arena_height: int,
    ):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.side = side
        self.arena_width = arena_width
        self.arena_height = arena_height

    def moved(self, dt: float) -> Vector2D:
        """Position after dt milliseconds, clamped independently per axis"""
        new_position = self.position + self.velocity * dt
        return Vector2D(
            clamp(0, self.arena_width - self.side, new_position.x),
            clamp(0, self.arena_height - self.side, new_position.y),
        )

    def advance(self, dt: float) -> None:
        self.position = self.moved(dt)

    def rect(self, lag: float = 0.0) -> Rect:
        """Collision rectangle, extrapolated by lag milliseconds"""
        position = self.moved(lag)
        return Rect(int(position.x), int(position.y), self.side, self.side)

    def flip_x(self) -> None:
        """Horizontal bounce"""
        self.velocity = Vector2D(-self.velocity.x, self.velocity.y)

    def flip_y(self) -> None:
        """Vertical bounce"""
        self.velocity = Vector2D(self.velocity.x, -self.velocity.y)


@dataclass
class SimulationState:
    """Everything the simulation owns; rebuilt wholesale on reset"""

    paddles: list[Paddle]
    ball: Ball
    obstacles: list[Rect]


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only rectangles handed to the renderer for one frame"""

    paddles: tuple[Rect, ...]
    ball: Rect
    obstacles: tuple[Rect, ...]
