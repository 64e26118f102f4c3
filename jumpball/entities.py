"""Game objects: the ball, its sprite animation, the obstacles and collision."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 500
GROUND_HEIGHT = 400
BALL_RADIUS = 20
CACTUS_WIDTH = 60
CACTUS_HEIGHT = 30
GRAVITY = 1
JUMP_FORCE = -17

BALL_FRAME_WIDTH = 60
BALL_FRAME_HEIGHT = 55
TOTAL_ANIMATION_FRAMES = 3

BALL_START_X = 100
CACTUS_BASE_SPEED = 5
TOP_CACTUS_LIFT = 5
STACKED_CACTUS_LIFT = 25

RectTuple = tuple[int, int, int, int]


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Animation:
    """Frame selection for a horizontal sprite sheet."""

    frame_width: int = 0
    frame_height: int = 0
    total_frames: int = 0
    current_frame: int = 0
    animation_speed: int = 10
    frame_counter: int = 0

    def update(self) -> None:
        """Advance one tick; move to the next frame every `animation_speed` ticks."""
        self.frame_counter += 1
        if self.frame_counter >= self.animation_speed:
            self.frame_counter = 0
            if self.total_frames > 0:
                self.current_frame = (self.current_frame + 1) % self.total_frames

    def current_frame_rect(self) -> RectTuple:
        """Source rectangle of the current frame within the sheet."""
        return (
            self.current_frame * self.frame_width,
            0,
            self.frame_width,
            self.frame_height,
        )


@dataclass
class Ball:
    """The player: a ball that jumps and falls back to the ground."""

    x: int = BALL_START_X
    y: int = GROUND_HEIGHT - BALL_FRAME_HEIGHT
    vel_y: int = 0
    jumping: bool = False
    radius: int = BALL_RADIUS
    animation: Animation = field(default_factory=Animation)

    def jump(self) -> None:
        """Start a jump unless already in the air."""
        if not self.jumping:
            self.vel_y = JUMP_FORCE
            self.jumping = True

    def update(self) -> None:
        """Apply gravity, land on the ground and advance the animation."""
        self.vel_y += GRAVITY
        self.y += self.vel_y
        floor = GROUND_HEIGHT - BALL_FRAME_HEIGHT
        if self.y >= floor:
            self.y = floor
            self.vel_y = 0
            self.jumping = False
        self.animation.update()

    def rect(self) -> RectTuple:
        return (self.x, self.y, BALL_FRAME_WIDTH, BALL_FRAME_HEIGHT)


@dataclass
class Cactus:
    """An obstacle that scrolls from right to left."""

    x: int = SCREEN_WIDTH
    y: int = GROUND_HEIGHT - CACTUS_HEIGHT
    width: int = CACTUS_WIDTH
    height: int = CACTUS_HEIGHT
    is_top: bool = False
    speed: int = CACTUS_BASE_SPEED + 1

    def update(self) -> None:
        self.x -= self.speed

    def rect(self) -> RectTuple:
        return (self.x, self.y, self.width, self.height)


def make_cactus(rng: _RandomSource | None = None) -> Cactus:
    """Create a cactus at the right edge, raised slightly half of the time."""
    rng = rng if rng is not None else random
    cactus = Cactus()
    if rng.randrange(2) == 0:
        cactus.is_top = True
        cactus.y = GROUND_HEIGHT - CACTUS_HEIGHT - TOP_CACTUS_LIFT
    return cactus


def spawn_cacti(
    cacti: list[Cactus],
    speed_multiplier: float = 2.0,
    rng: _RandomSource | None = None,
) -> list[Cactus]:
    """Append one or two new cacti to `cacti` and return the new ones."""
    rng = rng if rng is not None else random
    count = 1 + rng.randrange(2)
    spawned = []
    for index in range(count):
        cactus = make_cactus(rng)
        cactus.speed = int(cactus.speed * speed_multiplier)
        if index == 1:
            cactus.y -= STACKED_CACTUS_LIFT
        spawned.append(cactus)
    cacti.extend(spawned)
    return spawned


def check_collision(ball_rect: RectTuple, obstacle_rect: RectTuple) -> bool:
    """Circle-versus-rectangle test with a forgiving margin."""
    bx, by, bw, bh = ball_rect
    ox, oy, ow, oh = obstacle_rect
    center_x = bx + bw // 2
    center_y = by + bh // 2
    radius = bw // 2

    closest_x = max(ox, min(center_x, ox + ow))
    closest_y = max(oy, min(center_y, oy + oh))

    dx = center_x - closest_x
    dy = center_y - closest_y
    return dx * dx + dy * dy <= radius * radius - 500