"""Non-player characters: wandering, chasing and punching the player."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Sequence

FRAME_STEP = 140
WALK_LAST_FRAME = 4340
SPRINT_LAST_FRAME = 5460
PUNCH_LAST_FRAME = 9240
TICK_DELAY = 0.03
CHASE_RANGE = 30
CHASE_SPEED = 3
LOOKAHEAD = 20

PixelAt = Callable[[int, int], Sequence[int]]


class Direction(IntEnum):
    """Facing of a character."""

    RIGHT = 0
    LEFT = 1
    DOWN = 2
    UP = 3


_OFFSETS = {
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.UP: (0, -1),
}


def _is_wall(color: Sequence[int]) -> bool:
    return tuple(color[:3]) == (0, 0, 0)


@dataclass
class Npc:
    """A character on the map with its walking and animation state."""

    x: float
    y: float
    direction: Direction = Direction.RIGHT
    travel: float = 0.0
    dist: int = 0
    wait: int = 0
    rect_left: int = 0
    track: bool = False
    distance: float = 0.0
    texture: tuple[str, Direction] = ("walk", Direction.RIGHT)

    def wander(self, pixel_at: PixelAt, rng) -> None:
        """Walk a random distance in a random direction, pausing between legs."""
        if self.travel >= self.dist:
            self.direction = Direction(rng.randrange(4))
            self.travel = 0.0
            self.dist = rng.randrange(100)
            self.wait = 0
            self.rect_left = 0
            self.texture = ("walk", self.direction)
        if self.wait > self.dist:
            step = self.dist * 0.01
            if not is_blocked(self, pixel_at):
                dx, dy = _OFFSETS[self.direction]
                self.x += dx * step
                self.y += dy * step
                self.rect_left += FRAME_STEP
            if self.rect_left > WALK_LAST_FRAME:
                self.rect_left = 0
            self.travel += step
        self.wait += 1

    def _face(self, dx: int, dy: int) -> None:
        if abs(dx) > abs(dy):
            if dx > 0:
                self.direction = Direction.RIGHT
            elif dx < 0:
                self.direction = Direction.LEFT
            else:
                return
        elif abs(dx) < abs(dy):
            self.direction = Direction.DOWN if dy > 0 else Direction.UP
        else:
            return
        self.texture = ("sprint", self.direction)

    def chase(self, player_x: float, player_y: float, pixel_at: PixelAt) -> bool:
        """Run toward the player when out of reach; returns True if it acted."""
        if self.distance <= CHASE_RANGE:
            return False
        dx = int((player_x - self.x) / self.distance * CHASE_SPEED)
        dy = int((player_y - self.y) / self.distance * CHASE_SPEED)
        self._face(dx, dy)
        if not is_blocked(self, pixel_at):
            self.x += dx
            self.y += dy
            self.rect_left += FRAME_STEP
            if self.rect_left > SPRINT_LAST_FRAME:
                self.rect_left = 0
        return True

    def punch(self) -> bool:
        """Play a punch frame when the player is in reach; returns True if it did."""
        if self.distance >= CHASE_RANGE:
            return False
        self.texture = ("punch", self.direction)
        self.rect_left += FRAME_STEP
        if self.rect_left > PUNCH_LAST_FRAME:
            self.rect_left = 0
        return True

    def update(self, elapsed: float, player_x: float, player_y: float,
               pixel_at: PixelAt, rng) -> bool:
        """Advance the character; returns True if its clock should restart."""
        self.distance = math.hypot(player_x - self.x, player_y - self.y)
        if elapsed <= TICK_DELAY:
            return False
        if self.track:
            return self.chase(player_x, player_y, pixel_at) or self.punch()
        self.wander(pixel_at, rng)
        return True


def is_blocked(npc: Npc, pixel_at: PixelAt) -> bool:
    """Return True if the collision map is black just ahead of the character."""
    dx, dy = _OFFSETS[Direction(npc.direction)]
    probe_x = int(npc.x + dx * LOOKAHEAD)
    probe_y = int(npc.y + dy * LOOKAHEAD)
    return _is_wall(pixel_at(probe_x, probe_y))