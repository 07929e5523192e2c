"""The companion drone: wakes up, follows the player and heals on use."""

from __future__ import annotations

import math
from dataclasses import dataclass

START_X = 1522.0
START_Y = 2966.0
FRAME_WIDTH = 200
FRAME_HEIGHT = 150
WAKE_FRAME_DELAY = 0.1
LAST_WAKE_FRAME = 9400
MOVE_DELAY = 0.03
FOLLOW_DISTANCE = 25
EFFECT_COOLDOWN = 30
ACTIVE_FROM_HISTORY = 3


@dataclass
class Robot:
    """The drone's position, wake-up animation and heading."""

    x: float = START_X
    y: float = START_Y
    rect_left: int = 0
    rect_top: int = 0
    rotation: float = 0.0
    on: bool = False
    awake: bool = False

    def _animate(self, elapsed: float) -> bool:
        if elapsed <= WAKE_FRAME_DELAY:
            return False
        self.rect_left += FRAME_WIDTH
        if self.rect_left > LAST_WAKE_FRAME:
            self.on = True
        return True

    def _follow(self, elapsed: float, player_x: float, player_y: float) -> bool:
        distance = math.hypot(player_x - self.x, player_y - self.y)
        self.rotation = math.atan2(self.y - player_y, self.x - player_x) * 180 / 3.14
        if elapsed > MOVE_DELAY and distance > FOLLOW_DISTANCE:
            self.x += (player_x - self.x) / distance
            self.y += (player_y - self.y) / distance
            return True
        return False

    def update(self, elapsed: float, history: int,
               player_x: float, player_y: float) -> bool:
        """Advance the drone; returns True if its clock should restart."""
        self.awake = history >= ACTIVE_FROM_HISTORY
        if not self.awake:
            return False
        if not self.on:
            return self._animate(elapsed)
        return self._follow(elapsed, player_x, player_y)

    def interact(self, since_last_effect: float) -> bool:
        """Return True if using the drone restores energy and health now."""
        return self.awake and since_last_effect > EFFECT_COOLDOWN