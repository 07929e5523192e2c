"""Player movement: walking, sprinting, endurance, katana swings and the camera."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

HITBOX_OFFSET = 12
WALK_SCALE = 0.35
SPRINT_SCALE = 0.4
ENERGY_TICK = 0.05
ENERGY_FLOOR = 4
ENERGY_RECOVERED = 70
ENERGY_SLACK = 5
ENERGY_BAR_RATIO = 3
KATANA_DELAY = 0.02
KATANA_STEP = 159
KATANA_LAST_FRAME = 9841
CAMERA_SHIFT_X = 15
VIEW_WIDTH = 1920
VIEW_HEIGHT = 1080


class Facing(IntEnum):
    """The eight directions the player can face, clockwise from up."""

    UP = 0
    UP_RIGHT = 1
    RIGHT = 2
    DOWN_RIGHT = 3
    DOWN = 4
    DOWN_LEFT = 5
    LEFT = 6
    UP_LEFT = 7


# dx, dy, walking texture, sprinting texture
_CARDINAL = {
    Facing.UP: (0, -1, "top", "topsprint"),
    Facing.DOWN: (0, 1, "bottom", "downsprint"),
    Facing.LEFT: (-1, 0, "left", "leftsprint"),
    Facing.RIGHT: (1, 0, "right", "rightsprint"),
}

_KATANA_TEXTURES = {
    Facing.UP: "katana_top",
    Facing.UP_RIGHT: "katana_topright",
    Facing.RIGHT: "katana_right",
    Facing.DOWN_RIGHT: "katana_botright",
    Facing.DOWN: "katana_bot",
    Facing.DOWN_LEFT: "katana_botleft",
    Facing.LEFT: "katana_left",
    Facing.UP_LEFT: "katana_topleft",
}


@dataclass
class Player:
    """The player's position, stamina and animation state."""

    x: float = 0.0
    y: float = 0.0
    speed: float = 1.0
    sprint_multiplier: float = 1.0
    screensize: float = 1.0
    energy: float = 100.0
    max_energy: float = 100.0
    energy_malus: float = 1.0
    sugar_effect: bool = False
    sprinting: bool = False
    endurance: bool = True
    facing: Facing = Facing.DOWN
    attacking: bool = False
    locked: bool = False
    katana_left: int = 0
    map_shown: bool = False
    texture: str = "bottom"
    sprite_scale: float = WALK_SCALE
    hitbox: tuple[float, float] = (0.0, 0.0)
    sprite_position: tuple[float, float] = (0.0, 0.0)
    _mouse_previous: bool = field(default=False, repr=False)
    _map_previous: bool = field(default=False, repr=False)

    @property
    def energy_bar_width(self) -> float:
        """Width of the energy bar on the interface."""
        return self.energy / ENERGY_BAR_RATIO

    @property
    def view_size(self) -> tuple[float, float]:
        """Size of the camera view after zooming."""
        return VIEW_WIDTH * self.screensize, VIEW_HEIGHT * self.screensize

    def step(self, facing: Facing) -> tuple[float, float]:
        """Take one step in a cardinal direction; returns the new position.

        Nothing moves while a katana swing locks movement. Raises
        ValueError for a diagonal direction.
        """
        facing = Facing(facing)
        if facing not in _CARDINAL:
            raise ValueError(f"cannot step diagonally: {facing.name}")
        if self.locked:
            return self.x, self.y
        dx, dy, walk_texture, sprint_texture = _CARDINAL[facing]
        distance = self.speed * self.sprint_multiplier if self.sprinting else self.speed
        self.x += dx * distance
        self.y += dy * distance
        self.texture = sprint_texture if self.sprinting else walk_texture
        self.facing = facing
        self.hitbox = (self.x + dx * HITBOX_OFFSET, self.y + dy * HITBOX_OFFSET)
        return self.x, self.y

    def toggle_attack(self, pressed: bool) -> bool:
        """Start or stop an attack on a fresh mouse press; returns whether attacking."""
        if pressed and not self._mouse_previous:
            if self.attacking:
                self.attacking = False
                self.locked = False
            else:
                self.attacking = True
        self._mouse_previous = pressed
        return self.attacking

    def try_sprint(self, sprint_held: bool, moving: bool, on_floor: bool) -> bool:
        """Begin sprinting if stamina allows and the player runs on open floor."""
        if self.endurance and sprint_held and moving and on_floor:
            self.sprinting = True
            self.sprite_scale = SPRINT_SCALE
        return self.sprinting

    def update_endurance(self, sprint_held: bool, moving: bool,
                         on_floor: bool, elapsed: float) -> bool:
        """Drain or recover stamina; returns True if energy was spent this tick."""
        drained = False
        if not sprint_held and on_floor:
            self.sprinting = False
            self.sprite_scale = WALK_SCALE
        if self.energy <= ENERGY_FLOOR:
            self.endurance = False
            self.sprinting = False
        if self.sprinting and moving and not self.sugar_effect:
            if (elapsed > ENERGY_TICK
                    and self.energy <= self.max_energy + ENERGY_SLACK
                    and self.energy > ENERGY_FLOOR):
                self.energy -= self.energy_malus
                drained = True
        if self.energy > ENERGY_RECOVERED:
            self.endurance = True
        if not self.endurance:
            self.sprite_scale = WALK_SCALE
        return drained

    def advance_katana(self, elapsed: float) -> bool:
        """Advance the katana swing; returns True if a frame was played."""
        if not self.attacking:
            self.katana_left = 0
            return False
        self.locked = True
        self.texture = _KATANA_TEXTURES[Facing(self.facing)]
        if elapsed <= KATANA_DELAY:
            return False
        self.katana_left += KATANA_STEP
        if self.katana_left > KATANA_LAST_FRAME:
            self.attacking = False
            self.locked = False
        return True

    def toggle_map(self, pressed: bool) -> bool:
        """Show or hide the map on a fresh key press; returns whether it is shown."""
        if pressed and not self._map_previous:
            self.map_shown = not self.map_shown
        self._map_previous = pressed
        return self.map_shown

    def camera_center(self) -> tuple[float, float]:
        """Centre the camera on where the sprite was drawn, then move the sprite."""
        sprite_x, sprite_y = self.sprite_position
        center = (sprite_x - CAMERA_SHIFT_X + self.speed, sprite_y + self.speed)
        self.sprite_position = (self.x, self.y)
        return center