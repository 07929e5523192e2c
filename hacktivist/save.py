"""Save files: one line of semicolon-separated fields."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from .state import Inventory, Item, Scene, Slot

DEFAULT_SAVE_PATH = Path("save/save.txt")
FIELD_COUNT = 27

# Key codes as numbered by the window library the save format was made for.
KEY_D = 3
KEY_E = 4
KEY_Q = 16
KEY_S = 18
KEY_Z = 25
KEY_LSHIFT = 38

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _to_int(text: str) -> int:
    """Read a leading integer, 0 if there is none."""
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _to_float(text: str) -> float:
    """Read a leading decimal number, 0.0 if there is none."""
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


@dataclass
class SaveData:
    """Everything a save file records about a game in progress."""

    x: float = 0.0
    y: float = 0.0
    scene: Scene = Scene.CITY
    dollars: int = 350
    xp: int = 0
    attack: int = 0
    health: int = 0
    speed: int = 0
    inventory: Inventory = field(default_factory=Inventory)
    up_key: int = KEY_Z
    down_key: int = KEY_S
    left_key: int = KEY_Q
    right_key: int = KEY_D
    sprint_key: int = KEY_LSHIFT
    use_key: int = KEY_E
    exit_house: int = 0
    first_factory: int = 0
    history: int = 0
    script_line: int = 0
    factory_open: bool = False


def format_save(data: SaveData) -> str:
    """Render the save line, newline included."""
    fields = [f"{data.x:.6f}", f"{data.y:.6f}"]
    numbers = [int(data.scene), data.dollars, data.xp,
               data.attack, data.health, data.speed]
    for slot in data.inventory.slots:
        numbers += [int(slot.item), slot.count]
    numbers += [data.up_key, data.down_key, data.left_key, data.right_key,
                data.sprint_key, data.use_key, data.exit_house,
                data.first_factory, data.history, data.script_line,
                int(data.factory_open)]
    fields += [str(int(number)) for number in numbers]
    return ";".join(fields) + "\n"


def parse_save(text: str) -> SaveData:
    """Parse a save line; raises ValueError if fields are missing or an item is unknown."""
    parts = text.split(";")
    if len(parts) < FIELD_COUNT:
        raise ValueError(
            f"save holds {len(parts)} fields, expected {FIELD_COUNT}")
    ints = [_to_int(part) for part in parts[2:FIELD_COUNT]]
    (scene, dollars, xp, attack, health, speed), rest = ints[:6], ints[6:]
    slot_values, rest = rest[:8], rest[8:]
    slots = [Slot(Item(item), count)
             for item, count in zip(slot_values[::2], slot_values[1::2])]
    (up, down, left, right, sprint, use,
     exit_house, first_factory, history, line, factory) = rest
    return SaveData(
        x=_to_float(parts[0]),
        y=_to_float(parts[1]),
        scene=Scene(scene),
        dollars=dollars,
        xp=xp,
        attack=attack,
        health=health,
        speed=speed,
        inventory=Inventory(slots=slots),
        up_key=up,
        down_key=down,
        left_key=left,
        right_key=right,
        sprint_key=sprint,
        use_key=use,
        exit_house=exit_house,
        first_factory=first_factory,
        history=history,
        script_line=line,
        factory_open=bool(factory),
    )


def write_save(data: SaveData, path=DEFAULT_SAVE_PATH) -> None:
    """Write the save file, replacing any previous one."""
    Path(path).write_text(format_save(data), encoding="utf-8")


def load_save(path=DEFAULT_SAVE_PATH) -> SaveData:
    """Read and parse the save file; raises FileNotFoundError if there is none."""
    return parse_save(Path(path).read_text(encoding="utf-8"))