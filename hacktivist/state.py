"""Shared game state: hit rectangles, scenes, items and the inventory."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

INVENTORY_SIZE = 4


@dataclass
class Rect:
    """An axis-aligned rectangle used for hit tests."""

    left: float
    top: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Return True if the point lies inside; the right and bottom edges are excluded."""
        min_x = min(self.left, self.left + self.width)
        max_x = max(self.left, self.left + self.width)
        min_y = min(self.top, self.top + self.height)
        max_y = max(self.top, self.top + self.height)
        return min_x <= x < max_x and min_y <= y < max_y


class Scene(IntEnum):
    """The places the player can be in."""

    CITY = 0
    STORE = 1
    FACTORY = 2
    HOUSE = 3
    SALOON = 4
    HACKBOT = 5
    HAUNTED = 6


class Item(IntEnum):
    """Item identifiers as stored in inventory slots; NONE marks an empty slot."""

    NONE = 0
    SERINGUE = 1
    SUGAR = 2
    KATANA = 3
    COMPUTER = 4


@dataclass
class Slot:
    """One inventory slot: an item and how many of it are held."""

    item: Item = Item.NONE
    count: int = 0


def _empty_slots() -> list[Slot]:
    return [Slot() for _ in range(INVENTORY_SIZE)]


@dataclass
class Inventory:
    """Four slots and a one-based cursor on the selected slot."""

    slots: list[Slot] = field(default_factory=_empty_slots)
    current_pos: int = 1

    def has_free_slot(self) -> bool:
        """Return True if at least one slot is empty."""
        return any(slot.item == Item.NONE for slot in self.slots)

    def holds(self, item: Item) -> bool:
        """Return True if any slot holds the given item."""
        return any(slot.item == item for slot in self.slots)

    def selected(self) -> Item:
        """Return the item in the slot under the cursor."""
        if not 1 <= self.current_pos <= len(self.slots):
            raise IndexError(f"inventory position {self.current_pos} out of range")
        return self.slots[self.current_pos - 1].item