"""The shop: a carousel of items to buy."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .state import Inventory, Item

MAP_IMAGE = Path("ressource/shop.jpeg")
COLLISION_IMAGE = Path("ressource/collision_shop.jpeg")


@dataclass(frozen=True)
class StoreItem:
    """An item on sale."""

    name: str
    price: int
    item: Item
    name_x: float = 853.0

    @property
    def price_text(self) -> str:
        return str(self.price)


CATALOGUE = (
    StoreItem("Portable Computer", 650, Item.COMPUTER, 745.0),
    StoreItem("Seringue", 35, Item.SERINGUE),
    StoreItem("sugar", 50, Item.SUGAR),
    StoreItem("katana", 800, Item.KATANA),
)


def near_counter(x: float, y: float) -> bool:
    """Return True where the use-key prompt shows by the shop counter."""
    return 106 < x < 214 and y < 148


@dataclass
class Store:
    """Which item the carousel shows and whether the shop screen is open."""

    index: int = 0
    displayed: bool = False

    def current(self) -> StoreItem:
        """Return the item shown now."""
        return CATALOGUE[self.index]

    @property
    def at_first(self) -> bool:
        return self.index == 0

    @property
    def at_last(self) -> bool:
        return self.index == len(CATALOGUE) - 1

    def next(self) -> StoreItem:
        """Show the following item, if the shop is open and there is one."""
        if self.displayed and not self.at_last:
            self.index += 1
        return self.current()

    def previous(self) -> StoreItem:
        """Show the preceding item, if the shop is open and there is one."""
        if self.displayed and not self.at_first:
            self.index -= 1
        return self.current()

    def toggle(self, x: float, y: float) -> bool:
        """Open the shop screen at the counter, or close it if it is open."""
        if not self.displayed and 105 < x < 211 and y < 140:
            self.displayed = True
        elif self.displayed:
            self.displayed = False
        return self.displayed

    def buy(self, dollars: int, inventory: Inventory) -> tuple[int, Item | None]:
        """Buy the shown item if it is affordable and a slot is free.

        Returns the money left and the item bought, or the money unchanged
        and None. Placing the item in the inventory is up to the caller.
        """
        offer = self.current()
        if offer.price <= dollars and inventory.has_free_slot():
            return dollars - offer.price, offer.item
        return dollars, None