"""Scene dispatch: which music plays where, and the story's progress."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .state import Inventory, Item, Scene

STARTING_DOLLARS = 350
COMPUTER_PRICE = 650

# Number of script lines shown at each story step.
COMPUTER_BOUGHT_LINES = 4
FACTORY_ENTERED_LINES = 5
FACTORY_REWARD_LINES = 5
CAN_AFFORD_LINES = 6

FACTORY_REWARD = Item.KATANA


class Music(Enum):
    """Background tracks, by the file each one is read from."""

    MENU = "ressource/music/music_menu.ogg"
    AMBIANCE = "ressource/music/music_ambiance.ogg"
    HOUSE = "ressource/music/music_maison.wav"
    BAR = "ressource/music/music_bar.ogg"
    FACTORY = "ressource/music/music_usine.ogg"
    STORE = (
        "ressource/music/Nintendo Wii - Shop Channel Music (Extended) HQ.wav"
    )
    MANOR = "music_manoir.ogg"
    SILENT = ""


def music_for(scene: Scene, factory_open: bool) -> Music:
    """Return the track that ends up playing for a scene.

    Every scene pauses all tracks before starting its own, so when
    several rules apply the last one wins: the factory track overrides
    the city, store and factory scenes, while the manor, house and
    saloon keep theirs, and the hacking game and the locked factory
    door are silent.
    """
    scene = Scene(scene)
    music = Music.SILENT
    if scene is Scene.CITY:
        music = Music.AMBIANCE
    elif scene is Scene.STORE:
        music = Music.STORE
    if factory_open:
        music = Music.FACTORY
    if scene is Scene.HAUNTED:
        music = Music.MANOR
    elif scene is Scene.HOUSE:
        music = Music.HOUSE
    elif scene is Scene.SALOON:
        music = Music.BAR
    elif scene is Scene.HACKBOT:
        music = Music.SILENT
    elif scene is Scene.FACTORY and not factory_open:
        music = Music.SILENT
    return music


def _in_factory_zone(x: float, y: float) -> bool:
    return 280 < x < 340 and 525 < y < 575


def near_factory_terminal(x: float, y: float) -> bool:
    """Return True where the use-key prompt shows inside the factory."""
    return 280 < x < 340 and y < 573


@dataclass
class Story:
    """Progress flags of the story line."""

    exit_house: int = 0
    first_factory: int = 0
    history: int = 0
    near_mother: bool = False

    def update(self, scene: Scene, dollars: int, inventory: Inventory) -> list[int]:
        """Advance the story for one frame.

        Returns, in order, how many script lines each triggered step
        shows; an empty list if nothing happened.
        """
        shown: list[int] = []
        if self.history == 1 and inventory.holds(Item.COMPUTER):
            shown.append(COMPUTER_BOUGHT_LINES)
            self.history = 2
        if Scene(scene) is Scene.FACTORY and self.first_factory == 0:
            shown.append(FACTORY_ENTERED_LINES)
            self.first_factory = 1
        if (self.first_factory == 4 and self.history == 0
                and dollars >= COMPUTER_PRICE):
            shown.append(CAN_AFFORD_LINES)
            self.history = 1
        return shown

    def factory_interact(self, x: float, y: float, pressed_use: bool) -> bool:
        """Handle the player by the factory terminal.

        Returns True when the reward is handed out: the caller then
        shows the next script lines and gives the katana.
        """
        if not _in_factory_zone(x, y):
            self.near_mother = False
            return False
        self.near_mother = True
        if pressed_use and self.first_factory == 2:
            self.first_factory = 4
            return True
        return False