"""The settings panel and the key-binding panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

FONT = "ressource/cyber.ttf"
KEY_FONT = "ressource/arial_narrow_7.ttf"
WINDOW_TITLE = "Hacktivist"
WINDOW_SIZE = (1920, 1080)
MUSIC_BAR = (945, 367, 210, 20)
SOUND_BAR = (945, 467, 210, 20)
MUSIC_CURSOR = (1145, 362)
SOUND_CURSOR = (1145, 462)


def _default_key_labels() -> dict[str, str]:
    return {"up": "Z", "down": "S", "left": "Q", "right": "D",
            "sprint": "Shift", "use": "E"}


class SettingsTarget(Enum):
    """What a click on the settings screens landed on."""

    SETTINGS_BUTTON = "settings"
    ARROW = "arrow"
    CUSTOMIZE = "customize"
    FULLSCREEN = "fullscreen"
    WINDOW = "window"


@dataclass
class Settings:
    """Which settings panels are shown and the window mode chosen."""

    shown: bool = False
    bindings_shown: bool = False
    fullscreen: bool = False
    key_labels: dict[str, str] = field(default_factory=_default_key_labels)

    def click(self, target: SettingsTarget) -> bool:
        """Handle a click; returns True if the window must be recreated."""
        target = SettingsTarget(target)
        if target is SettingsTarget.SETTINGS_BUTTON and not self.shown:
            self.shown = True
        if target is SettingsTarget.ARROW and self.shown and not self.bindings_shown:
            self.shown = False
        if target is SettingsTarget.CUSTOMIZE and self.shown:
            self.bindings_shown = True
        if target is SettingsTarget.ARROW and self.bindings_shown:
            self.bindings_shown = False
        on_main_panel = self.shown and not self.bindings_shown
        if target is SettingsTarget.FULLSCREEN and on_main_panel:
            self.fullscreen = True
            return True
        if target is SettingsTarget.WINDOW and on_main_panel:
            self.fullscreen = False
            return True
        return False

    def close(self) -> None:
        """Hide both panels, as when the escape menu closes."""
        self.shown = False
        self.bindings_shown = False