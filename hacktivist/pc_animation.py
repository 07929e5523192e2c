"""The laptop animation that opens and closes the escape menu."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

FRAME_DELAY = 0.05
FRAME_STEP = 1250
ROW_STEP = 704
ROW_END = 8600
CLOSING_START_LEFT = 8749
CLOSING_START_TOP = 1406
CLOSING_TOUCH_LEFT = 9645


class PcState(IntEnum):
    """What the laptop animation is doing."""

    IDLE = 0
    OPENING = 1
    CLOSING = 2


@dataclass
class PcAnimation:
    """Frame position on the sprite sheet and whether the menu is open."""

    left: int = 0
    top: int = 0
    state: PcState = PcState.IDLE
    menu_open: bool = False
    _closing_started: bool = False

    def toggle(self) -> bool:
        """React to the escape key; returns True if the settings panels must close."""
        if not self.menu_open:
            self.state = PcState.OPENING
            return False
        if self.state == PcState.OPENING:
            self.state = PcState.CLOSING
            self.left = CLOSING_TOUCH_LEFT
            return True
        if self.state == PcState.CLOSING:
            self.menu_open = False
            self.left = 0
            self.state = PcState.IDLE
        return False

    def _advance(self) -> None:
        if self.state == PcState.OPENING:
            self._closing_started = False
            if self.left > ROW_END:
                self.top += ROW_STEP
                self.left = 0
            self.left += FRAME_STEP
        elif self.state == PcState.CLOSING:
            if not self._closing_started:
                self._closing_started = True
                self.top = CLOSING_START_TOP
                self.left = CLOSING_START_LEFT
            if self.left < 1350:
                self.top -= ROW_STEP
                self.left = CLOSING_START_LEFT
            self.left -= FRAME_STEP

    def tick(self, elapsed: float) -> bool:
        """Advance one frame once enough time passed; returns True if it did."""
        if elapsed <= FRAME_DELAY:
            return False
        self._advance()
        if self.left > 4600 and self.state == PcState.OPENING and self.top > 2000:
            self.menu_open = True
        if self.state == PcState.CLOSING:
            self.menu_open = False
            if self.left < 1300 and self.top < 0:
                self.state = PcState.IDLE
        return True