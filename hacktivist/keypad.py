"""The factory door keypad mini-game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

SECRET_CODE = 3630
VALIDATE = 10
CANCEL = 11
_START_MULTIPLIER = 1000
_FILLED_BY_MULTIPLIER = {100: 1, 10: 2, 1: 3, 0: 4}


class KeypadResult(IntEnum):
    """Outcome of the last validation."""

    NONE = 0
    WRONG = 1
    CORRECT = 2


def terminal_in_range(x: float, y: float) -> bool:
    """Return True if the player stands at the keypad terminal."""
    return 3850 < x < 3950 and 2040 < y < 2200


@dataclass
class Keypad:
    """A four-digit keypad; keys 0-9 are digits, 10 validates and 11 cancels."""

    code: int = 0
    multiplier: int = _START_MULTIPLIER
    result: KeypadResult = KeypadResult.NONE
    displayed: bool = False
    factory_open: bool = False

    def _reset(self) -> None:
        self.code = 0
        self.multiplier = _START_MULTIPLIER

    def press(self, key: int) -> KeypadResult:
        """Press a key; returns the validation outcome, or NONE for other keys."""
        if not 0 <= key <= CANCEL:
            raise ValueError(f"no keypad key {key}")
        self.code += key * self.multiplier
        self.multiplier //= 10
        if key == VALIDATE:
            if self.code == SECRET_CODE:
                self.result = KeypadResult.CORRECT
                self.factory_open = True
            else:
                self.result = KeypadResult.WRONG
            self._reset()
            return self.result
        if key == CANCEL:
            self._reset()
        return KeypadResult.NONE

    def filled(self) -> int:
        """Number of entry markers to show; none while a result is displayed."""
        if self.result != KeypadResult.NONE:
            return 0
        return _FILLED_BY_MULTIPLIER.get(self.multiplier, 0)

    def toggle_display(self, x: float, y: float) -> bool:
        """Open the keypad at the terminal, or close it if it is open."""
        if not self.displayed and terminal_in_range(x, y):
            self.displayed = True
        elif self.displayed:
            self.displayed = False
        return self.displayed