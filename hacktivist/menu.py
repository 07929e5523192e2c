"""The title screen: scrolling background, animated title and the main menu."""

from __future__ import annotations

from dataclasses import dataclass

FONT = "ressource/cyber.ttf"
BUTTON_FONT_SIZE = 63
BUTTON_LABELS = ("New Game", "Continue", "Settings", "Exit")
BUTTON_X = (810, 820, 840, 890)
HOVER_SCALE = 1.05
CONTINUE_PROMPT = "Press space to continue"

MENU_STEP = 3
TITLE_X = 427
TITLE_START_Y = 300
TITLE_REST_Y = 20
TITLE_EXIT_STEP = 3
LEAVE_LIMIT = -1200

MOVE_DELAY = 0.005
TITLE_DELAY = 0.1
TITLE_FRAME = 666
TITLE_LAST_FRAME = 8668
CURSOR_FRAME = 542
CURSOR_LAST_FRAME = 2000
BACKGROUND_DELAY = 0.02
BACKGROUND_STEP = 2
EFFECT_STEP = 1
BACKGROUND_LAST = 4011
RUNNER_DELAY = 0.04
RUNNER_FRAME = 175
RUNNER_LAST_FRAME_IDLE = 6300
RUNNER_LAST_FRAME_LEAVING = 3800
RUNNER_START = 180
RUNNER_OFFSET = 72
RUNNER_SPEED = 2.5
RUNNER_MOVE_DELAY = 0.001


@dataclass
class TitleMenu:
    """Positions and animation frames of everything on the title screen."""

    y_black_back: int = 835
    y_new_game: int = 1215
    y_continue: int = 1345
    y_setting: int = 1475
    y_exit: int = 1605
    title_y: int = TITLE_START_Y
    continue_pressed: bool = False
    new_game: bool = False
    title_left: int = 0
    cursor_left: int = 0
    background_left: int = 0
    effect_left: int = 0
    runner_left: int = 0
    walker_x: float = float(RUNNER_START)
    runner_x: float = float(RUNNER_START - RUNNER_OFFSET)

    @property
    def button_positions(self) -> dict[str, tuple[int, int]]:
        """Where each menu button is drawn now."""
        ys = (self.y_new_game, self.y_continue, self.y_setting, self.y_exit)
        return {label: (x, y) for label, x, y in zip(BUTTON_LABELS, BUTTON_X, ys)}

    def scroll(self) -> None:
        """Move the menu panel and its buttons up one step."""
        self.y_black_back -= MENU_STEP
        self.y_new_game -= MENU_STEP
        self.y_continue -= MENU_STEP
        self.y_setting -= MENU_STEP
        self.y_exit -= MENU_STEP

    def _leave(self) -> None:
        if self.y_black_back > LEAVE_LIMIT:
            self.scroll()
        if self.title_y > LEAVE_LIMIT:
            self.title_y -= TITLE_EXIT_STEP

    def tick_move(self, elapsed: float) -> bool:
        """Slide the title and menu into place, or out once a game starts.

        Nothing moves before the continue prompt was answered or while
        too little time passed; returns True if a step was taken.
        """
        if not self.continue_pressed or elapsed <= MOVE_DELAY:
            return False
        if self.title_y > TITLE_REST_Y:
            self.title_y -= 1
        if self.y_black_back > 0:
            self.scroll()
        if self.new_game:
            self._leave()
            if elapsed > RUNNER_MOVE_DELAY:
                self.runner_x += RUNNER_SPEED
        return True

    def tick_title(self, elapsed: float) -> bool:
        """Advance the title and mouse cursor animations."""
        if elapsed <= TITLE_DELAY:
            return False
        self.title_left += TITLE_FRAME
        self.cursor_left += CURSOR_FRAME
        if self.title_left > TITLE_LAST_FRAME:
            self.title_left = 0
        if self.cursor_left > CURSOR_LAST_FRAME:
            self.cursor_left = 0
        return True

    def tick_background(self, elapsed: float) -> bool:
        """Scroll the two background layers."""
        if elapsed <= BACKGROUND_DELAY:
            return False
        self.background_left += BACKGROUND_STEP
        self.effect_left += EFFECT_STEP
        if self.background_left > BACKGROUND_LAST:
            self.background_left = 0
        if self.effect_left > BACKGROUND_LAST:
            self.effect_left = 0
        return True

    def tick_runner(self, elapsed: float) -> bool:
        """Advance the walking or running heroine's animation frame."""
        if elapsed <= RUNNER_DELAY:
            return False
        self.runner_left += RUNNER_FRAME
        last = RUNNER_LAST_FRAME_LEAVING if self.new_game else RUNNER_LAST_FRAME_IDLE
        if self.runner_left > last:
            self.runner_left = 0
        return True

    def start_new_game(self) -> None:
        """Leave the title screen: the menu slides out and the heroine runs off."""
        self.new_game = True