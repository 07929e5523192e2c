"""Game rules for a top-down cyberpunk role-playing game: state, script, saves, shop, keypad, skills, characters, menus and scenes."""

__version__ = "0.1.0"