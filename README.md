# hacktivist

The rules of a small top-down cyberpunk role-playing game, kept apart
from any window, sprite or sound code. Everything here is plain Python
state that changes in response to elapsed time and player input, so a
front end only has to feed it events and draw what it reports.

## What is inside

| Module | What it models |
| --- | --- |
| `hacktivist.state` | Shared pieces: `Rect` hit areas, the `Scene` and `Item` enums, `Slot` and the four-slot `Inventory` |
| `hacktivist.script` | The story script: `read_script`, `line_counter`, `line_color`, `ScriptLine` and the `Script` that reveals lines a few at a time |
| `hacktivist.save` | `SaveData` with `format_save` / `parse_save` and `write_save` / `load_save` for the semicolon-separated save file |
| `hacktivist.keypad` | The factory door `Keypad` mini-game, `KeypadResult` and `terminal_in_range` |
| `hacktivist.store` | The `Store` with its `StoreItem` catalogue, browsing and buying, and `near_counter` |
| `hacktivist.skills` | `Skills`: spending experience on health, attack and speed |
| `hacktivist.pc_animation` | `PcAnimation`: the laptop opening and closing that frames the pause menu |
| `hacktivist.robot` | The companion `Robot` that powers up, follows the player and restores energy |
| `hacktivist.pnj` | Wandering and chasing characters: `Npc`, `Direction`, `is_blocked` |
| `hacktivist.movement` | The `Player` and `Facing`: walking, sprinting, endurance, katana swings, map toggle, camera |
| `hacktivist.menu` | The animated `TitleMenu` |
| `hacktivist.settings` | The `Settings` panels and the `SettingsTarget` buttons |
| `hacktivist.scene` | Background `Music` per scene (`music_for`), the `Story` progression and `near_factory_terminal` |

## A short tour

Reading a slice of the story script. Lines starting with a space are
narration and come out white; the others are speech and come out blue.

```python
from hacktivist.script import Script, read_script

lines = read_script("script.txt", start=0, count=4)
for line in lines:
    print(line.text, line.color)

script = Script(path="script.txt")
script.advance(4)   # shows lines 0-3
script.advance(5)   # shows lines 4-8
```

Saving and loading progress. `load_save` raises `FileNotFoundError`
when there is no save, and `parse_save` raises `ValueError` for a line
with too few fields or an unknown item:

```python
from hacktivist.save import SaveData, load_save, write_save

write_save(SaveData(x=120.0, y=80.0, dollars=500), "save.txt")
data = load_save("save.txt")
```

Typing the code on the factory keypad; keys 0-9 are digits, 10
validates and 11 cancels:

```python
from hacktivist.keypad import Keypad, KeypadResult

keypad = Keypad()
for key in (3, 6, 3, 0):
    keypad.press(key)
assert keypad.press(10) is KeypadResult.CORRECT
assert keypad.factory_open
```

Browsing the shop. The carousel only moves while the shop screen is
open, and `buy` returns the money left and the item bought (or `None`);
putting the item in a slot is left to the caller:

```python
from hacktivist.state import Inventory
from hacktivist.store import Store

store = Store()
store.toggle(150, 100)          # at the counter: opens the shop
store.next()
print(store.current().name)     # "Seringue"
dollars, item = store.buy(350, Inventory())
```

Collision checks take a `pixel_at(x, y)` callable returning an
`(r, g, b)` colour, where black marks a wall, so any image library or a
plain function can supply the collision map:

```python
import random

from hacktivist.pnj import Npc

def pixel_at(x, y):
    return (255, 255, 255)

npc = Npc(x=50.0, y=50.0)
npc.update(0.05, 100.0, 100.0, pixel_at, random.Random(1))
```

## What this package does not do

There is no game to run here: no command, no window, no drawing, no
sound playback and no input handling. `Music` only names the track
files, the menus and the `Player` only report positions, frames and
scales, and the image and audio resources the paths refer to are not
included. A front end is expected to poll input, measure elapsed time,
call these objects and render what they report.

## Running the tests

The test suite uses pytest, listed in the `test` extra:

```
pip install -e .[test]
pytest
```