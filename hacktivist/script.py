"""Story script: reading dialogue lines from the script file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SCRIPT_PATH = Path("ressource/files/script.txt")
WHITE = (255, 255, 255)
SPEAKER_BLUE = (24, 140, 255)
_CHUNK = 255


def line_counter(text: str) -> int:
    """Return the number of lines in a raw script: newlines plus one."""
    return text.count("\n") + 1


def line_color(text: str) -> tuple[int, int, int]:
    """Lines starting with a space are narration (white); others are speech (blue)."""
    return WHITE if text.startswith(" ") else SPEAKER_BLUE


@dataclass(frozen=True)
class ScriptLine:
    """A dialogue line as it is shown on screen."""

    text: str
    color: tuple[int, int, int]
    x: float = 190.0
    y: float = -45.0
    character_size: int = 30
    scale: float = 0.25

    @classmethod
    def from_text(cls, text: str) -> ScriptLine:
        return cls(text=text, color=line_color(text))


def _records(stream):
    """Yield records of at most 255 characters, each ending at a newline if one comes first."""
    for raw in stream:
        for start in range(0, len(raw), _CHUNK):
            yield raw[start:start + _CHUNK]


def read_script(path, start: int, count: int) -> list[ScriptLine]:
    """Read ``count`` records after skipping ``start`` records of the script file."""
    lines: list[ScriptLine] = []
    with open(path, encoding="utf-8", newline="") as stream:
        for index, record in enumerate(_records(stream)):
            if index >= start + count:
                break
            if index < start:
                continue
            text = record.split("\n", 1)[0]
            lines.append(ScriptLine.from_text(text))
    return lines


@dataclass
class Script:
    """Tracks how far the story has been read and the lines shown now."""

    path: Path = DEFAULT_SCRIPT_PATH
    line: int = 0
    gap: float = 0.0
    lines: list[ScriptLine] = field(default_factory=list)

    def advance(self, count: int) -> list[ScriptLine]:
        """Replace the shown lines with the next ``count`` lines of the script."""
        self.lines = read_script(self.path, self.line, count)
        self.line += count
        self.gap = 0.0
        return self.lines