"""Domain data structures for lyric lines, timelines, and display state."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple


class LyricLine(NamedTuple):
    """One timed subtitle entry with second and frame bounds."""

    index: int
    start: float
    end: float
    start_frame: int
    end_frame: int
    text: str


@dataclass(frozen=True)
class Timeline:
    """Lyric lines of one track sorted ascending by start time."""

    lines: tuple[LyricLine, ...]
    duration: float
    fps: int

    @classmethod
    def empty(cls, fps: int) -> Timeline:
        """Returns a timeline without any lines."""
        return cls(lines=(), duration=0.0, fps=fps)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[LyricLine]:
        return iter(self.lines)

    def __getitem__(self, position: int) -> LyricLine:
        return self.lines[position]


class WindowEntry(NamedTuple):
    """A line inside the visible window and its offset from the active line."""

    line: LyricLine
    offset: int


@dataclass(frozen=True)
class DisplayState:
    """Everything a renderer needs for one playback instant."""

    query: float
    active_index: int
    active_line: LyricLine | None
    translation: LyricLine | None
    window: tuple[WindowEntry, ...]
