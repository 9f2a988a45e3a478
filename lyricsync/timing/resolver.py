"""Active-line resolution for a playback instant or an output frame."""

from __future__ import annotations

from enum import Enum

from lyricsync.domain import Timeline


class TimeDomain(Enum):
    """Comparison domain used when resolving a query against line bounds."""

    SECONDS = ("start", "end")
    FRAMES = ("start_frame", "end_frame")

    @property
    def start_field(self) -> str:
        return self.value[0]

    @property
    def end_field(self) -> str:
        return self.value[1]


def resolve_active_index(
    timeline: Timeline,
    query: float,
    domain: TimeDomain = TimeDomain.SECONDS,
) -> int:
    """Returns the position of the active line for ``query`` or ``-1``.

    Rules, evaluated in order:
    1. The first line (in sort order) whose half-open ``[start, end)`` contains
       the query is active.
    2. In a gap, the line before the next upcoming line stays active, which is
       ``-1`` before the first line starts.
    3. Past every line, the last line stays active.

    Inverted or empty intervals never contain a query and only take part in
    rules 2 and 3.
    """
    start_field = domain.start_field
    end_field = domain.end_field
    lines = timeline.lines

    for position, line in enumerate(lines):
        if getattr(line, start_field) <= query < getattr(line, end_field):
            return position

    for position, line in enumerate(lines):
        if query < getattr(line, start_field):
            return position - 1

    return len(lines) - 1


def active_index(timeline: Timeline, seconds: float) -> int:
    """Resolves the active line for a continuous playback time in seconds."""
    return resolve_active_index(timeline, seconds, TimeDomain.SECONDS)


def active_index_by_frame(timeline: Timeline, frame: int) -> int:
    """Resolves the active line for a discrete output frame."""
    return resolve_active_index(timeline, frame, TimeDomain.FRAMES)
