"""Bounded neighbourhood of lines around the active line."""

from __future__ import annotations

from lyricsync.domain import Timeline, WindowEntry


def visible_window(
    timeline: Timeline,
    active_index: int,
    radius: int,
) -> tuple[WindowEntry, ...]:
    """Returns up to ``radius`` lines on each side of the active line.

    Args:
        timeline: Timeline to slice.
        active_index: Position of the active line, or ``-1`` before the first line.
        radius: Number of neighbours to include on each side.

    Returns:
        Entries in ascending order, each with its offset from ``active_index``.

    Raises:
        ValueError: If ``radius`` is negative.
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}.")

    start = max(0, active_index - radius)
    end = min(len(timeline), active_index + radius + 1)
    return tuple(
        WindowEntry(line=timeline.lines[position], offset=position - active_index)
        for position in range(start, end)
    )
