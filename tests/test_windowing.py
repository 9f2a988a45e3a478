"""Behavior tests for the visible line window."""

import pytest

from lyricsync.domain import Timeline
from lyricsync.timing.parser import parse_srt
from lyricsync.timing.windowing import visible_window


@pytest.fixture
def ten_lines() -> Timeline:
    blocks = [
        f"{number + 1}\n00:00:{number * 2:02d},000 --> 00:00:{number * 2 + 1:02d},000\nLine {number}"
        for number in range(10)
    ]
    return parse_srt("\n\n".join(blocks), fps=30)


def _positions(timeline: Timeline, window) -> list[int]:
    return [timeline.lines.index(entry.line) for entry in window]


def test_window_at_first_line(ten_lines: Timeline) -> None:
    window = visible_window(ten_lines, 0, 3)

    assert _positions(ten_lines, window) == [0, 1, 2, 3]
    assert [entry.offset for entry in window] == [0, 1, 2, 3]


def test_window_at_last_line(ten_lines: Timeline) -> None:
    window = visible_window(ten_lines, 9, 3)

    assert _positions(ten_lines, window) == [6, 7, 8, 9]
    assert [entry.offset for entry in window] == [-3, -2, -1, 0]


def test_window_in_the_middle(ten_lines: Timeline) -> None:
    window = visible_window(ten_lines, 5, 2)

    assert [entry.offset for entry in window] == [-2, -1, 0, 1, 2]
    assert window[2].line.text == "Line 5"


def test_window_before_first_line_previews_upcoming_lines(ten_lines: Timeline) -> None:
    window = visible_window(ten_lines, -1, 3)

    assert [entry.offset for entry in window] == [1, 2, 3]


def test_window_with_zero_radius(ten_lines: Timeline) -> None:
    window = visible_window(ten_lines, 4, 0)

    assert [entry.offset for entry in window] == [0]


def test_window_on_empty_timeline() -> None:
    assert visible_window(Timeline.empty(30), -1, 3) == ()


def test_window_rejects_negative_radius(ten_lines: Timeline) -> None:
    with pytest.raises(ValueError, match="radius"):
        visible_window(ten_lines, 0, -1)
