"""Behavior tests for SRT parsing into lyric timelines."""

import pytest

from lyricsync.domain import LyricLine
from lyricsync.timing.parser import parse_srt


EXAMPLE_SRT = """1
00:00:01,000 --> 00:00:04,000
First line

2
00:00:05,500 --> 00:00:08,000
Second line
"""


def test_parse_srt_reads_example_blocks() -> None:
    """Both blocks should be parsed with second and frame bounds."""
    timeline = parse_srt(EXAMPLE_SRT, fps=30)

    assert timeline.lines == (
        LyricLine(1, 1.0, 4.0, 30, 120, "First line"),
        LyricLine(2, 5.5, 8.0, 165, 240, "Second line"),
    )
    assert timeline.duration == pytest.approx(8.0)
    assert timeline.fps == 30


def test_parse_srt_sorts_by_start_time() -> None:
    """Output order follows start time, not block order."""
    text = """3
00:00:09,000 --> 00:00:10,000
Third

1
00:00:01,000 --> 00:00:02,000
First

2
00:00:05,000 --> 00:00:06,000
Second
"""
    timeline = parse_srt(text, fps=30)

    assert [line.text for line in timeline] == ["First", "Second", "Third"]
    assert [line.index for line in timeline] == [1, 2, 3]


def test_parse_srt_keeps_input_order_for_equal_starts() -> None:
    """Lines starting together keep their relative file order."""
    text = """1
00:00:01,000 --> 00:00:03,000
Lead

2
00:00:01,000 --> 00:00:02,000
Echo
"""
    timeline = parse_srt(text, fps=30)

    assert [line.text for line in timeline] == ["Lead", "Echo"]


def test_parse_srt_accepts_dot_separator_and_crlf() -> None:
    """Dot millisecond separators and Windows line endings are normalized."""
    text = "1\r\n00:00:01.250 --> 00:00:02.500\r\nDot\r\n\r\n2\r00:00:03,000 --> 00:00:04,000\rMac\r"

    timeline = parse_srt(text, fps=30)

    assert [(line.start, line.end, line.text) for line in timeline] == [
        (1.25, 2.5, "Dot"),
        (3.0, 4.0, "Mac"),
    ]


def test_parse_srt_preserves_multiline_text() -> None:
    """Text lines are joined with newlines and trimmed."""
    text = "1\n00:00:01,000 --> 00:00:02,000\n  first part\nsecond part  \n"

    timeline = parse_srt(text, fps=30)

    assert timeline[0].text == "first part\nsecond part"


def test_parse_srt_skips_malformed_blocks() -> None:
    """Bad indexes, bad timestamps, and short blocks are dropped silently."""
    text = """intro
00:00:00,000 --> 00:00:01,000
Not numbered

2
0:00:01,000 --> 00:00:02,000
Short hour field

3
00:00:02,000 --> 00:00:03,00
Short millis

4
00:00:03,000 --> 00:00:04,000

5
00:00:05,000 --> 00:00:06,000
Kept
"""
    timeline = parse_srt(text, fps=30)

    assert [line.index for line in timeline] == [5]


def test_parse_srt_empty_text_does_not_extend_duration() -> None:
    """A block whose text trims to empty is skipped and ignored for duration."""
    text = """1
00:00:01,000 --> 00:00:02,000
Kept

2
00:00:10,000 --> 00:00:20,000
   
"""
    timeline = parse_srt(text, fps=30)

    assert len(timeline) == 1
    assert timeline.duration == pytest.approx(2.0)


def test_parse_srt_passes_inverted_intervals_through() -> None:
    """An end before its start is kept as written."""
    text = "1\n00:00:05,000 --> 00:00:03,000\nBackwards\n"

    timeline = parse_srt(text, fps=30)

    assert timeline[0].start == pytest.approx(5.0)
    assert timeline[0].end == pytest.approx(3.0)
    assert timeline.duration == pytest.approx(3.0)


def test_parse_srt_rounds_half_frames_up() -> None:
    """Frame bounds round halves away from zero."""
    text = "1\n00:00:01,250 --> 00:00:01,750\nHalf\n"

    timeline = parse_srt(text, fps=2)

    assert (timeline[0].start_frame, timeline[0].end_frame) == (3, 4)


def test_parse_srt_handles_byte_order_mark() -> None:
    """A leading byte-order mark does not hide the first block."""
    timeline = parse_srt("\ufeff" + EXAMPLE_SRT, fps=30)

    assert len(timeline) == 2


@pytest.mark.parametrize("text", ["", "   \n\n  ", "\n\n\n"])
def test_parse_srt_returns_empty_timeline_for_blank_input(text: str) -> None:
    timeline = parse_srt(text, fps=30)

    assert len(timeline) == 0
    assert timeline.duration == 0.0


@pytest.mark.parametrize("fps", [0, -30])
def test_parse_srt_rejects_non_positive_fps(fps: int) -> None:
    with pytest.raises(ValueError, match="fps must be positive"):
        parse_srt(EXAMPLE_SRT, fps=fps)


@pytest.mark.parametrize(
    "block",
    [
        "\u0661\n00:00:01,000 --> 00:00:02,000\nArabic-Indic index\n",
        "1\n\u0660\u0660:\u0660\u0660:\u0660\u0661,\u0660\u0660\u0660 --> 00:00:02,000\nArabic-Indic start\n",
    ],
)
def test_parse_srt_skips_blocks_with_non_ascii_digits(block: str) -> None:
    """Only ASCII digits are accepted in indices and timestamps."""
    text = block + "\n2\n00:00:03,000 --> 00:00:04,000\nKept\n"

    timeline = parse_srt(text, fps=30)

    assert [line.text for line in timeline] == ["Kept"]
