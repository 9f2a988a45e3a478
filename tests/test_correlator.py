"""Behavior tests for pairing primary lines with translation lines."""

from lyricsync.domain import Timeline
from lyricsync.timing.correlator import (
    CorrelationStrategy,
    active_translation,
    find_translation,
    should_show_subtitle,
)
from lyricsync.timing.parser import parse_srt
from lyricsync.timing.resolver import TimeDomain


def _primary(primary_srt: str) -> Timeline:
    return parse_srt(primary_srt, fps=10)


def test_should_show_subtitle_examples() -> None:
    assert should_show_subtitle("Hello world", "안녕") is False
    assert should_show_subtitle("안녕하세요", "Hello") is True


def test_should_show_subtitle_requires_translation_text() -> None:
    assert should_show_subtitle("안녕하세요", None) is False
    assert should_show_subtitle("안녕하세요", "") is False


def test_containment_matches_translation_at_query(
    primary_srt: str, translation_srt: str
) -> None:
    primary = _primary(primary_srt)
    translation = parse_srt(translation_srt, fps=10)

    match = active_translation(primary[0], translation, 0.7)

    assert match is not None
    assert match.text == "Hello"


def test_containment_finds_nothing_in_translation_gap(
    primary_srt: str, translation_srt: str
) -> None:
    primary = _primary(primary_srt)
    translation = parse_srt(translation_srt, fps=10)

    assert active_translation(primary[1], translation, 2.7) is None


def test_containment_supports_frame_queries(
    primary_srt: str, translation_srt: str
) -> None:
    primary = _primary(primary_srt)
    translation = parse_srt(translation_srt, fps=10)

    match = active_translation(
        primary[1], translation, 24, domain=TimeDomain.FRAMES
    )

    assert match is not None
    assert match.text == "World"
    assert active_translation(primary[1], translation, 25, domain=TimeDomain.FRAMES) is None


def test_overlap_uses_primary_interval_instead_of_query(
    primary_srt: str, translation_srt: str
) -> None:
    primary = _primary(primary_srt)
    translation = parse_srt(translation_srt, fps=10)

    match = active_translation(
        primary[1], translation, 2.7, strategy=CorrelationStrategy.OVERLAP
    )

    assert match is not None
    assert match.text == "World"


def test_overlap_rejects_marginal_matches() -> None:
    primary = parse_srt("1\n00:00:01,000 --> 00:00:04,000\n사랑\n", fps=30)
    translation = parse_srt(
        "1\n00:00:00,000 --> 00:00:01,050\nBefore\n\n"
        "2\n00:00:03,950 --> 00:00:06,000\nAfter\n",
        fps=30,
    )

    assert (
        find_translation(
            primary[0], translation, 2.0, strategy=CorrelationStrategy.OVERLAP
        )
        is None
    )


def test_overlap_prefers_largest_shared_time() -> None:
    primary = parse_srt("1\n00:00:01,000 --> 00:00:04,000\n사랑\n", fps=30)
    translation = parse_srt(
        "1\n00:00:00,000 --> 00:00:01,500\nSmall\n\n"
        "2\n00:00:01,500 --> 00:00:04,000\nLarge\n",
        fps=30,
    )

    match = find_translation(
        primary[0], translation, 1.2, strategy=CorrelationStrategy.OVERLAP
    )

    assert match is not None
    assert match.text == "Large"


def test_english_primary_suppresses_translation() -> None:
    primary = parse_srt("1\n00:00:01,000 --> 00:00:04,000\nHello world\n", fps=30)
    translation = parse_srt("1\n00:00:01,000 --> 00:00:04,000\n안녕\n", fps=30)

    assert find_translation(primary[0], translation, 2.0) is not None
    assert active_translation(primary[0], translation, 2.0) is None


def test_no_primary_line_means_no_translation(translation_srt: str) -> None:
    translation = parse_srt(translation_srt, fps=10)

    assert active_translation(None, translation, 0.7) is None
    assert find_translation(None, translation, 0.7) is None
