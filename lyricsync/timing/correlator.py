"""Correlation of a primary lyric line with an independently timed translation track."""

from __future__ import annotations

from enum import Enum

from lyricsync.domain import LyricLine, Timeline
from lyricsync.timing.language import DEFAULT_TARGET_RATIO, is_target_language_text
from lyricsync.timing.resolver import TimeDomain

DEFAULT_MIN_OVERLAP_SECONDS = 0.1


class CorrelationStrategy(Enum):
    """How a translation line is matched to the primary line."""

    CONTAINMENT = "containment"
    OVERLAP = "overlap"


def should_show_subtitle(
    main_text: str,
    sub_text: str | None,
    threshold: float = DEFAULT_TARGET_RATIO,
) -> bool:
    """Returns whether a translation should be shown under the main line.

    Nothing is shown without a translation, or when the main line is already
    in the target language.
    """
    if not sub_text:
        return False
    if is_target_language_text(main_text, threshold):
        return False
    return True


def _find_containing(
    sub_timeline: Timeline,
    query: float,
    domain: TimeDomain,
) -> LyricLine | None:
    start_field = domain.start_field
    end_field = domain.end_field
    for line in sub_timeline.lines:
        if getattr(line, start_field) <= query < getattr(line, end_field):
            return line
    return None


def _find_overlapping(
    primary: LyricLine,
    sub_timeline: Timeline,
    min_overlap_seconds: float,
) -> LyricLine | None:
    best: LyricLine | None = None
    best_overlap = min_overlap_seconds
    for line in sub_timeline.lines:
        overlap = min(primary.end, line.end) - max(primary.start, line.start)
        if overlap > best_overlap:
            best = line
            best_overlap = overlap
    return best


def find_translation(
    primary: LyricLine | None,
    sub_timeline: Timeline,
    query: float,
    *,
    strategy: CorrelationStrategy = CorrelationStrategy.CONTAINMENT,
    domain: TimeDomain = TimeDomain.SECONDS,
    min_overlap_seconds: float = DEFAULT_MIN_OVERLAP_SECONDS,
) -> LyricLine | None:
    """Finds the translation line matching the primary line, without suppression.

    ``CONTAINMENT`` picks the first translation line whose half-open interval
    contains ``query`` in the given domain. ``OVERLAP`` ignores ``query`` and
    picks the translation line sharing the most time with the primary line's
    own interval, provided the shared time exceeds ``min_overlap_seconds``.
    Ties keep the earlier line.
    """
    if primary is None:
        return None
    if strategy is CorrelationStrategy.OVERLAP:
        return _find_overlapping(primary, sub_timeline, min_overlap_seconds)
    return _find_containing(sub_timeline, query, domain)


def active_translation(
    primary: LyricLine | None,
    sub_timeline: Timeline,
    query: float,
    *,
    strategy: CorrelationStrategy = CorrelationStrategy.CONTAINMENT,
    domain: TimeDomain = TimeDomain.SECONDS,
    min_overlap_seconds: float = DEFAULT_MIN_OVERLAP_SECONDS,
    threshold: float = DEFAULT_TARGET_RATIO,
) -> LyricLine | None:
    """Returns the translation line to display for the primary line, if any."""
    candidate = find_translation(
        primary,
        sub_timeline,
        query,
        strategy=strategy,
        domain=domain,
        min_overlap_seconds=min_overlap_seconds,
    )
    if primary is None or candidate is None:
        return None
    if not should_show_subtitle(primary.text, candidate.text, threshold):
        return None
    return candidate
