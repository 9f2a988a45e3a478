"""Per-instant display state and whole-video render plans.

The preview and the offline renderer both go through
:func:`resolve_display_state`; the render plan simply evaluates it once per
output frame and compresses the result into runs of identical state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from lyricsync.domain import DisplayState, LyricLine, Timeline
from lyricsync.timing.correlator import (
    DEFAULT_MIN_OVERLAP_SECONDS,
    CorrelationStrategy,
    active_translation,
)
from lyricsync.timing.language import DEFAULT_TARGET_RATIO
from lyricsync.timing.resolver import TimeDomain, resolve_active_index
from lyricsync.timing.windowing import visible_window
from lyricsync.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)

DEFAULT_WINDOW_RADIUS = 3


@dataclass(frozen=True)
class RenderCue:
    """A run of output frames ``[start_frame, end_frame)`` with constant state."""

    start_frame: int
    end_frame: int
    active_index: int
    translation_index: int


@dataclass(frozen=True)
class RenderPlan:
    """Active primary and translation positions for every output frame."""

    fps: int
    duration_in_frames: int
    active_indices: np.ndarray
    translation_indices: np.ndarray
    cues: tuple[RenderCue, ...]


def resolve_display_state(
    primary: Timeline,
    translation: Timeline | None,
    query: float,
    *,
    by_frame: bool = False,
    radius: int = DEFAULT_WINDOW_RADIUS,
    strategy: CorrelationStrategy = CorrelationStrategy.CONTAINMENT,
    min_overlap_seconds: float = DEFAULT_MIN_OVERLAP_SECONDS,
    threshold: float = DEFAULT_TARGET_RATIO,
) -> DisplayState:
    """Resolves the active line, its translation, and the visible window.

    Args:
        primary: Timeline driving the display.
        translation: Optional translation timeline.
        query: Playback time in seconds, or a frame number when ``by_frame``.
        by_frame: Compare against frame bounds instead of second bounds.
        radius: Number of neighbouring lines on each side of the active one.
        strategy: Translation matching strategy.
        min_overlap_seconds: Minimum shared time for ``OVERLAP`` matches.
        threshold: Target-language ratio used to suppress redundant translations.

    Returns:
        Display state for the query instant.
    """
    domain = TimeDomain.FRAMES if by_frame else TimeDomain.SECONDS
    index = resolve_active_index(primary, query, domain)
    active_line: LyricLine | None = primary.lines[index] if index >= 0 else None

    translated: LyricLine | None = None
    if translation is not None:
        translated = active_translation(
            active_line,
            translation,
            query,
            strategy=strategy,
            domain=domain,
            min_overlap_seconds=min_overlap_seconds,
            threshold=threshold,
        )

    return DisplayState(
        query=query,
        active_index=index,
        active_line=active_line,
        translation=translated,
        window=visible_window(primary, index, radius),
    )


def _compress_cues(
    active_indices: np.ndarray,
    translation_indices: np.ndarray,
) -> tuple[RenderCue, ...]:
    """Collapses per-frame positions into runs where neither position changes."""
    frame_count = int(active_indices.shape[0])
    if frame_count == 0:
        return ()

    changed = (active_indices[1:] != active_indices[:-1]) | (
        translation_indices[1:] != translation_indices[:-1]
    )
    boundaries = np.concatenate(([0], np.flatnonzero(changed) + 1, [frame_count]))
    return tuple(
        RenderCue(
            start_frame=int(start),
            end_frame=int(end),
            active_index=int(active_indices[start]),
            translation_index=int(translation_indices[start]),
        )
        for start, end in zip(boundaries[:-1], boundaries[1:])
    )


def build_render_plan(
    primary: Timeline,
    translation: Timeline | None,
    duration_in_frames: int,
    *,
    strategy: CorrelationStrategy = CorrelationStrategy.CONTAINMENT,
    min_overlap_seconds: float = DEFAULT_MIN_OVERLAP_SECONDS,
    threshold: float = DEFAULT_TARGET_RATIO,
) -> RenderPlan:
    """Resolves the display state of every output frame.

    Raises:
        ValueError: If ``duration_in_frames`` is negative.
    """
    if duration_in_frames < 0:
        raise ValueError(
            f"duration_in_frames must be non-negative, got {duration_in_frames}."
        )

    translation_positions: dict[int, int] = {}
    if translation is not None:
        translation_positions = {
            id(line): position for position, line in enumerate(translation.lines)
        }

    active_indices = np.full(duration_in_frames, -1, dtype=np.int64)
    translation_indices = np.full(duration_in_frames, -1, dtype=np.int64)
    for frame in range(duration_in_frames):
        state = resolve_display_state(
            primary,
            translation,
            frame,
            by_frame=True,
            radius=0,
            strategy=strategy,
            min_overlap_seconds=min_overlap_seconds,
            threshold=threshold,
        )
        active_indices[frame] = state.active_index
        if state.translation is not None:
            translation_indices[frame] = translation_positions[id(state.translation)]

    cues = _compress_cues(active_indices, translation_indices)
    logger.info(
        "Render plan covers %s frames at %s fps in %s cues",
        duration_in_frames,
        primary.fps,
        len(cues),
    )
    return RenderPlan(
        fps=primary.fps,
        duration_in_frames=duration_in_frames,
        active_indices=active_indices,
        translation_indices=translation_indices,
        cues=cues,
    )
