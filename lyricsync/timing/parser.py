"""SubRip (SRT) text parsing into lyric timelines."""

from __future__ import annotations

import logging
import re

from lyricsync.domain import LyricLine, Timeline
from lyricsync.utils.common_utils import seconds_to_frames
from lyricsync.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)

_BLOCK_SEPARATOR = re.compile(r"\n\n+")
_INDEX_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")
_TIMESTAMP_PATTERN = re.compile(
    r"([0-9]{2}):([0-9]{2}):([0-9]{2})[,.]([0-9]{3})\s*-->\s*([0-9]{2}):([0-9]{2}):([0-9]{2})[,.]([0-9]{3})"
)


def _normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _to_seconds(hours: str, minutes: str, seconds: str, millis: str) -> float:
    return int(hours) * 3600 + int(minutes) * 60 + int(seconds) + int(millis) / 1000


def _parse_index(line: str) -> int | None:
    match = _INDEX_PATTERN.match(line)
    if match is None:
        return None
    return int(match.group(1))


def _parse_block(block: str, fps: int) -> LyricLine | None:
    """Parses one SRT block, returning ``None`` when it should be skipped."""
    block_lines = block.strip().split("\n")
    if len(block_lines) < 3:
        logger.debug("Skipping block with fewer than 3 lines: %r", block)
        return None

    index = _parse_index(block_lines[0])
    if index is None:
        logger.debug("Skipping block with non-numeric index: %r", block_lines[0])
        return None

    match = _TIMESTAMP_PATTERN.search(block_lines[1])
    if match is None:
        logger.debug("Skipping block %s with malformed timestamps", index)
        return None
    parts = match.groups()
    start = _to_seconds(*parts[:4])
    end = _to_seconds(*parts[4:])

    text = "\n".join(block_lines[2:]).strip()
    if not text:
        logger.debug("Skipping block %s with empty text", index)
        return None

    return LyricLine(
        index=index,
        start=start,
        end=end,
        start_frame=seconds_to_frames(start, fps),
        end_frame=seconds_to_frames(end, fps),
        text=text,
    )


def parse_srt(text: str, fps: int = 30) -> Timeline:
    """Parses SRT text into a timeline sorted by start time.

    Malformed blocks are dropped rather than reported: a block needs an integer
    index line, a ``HH:MM:SS,mmm --> HH:MM:SS,mmm`` line (``.`` is accepted
    before the milliseconds) and at least one non-blank text line. End times
    are passed through unchecked, so inverted intervals survive parsing.

    Args:
        text: Raw subtitle file contents.
        fps: Frame rate used to derive frame bounds.

    Returns:
        Timeline whose duration is the largest end time among kept lines.

    Raises:
        ValueError: If ``fps`` is not positive.
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}.")

    content = _normalize_line_endings(text).lstrip("\ufeff").strip()
    if not content:
        return Timeline.empty(fps)

    lines: list[LyricLine] = []
    skipped = 0
    for block in _BLOCK_SEPARATOR.split(content):
        line = _parse_block(block, fps)
        if line is None:
            skipped += 1
            continue
        lines.append(line)

    lines.sort(key=lambda line: line.start)
    duration = max((line.end for line in lines), default=0.0)
    logger.debug(
        "Parsed %s lyric lines (%s blocks skipped), duration %.3fs",
        len(lines),
        skipped,
        duration,
    )
    return Timeline(lines=tuple(lines), duration=duration, fps=fps)
