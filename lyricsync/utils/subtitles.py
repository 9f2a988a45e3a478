"""Subtitle file loading and upload type guards."""

import logging
from pathlib import Path

from lyricsync.domain import Timeline
from lyricsync.timing.parser import parse_srt
from lyricsync.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)

SUBTITLE_EXTENSIONS: frozenset[str] = frozenset({".srt"})
AUDIO_EXTENSIONS: frozenset[str] = frozenset({".wav", ".mp3"})
IMAGE_EXTENSIONS: frozenset[str] = frozenset({".png", ".jpg", ".jpeg"})


class SubtitleReadError(OSError):
    """Raised when a subtitle file cannot be read as text."""


def _has_extension(path: str | Path, extensions: frozenset[str]) -> bool:
    return Path(path).suffix.lower() in extensions


def is_valid_subtitle_file(path: str | Path) -> bool:
    return _has_extension(path, SUBTITLE_EXTENSIONS)


def is_valid_audio_file(path: str | Path) -> bool:
    return _has_extension(path, AUDIO_EXTENSIONS)


def is_valid_image_file(path: str | Path) -> bool:
    return _has_extension(path, IMAGE_EXTENSIONS)


def read_subtitle_text(path: str | Path) -> str:
    """Reads subtitle text as UTF-8, dropping a leading byte-order mark."""
    subtitle_path = Path(path)
    try:
        return subtitle_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as err:
        logger.error("Failed to read subtitle file %s: %s", subtitle_path, err)
        raise SubtitleReadError(
            f"Failed to read subtitle file {subtitle_path}: {err}"
        ) from err


def read_subtitle_file(path: str | Path, fps: int) -> Timeline:
    """Reads and parses a subtitle file into a timeline.

    Raises:
        SubtitleReadError: If the file is missing or not valid UTF-8.
    """
    text = read_subtitle_text(path)
    timeline = parse_srt(text, fps)
    logger.info(
        "Loaded %s lyric lines from %s (%.2fs)",
        len(timeline),
        path,
        timeline.duration,
    )
    return timeline
