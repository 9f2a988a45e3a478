"""Input props for the external lyric-video renderer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from lyricsync.config import VideoSettings
from lyricsync.domain import LyricLine, Timeline
from lyricsync.palette import DEFAULT_PALETTE, Palette
from lyricsync.utils.common_utils import duration_in_frames
from lyricsync.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


def line_to_dict(line: LyricLine) -> dict[str, Any]:
    return {
        "id": line.index,
        "startTime": line.start,
        "endTime": line.end,
        "startFrame": line.start_frame,
        "endFrame": line.end_frame,
        "text": line.text,
    }


def render_duration_in_frames(
    primary: Timeline, fps: int, audio_duration: float | None = None
) -> int:
    """Frames needed for the video: the audio length when known, else the lyrics."""
    duration = audio_duration if audio_duration is not None else primary.duration
    return duration_in_frames(duration, fps)


def build_render_props(
    *,
    audio_url: str,
    cover_art_url: str,
    primary: Timeline,
    translation: Timeline | None,
    video: VideoSettings,
    palette: Palette | None = None,
    audio_duration: float | None = None,
) -> dict[str, Any]:
    """Builds the JSON-ready payload the renderer consumes.

    Args:
        audio_url: Location of the audio track as seen by the renderer.
        cover_art_url: Location of the cover image as seen by the renderer.
        primary: Primary lyric timeline.
        translation: Optional translation timeline.
        video: Output video settings.
        palette: Cover-art palette, the fallback palette when missing.
        audio_duration: Audio length in seconds, when known.

    Returns:
        Props dictionary with both timelines serialized.
    """
    fps = primary.fps
    frames = render_duration_in_frames(primary, fps, audio_duration)
    return {
        "audioUrl": audio_url,
        "coverArtUrl": cover_art_url,
        "mainLyrics": [line_to_dict(line) for line in primary],
        "subLyrics": [line_to_dict(line) for line in translation]
        if translation is not None
        else [],
        "colorPalette": (palette or DEFAULT_PALETTE).to_dict(),
        "settings": {
            "fontSize": video.font_size,
            "blurIntensity": video.blur_intensity,
            "fps": fps,
            "width": video.width,
            "height": video.height,
        },
        "durationInFrames": frames,
    }


def write_render_props(props: dict[str, Any], path: str | Path) -> Path:
    """Writes render props as UTF-8 JSON and returns the written path."""
    props_path = Path(path)
    props_path.parent.mkdir(parents=True, exist_ok=True)
    with props_path.open("w", encoding="utf-8") as handle:
        json.dump(props, handle, ensure_ascii=False, indent=2)
        handle.write("\n")
    logger.info("Render props written to %s", props_path)
    return props_path
