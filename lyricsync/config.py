"""Typed application settings loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

CORRELATION_STRATEGIES: tuple[str, ...] = ("containment", "overlap")


@dataclass(frozen=True)
class TimingConfig:
    """Settings for lyric resolution, correlation, and windowing."""

    fps: int = 30
    window_radius: int = 3
    min_overlap_seconds: float = 0.1
    target_language_ratio: float = 0.8
    correlation_strategy: str = "containment"


@dataclass(frozen=True)
class VideoSettings:
    """Output video settings forwarded to the external renderer."""

    font_size: int = 36
    blur_intensity: int = 80
    width: int = 1920
    height: int = 1080


@dataclass(frozen=True)
class AudioReadConfig:
    """Retry settings for decoding the audio track."""

    max_retries: int = 3
    retry_delay: float = 1.0


@dataclass(frozen=True)
class AppConfig:
    """Top-level application settings."""

    timing: TimingConfig
    video: VideoSettings
    audio_read: AudioReadConfig
    output_folder: Path


def _read_int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    raw_value = os.getenv(name, "").strip()
    if not raw_value:
        return default
    try:
        value = int(raw_value)
    except ValueError as err:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}.") from err
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}.")
    if maximum is not None and value > maximum:
        raise ValueError(f"{name} must be <= {maximum}, got {value}.")
    return value


def _read_float(name: str, default: float, *, minimum: float = 0.0) -> float:
    raw_value = os.getenv(name, "").strip()
    if not raw_value:
        return default
    try:
        value = float(raw_value)
    except ValueError as err:
        raise ValueError(f"{name} must be a number, got {raw_value!r}.") from err
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}.")
    return value


def _read_strategy() -> str:
    raw_value = os.getenv("LYRICSYNC_CORRELATION_STRATEGY", "").strip().lower()
    if not raw_value:
        return TimingConfig.correlation_strategy
    if raw_value not in CORRELATION_STRATEGIES:
        raise ValueError(
            "LYRICSYNC_CORRELATION_STRATEGY must be one of "
            f"{', '.join(CORRELATION_STRATEGIES)}, got {raw_value!r}."
        )
    return raw_value


def _load_settings() -> AppConfig:
    """Builds settings from the current process environment."""
    timing = TimingConfig(
        fps=_read_int("LYRICSYNC_FPS", TimingConfig.fps, minimum=1),
        window_radius=_read_int(
            "LYRICSYNC_WINDOW_RADIUS", TimingConfig.window_radius, minimum=0
        ),
        min_overlap_seconds=_read_float(
            "LYRICSYNC_MIN_OVERLAP_SECONDS", TimingConfig.min_overlap_seconds
        ),
        target_language_ratio=_read_float(
            "LYRICSYNC_TARGET_LANGUAGE_RATIO", TimingConfig.target_language_ratio
        ),
        correlation_strategy=_read_strategy(),
    )
    video = VideoSettings(
        font_size=_read_int(
            "LYRICSYNC_FONT_SIZE", VideoSettings.font_size, minimum=16, maximum=48
        ),
        blur_intensity=_read_int(
            "LYRICSYNC_BLUR_INTENSITY",
            VideoSettings.blur_intensity,
            minimum=20,
            maximum=120,
        ),
        width=_read_int("LYRICSYNC_VIDEO_WIDTH", VideoSettings.width, minimum=1),
        height=_read_int("LYRICSYNC_VIDEO_HEIGHT", VideoSettings.height, minimum=1),
    )
    audio_read = AudioReadConfig(
        max_retries=_read_int(
            "LYRICSYNC_AUDIO_MAX_RETRIES", AudioReadConfig.max_retries, minimum=1
        ),
        retry_delay=_read_float(
            "LYRICSYNC_AUDIO_RETRY_DELAY", AudioReadConfig.retry_delay
        ),
    )
    output_folder = Path(os.getenv("LYRICSYNC_OUTPUT_DIR", "").strip() or "output")
    return AppConfig(
        timing=timing,
        video=video,
        audio_read=audio_read,
        output_folder=output_folder,
    )


_SETTINGS: AppConfig | None = None


def reload_settings() -> AppConfig:
    """Reloads settings from the environment and returns them."""
    global _SETTINGS
    _SETTINGS = _load_settings()
    return _SETTINGS


def get_settings() -> AppConfig:
    """Returns cached settings, loading them on first use."""
    if _SETTINGS is None:
        return reload_settings()
    return _SETTINGS
