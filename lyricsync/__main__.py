"""
lyricsync

Entry point for the lyricsync command line tool. It parses a primary lyric
track and an optional translation track, prints the timeline, resolves what
is on screen at a given instant, and prepares the inputs of the external
lyric-video renderer.

Usage:
    lyricsync --lyrics main.srt --translation en.srt --at 42.5
    lyricsync --lyrics main.srt --audio song.mp3 --plan-output plan.csv
    lyricsync --lyrics main.srt --audio song.mp3 --cover cover.png \
        --props-output props.json
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from lyricsync.config import CORRELATION_STRATEGIES, AppConfig, reload_settings
from lyricsync.display import build_render_plan, resolve_display_state
from lyricsync.domain import DisplayState, Timeline
from lyricsync.palette import DEFAULT_PALETTE, Palette, load_palette
from lyricsync.render import (
    build_render_props,
    render_duration_in_frames,
    write_render_props,
)
from lyricsync.timing import CorrelationStrategy
from lyricsync.utils import configure_logging, display_elapsed_time, get_logger
from lyricsync.utils.audio_utils import get_audio_duration
from lyricsync.utils.subtitles import (
    SubtitleReadError,
    is_valid_audio_file,
    is_valid_image_file,
    is_valid_subtitle_file,
    read_subtitle_file,
)
from lyricsync.utils.timeline_utils import (
    print_display_state,
    print_timeline,
    save_render_plan_to_csv,
)


logger: logging.Logger = get_logger("lyricsync")


def _build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        description="Synchronized lyric timing for lyric videos"
    )
    parser.add_argument(
        "--lyrics",
        type=str,
        help="Path to the primary lyric track (.srt)",
    )
    parser.add_argument(
        "--translation",
        type=str,
        help="Path to the translation track (.srt)",
    )
    parser.add_argument(
        "--audio",
        type=str,
        help="Path to the audio track (.wav or .mp3), used for the video length",
    )
    parser.add_argument(
        "--cover",
        type=str,
        help="Path to the cover image (.png or .jpg)",
    )
    parser.add_argument(
        "--palette",
        type=str,
        help="Path to a JSON palette extracted from the cover image",
    )
    parser.add_argument(
        "--fps",
        type=int,
        help="Output frame rate (defaults to LYRICSYNC_FPS)",
    )
    parser.add_argument(
        "--radius",
        type=int,
        help="Lines shown on each side of the active line",
    )
    parser.add_argument(
        "--strategy",
        choices=CORRELATION_STRATEGIES,
        help="How translation lines are matched to the active line",
    )
    query_group = parser.add_mutually_exclusive_group()
    query_group.add_argument(
        "--at",
        type=float,
        help="Show the display state at this playback time in seconds",
    )
    query_group.add_argument(
        "--frame",
        type=int,
        help="Show the display state at this output frame",
    )
    parser.add_argument(
        "--plan-output",
        type=str,
        help="Write a per-frame render plan as a CSV cue sheet",
    )
    parser.add_argument(
        "--props-output",
        type=str,
        help="Write renderer input props as JSON",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (overrides LOG_LEVEL)",
    )
    return parser


def _load_track(path: str, fps: int) -> Timeline:
    if not is_valid_subtitle_file(path):
        logger.error("Unsupported subtitle file: %s", path)
        sys.exit(1)
    try:
        return read_subtitle_file(path, fps)
    except SubtitleReadError as err:
        logger.error(msg=f"{err}")
        sys.exit(1)


def _load_palette(path: str | None) -> Palette:
    if not path:
        return DEFAULT_PALETTE
    try:
        return load_palette(path)
    except (OSError, ValueError) as err:
        logger.error("Failed to load palette %s: %s", path, err)
        sys.exit(1)


def _read_audio_duration(path: str | None, settings: AppConfig) -> float | None:
    if not path:
        return None
    if not is_valid_audio_file(path):
        logger.error("Unsupported audio file: %s", path)
        sys.exit(1)
    try:
        return get_audio_duration(path, settings.audio_read)
    except OSError as err:
        logger.error(msg=f"{err}")
        sys.exit(1)


def _resolve_query(
    args: argparse.Namespace,
    primary: Timeline,
    translation: Timeline | None,
    radius: int,
    strategy: CorrelationStrategy,
    settings: AppConfig,
) -> DisplayState | None:
    if args.at is None and args.frame is None:
        return None
    by_frame: bool = args.frame is not None
    query: float = args.frame if by_frame else args.at
    return resolve_display_state(
        primary,
        translation,
        query,
        by_frame=by_frame,
        radius=radius,
        strategy=strategy,
        min_overlap_seconds=settings.timing.min_overlap_seconds,
        threshold=settings.timing.target_language_ratio,
    )


def main() -> None:
    """
    Main function to handle the command line interface logic.
    """
    load_dotenv()
    args: argparse.Namespace = _build_parser().parse_args()
    try:
        configure_logging(args.log_level)
    except ValueError as err:
        logger.error(msg=f"Invalid log level: {err}")
        sys.exit(1)

    try:
        settings: AppConfig = reload_settings()
    except ValueError as err:
        logger.error(msg=f"Invalid configuration: {err}")
        sys.exit(1)

    if not args.lyrics:
        logger.error(msg="No lyric file provided.")
        sys.exit(1)

    fps: int = args.fps if args.fps is not None else settings.timing.fps
    radius: int = (
        args.radius if args.radius is not None else settings.timing.window_radius
    )
    if fps <= 0 or radius < 0:
        logger.error("--fps must be positive and --radius must not be negative.")
        sys.exit(1)
    strategy = CorrelationStrategy(
        args.strategy or settings.timing.correlation_strategy
    )

    start_time: float = time.time()
    primary: Timeline = _load_track(args.lyrics, fps)
    translation: Timeline | None = (
        _load_track(args.translation, fps) if args.translation else None
    )
    if not len(primary):
        logger.warning("No lyric lines found in %s", args.lyrics)

    state: DisplayState | None = _resolve_query(
        args, primary, translation, radius, strategy, settings
    )
    print_timeline(primary, state.active_index if state is not None else -1)
    if state is not None:
        print_display_state(state)

    if args.plan_output or args.props_output:
        audio_duration: float | None = _read_audio_duration(args.audio, settings)
        frames: int = render_duration_in_frames(primary, fps, audio_duration)

        if args.plan_output:
            plan = build_render_plan(
                primary,
                translation,
                frames,
                strategy=strategy,
                min_overlap_seconds=settings.timing.min_overlap_seconds,
                threshold=settings.timing.target_language_ratio,
            )
            plan_path = Path(args.plan_output)
            output_folder: Path = (
                plan_path.parent if plan_path.parent != Path(".") else settings.output_folder
            )
            csv_file_name: str = save_render_plan_to_csv(
                plan, primary, translation, plan_path.name, output_folder
            )
            logger.info(msg=f"Render plan saved to {csv_file_name}")

        if args.props_output:
            if args.cover and not is_valid_image_file(args.cover):
                logger.error("Unsupported cover image: %s", args.cover)
                sys.exit(1)
            props = build_render_props(
                audio_url=str(Path(args.audio).resolve()) if args.audio else "",
                cover_art_url=str(Path(args.cover).resolve()) if args.cover else "",
                primary=primary,
                translation=translation,
                video=settings.video,
                palette=_load_palette(args.palette),
                audio_duration=audio_duration,
            )
            write_render_props(props, args.props_output)

    logger.info(
        msg=f"Finished in {display_elapsed_time(time.time() - start_time, 'short')}"
    )


if __name__ == "__main__":
    main()
