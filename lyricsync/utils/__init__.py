from .logger import configure_logging, get_logger
from .common_utils import (
    display_elapsed_time,
    duration_in_frames,
    format_time,
    frames_to_seconds,
    frames_to_timecode,
    seconds_to_frames,
)
