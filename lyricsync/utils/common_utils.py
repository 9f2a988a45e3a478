"""Time and frame conversion helpers."""

import math


def seconds_to_frames(seconds: float, fps: int) -> int:
    """Converts seconds to the nearest frame number, rounding halves up."""
    return math.floor(seconds * fps + 0.5)


def frames_to_seconds(frames: int, fps: int) -> float:
    """Converts a frame number to seconds."""
    return frames / fps


def duration_in_frames(duration_seconds: float, fps: int) -> int:
    """Returns how many frames are needed to cover the whole duration."""
    return math.ceil(duration_seconds * fps)


def format_time(seconds: float) -> str:
    """Formats seconds as ``m:ss`` for playback displays."""
    minutes = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{minutes}:{secs:02d}"


def frames_to_timecode(frames: int, fps: int) -> str:
    """Formats a frame count as an ``HH:MM:SS:FF`` timecode."""
    total_seconds, remaining_frames = divmod(frames, fps)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}:{remaining_frames:02d}"


def display_elapsed_time(elapsed_time: float, _format: str = "long") -> str:
    """
    Returns the elapsed time in seconds in long or short format.

    Arguments:
        elapsed_time (float): Elapsed time in seconds.
        _format (str, optional): Format of the elapsed time
            ('long' or 'short'), by default 'long'.

    Returns:
        str: Formatted elapsed time.
    """
    minutes, seconds = divmod(int(elapsed_time), 60)
    if _format == "long":
        return (
            f"{minutes} min {seconds} seconds"
            if minutes
            else f"{elapsed_time:.2f} seconds"
        )
    return f"{minutes}m{seconds}s" if minutes else f"{elapsed_time:.2f}s"
