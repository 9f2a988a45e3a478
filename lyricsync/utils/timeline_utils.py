"""
Timeline Utility Functions for lyricsync

This module provides functions to print lyric timelines and display states in
the terminal and to save render plans as CSV cue sheets.

Functions:
    - color_txt: Colorizes a string.
    - print_timeline: Prints the lyric timeline, highlighting the active line.
    - print_display_state: Prints the visible window around the active line.
    - save_render_plan_to_csv: Saves a render plan to a CSV file.
"""

import csv
import logging
from pathlib import Path

from colored import attr, bg, fg
from halo import Halo

from lyricsync.display import RenderPlan
from lyricsync.domain import DisplayState, Timeline
from lyricsync.utils.common_utils import format_time, frames_to_timecode
from lyricsync.utils.logger import get_logger


logger: logging.Logger = get_logger(__name__)


def color_txt(
    string: str, fg_color: str, bg_color: str, padding: int = 0
) -> str:
    """
    Colorizes a string.

    Arguments:
        string (str): String to be colorized.
        fg_color (str): Foreground color.
        bg_color (str): Background color.
        padding (int, optional): Width to left-justify the string to.

    Returns:
        str: Colorized string.
    """
    if padding:
        string = string.ljust(padding)

    return f"{fg(fg_color)}{bg(bg_color)}{string}{attr('reset')}"


def _one_line(text: str) -> str:
    return " / ".join(part.strip() for part in text.splitlines())


def print_timeline(timeline: Timeline, active_index: int = -1) -> None:
    """
    Prints the lyric timeline as a table.

    Arguments:
        timeline (Timeline): Parsed lyric timeline.
        active_index (int, optional): Position to highlight, by default none.
    """
    logger.info(msg=f"Printing timeline with {len(timeline)} entries.")
    if not len(timeline):
        print("(no lyric lines)")
        return

    time_width: int = max(
        len(f"{format_time(line.start)}-{format_time(line.end)}")
        for line in timeline
    )
    index_width: int = max(len(str(line.index)) for line in timeline)

    print(color_txt("#", "black", "green", index_width + 1), end="")
    print(color_txt("Time", "black", "yellow", time_width + 1), end="")
    print(color_txt("Lyric", "black", "blue"))

    for position, line in enumerate(timeline):
        index_str: str = str(line.index).ljust(index_width)
        time_str: str = (
            f"{format_time(line.start)}-{format_time(line.end)}".ljust(time_width)
        )
        text_str: str = _one_line(line.text)
        if position == active_index:
            text_str = color_txt(text_str, "white", "blue")
        print(f"{index_str} {time_str} {text_str}")


def print_display_state(state: DisplayState) -> None:
    """
    Prints the visible window of a display state, with the translation
    under the active line.

    Arguments:
        state (DisplayState): Resolved display state.
    """
    if state.active_line is None and not state.window:
        print("(nothing to display)")
        return

    for entry in state.window:
        marker: str = ">" if entry.offset == 0 else " "
        text: str = _one_line(entry.line.text)
        if entry.offset == 0:
            text = color_txt(text, "white", "blue")
        print(f"{marker} {entry.offset:+d} {text}")
        if entry.offset == 0 and state.translation is not None:
            print(f"      {color_txt(_one_line(state.translation.text), 'yellow', 'black')}")


def save_render_plan_to_csv(
    plan: RenderPlan,
    primary: Timeline,
    translation: Timeline | None,
    file_name: str,
    output_folder: Path,
) -> str:
    """
    Saves a render plan to a CSV cue sheet.

    Arguments:
        plan (RenderPlan): The render plan to be saved.
        primary (Timeline): Timeline the active positions refer to.
        translation (Timeline, optional): Timeline the translation positions
            refer to.
        file_name (str): Name of the CSV file, or of the source file whose
            stem is reused.
        output_folder (Path): Folder the CSV file is written to.

    Returns:
        str: The path to the saved CSV file.
    """
    logger.info(msg="Starting to save render plan to CSV.")
    output_folder.mkdir(parents=True, exist_ok=True)
    csv_path: Path = output_folder / f"{Path(file_name).stem}.csv"

    with Halo(
        text=f"Saving render plan to {csv_path}",
        spinner="dots",
        text_color="green",
    ):
        with open(csv_path, mode="w", newline="", encoding="utf-8") as file:
            writer = csv.writer(file)
            writer.writerow(
                [
                    "Start frame",
                    "End frame",
                    "Start timecode",
                    "Line",
                    "Lyric",
                    "Translation",
                ]
            )
            logger.debug("Header written to CSV file.")

            for cue in plan.cues:
                lyric: str = (
                    primary.lines[cue.active_index].text
                    if cue.active_index >= 0
                    else ""
                )
                translated: str = (
                    translation.lines[cue.translation_index].text
                    if translation is not None and cue.translation_index >= 0
                    else ""
                )
                row = [
                    cue.start_frame,
                    cue.end_frame,
                    frames_to_timecode(cue.start_frame, plan.fps),
                    cue.active_index,
                    lyric,
                    translated,
                ]
                writer.writerow(row)
                logger.debug(msg=f"Written row: {row}")

    logger.info(msg=f"Render plan successfully saved to {csv_path}")
    return str(csv_path)
