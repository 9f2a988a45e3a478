"""Cover-art colour palette passed through to the renderer."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from lyricsync.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    """Colours extracted from the cover image by an external collaborator."""

    dominant: str
    accents: tuple[str, ...]
    vibrant: str
    is_dark: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "dominant": self.dominant,
            "palette": list(self.accents),
            "vibrant": self.vibrant,
            "isDark": self.is_dark,
        }


DEFAULT_PALETTE = Palette(
    dominant="#1a1a1a",
    accents=("#fa2d48", "#fc3c5c", "#ff6b7a", "#4a4a4a"),
    vibrant="#fa2d48",
    is_dark=True,
)


def rgb_to_hex(rgb: RGB) -> str:
    red, green, blue = rgb
    return f"#{red:02x}{green:02x}{blue:02x}"


def color_saturation(rgb: RGB) -> float:
    """Returns HSV saturation in ``[0, 1]``."""
    highest = max(rgb)
    if highest == 0:
        return 0.0
    return (highest - min(rgb)) / highest


def is_color_dark(rgb: RGB) -> bool:
    red, green, blue = rgb
    return 0.299 * red + 0.587 * green + 0.114 * blue < 128


def palette_from_rgb(dominant: RGB, accents: Sequence[RGB]) -> Palette:
    """Builds a palette from raw RGB values.

    The most saturated accent becomes the vibrant colour; the first accent wins
    ties and the dominant colour is used when no accents are given.
    """
    vibrant = accents[0] if accents else dominant
    best_saturation = 0.0
    for rgb in accents:
        saturation = color_saturation(rgb)
        if saturation > best_saturation:
            best_saturation = saturation
            vibrant = rgb
    return Palette(
        dominant=rgb_to_hex(dominant),
        accents=tuple(rgb_to_hex(rgb) for rgb in accents),
        vibrant=rgb_to_hex(vibrant),
        is_dark=is_color_dark(dominant),
    )


def load_palette(path: str | Path) -> Palette:
    """Reads a palette JSON document with ``dominant``/``palette``/``vibrant``/``isDark``.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the document is not a valid palette.
    """
    palette_path = Path(path)
    with palette_path.open("r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as err:
            raise ValueError(f"Palette file {palette_path} is not valid JSON: {err}") from err
    if not isinstance(payload, dict):
        raise ValueError(f"Palette file {palette_path} must contain a JSON object.")

    dominant = payload.get("dominant")
    accents = payload.get("palette", [])
    vibrant = payload.get("vibrant")
    is_dark = payload.get("isDark")
    if not isinstance(dominant, str) or not isinstance(vibrant, str):
        raise ValueError(f"Palette file {palette_path} needs 'dominant' and 'vibrant' colours.")
    if not isinstance(accents, list) or not all(isinstance(item, str) for item in accents):
        raise ValueError(f"Palette file {palette_path} has an invalid 'palette' list.")
    if not isinstance(is_dark, bool):
        raise ValueError(f"Palette file {palette_path} needs a boolean 'isDark'.")

    logger.debug("Loaded palette from %s", palette_path)
    return Palette(
        dominant=dominant,
        accents=tuple(accents),
        vibrant=vibrant,
        is_dark=is_dark,
    )
