"""Script-ratio heuristic deciding whether text is already in the target language."""

from __future__ import annotations

import unicodedata

DEFAULT_TARGET_RATIO = 0.8

# Hangul Syllables, Hangul Jamo, Hangul Compatibility Jamo
HANGUL_RANGES: tuple[tuple[int, int], ...] = (
    (0xAC00, 0xD7AF),
    (0x1100, 0x11FF),
    (0x3130, 0x318F),
)


def _is_ignored(char: str) -> bool:
    """Whitespace (including U+FEFF), ASCII digits, and Unicode punctuation are not analyzed."""
    return (
        char.isspace()
        or char == "\ufeff"
        or "0" <= char <= "9"
        or unicodedata.category(char).startswith("P")
    )


def _is_ascii_letter(code: int) -> bool:
    return 65 <= code <= 90 or 97 <= code <= 122


def _is_hangul(code: int) -> bool:
    return any(low <= code <= high for low, high in HANGUL_RANGES)


def contains_hangul(text: str | None) -> bool:
    """Returns whether the text contains any Korean character."""
    if not text:
        return False
    return any(_is_hangul(ord(char)) for char in text)


def is_target_language_text(
    text: str | None,
    threshold: float = DEFAULT_TARGET_RATIO,
) -> bool:
    """Returns whether text is primarily written in ASCII (English) letters.

    This is a script ratio, not a language detector. Mixed-script lines can be
    misclassified; the result only biases against redundant translations.
    Blank input is not target-language text, while text made only of digits
    and punctuation is.
    """
    if not text or not text.replace("\ufeff", "").strip():
        return False

    cleaned = [char for char in text if not _is_ignored(char)]
    if not cleaned:
        return True

    target_count = 0
    other_count = 0
    for char in cleaned:
        code = ord(char)
        if _is_ascii_letter(code):
            target_count += 1
        elif _is_hangul(code) or code > 127:
            other_count += 1

    counted = target_count + other_count
    if counted == 0:
        return True
    return target_count / counted > threshold
