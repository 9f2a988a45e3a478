"""Process-wide logging setup for lyricsync."""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGING_CONFIGURED = False


def _parse_level(candidate: str | int) -> int:
    if isinstance(candidate, int):
        return candidate
    resolved = logging.getLevelName(candidate.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {candidate!r}")
    return resolved


def _resolve_level(level: str | int | None) -> int:
    """Resolves a level from an explicit value, then LOG_LEVEL, then INFO."""
    candidate: str | int | None = level
    if candidate is None:
        candidate = os.getenv("LOG_LEVEL", "").strip() or None
    if candidate is None:
        return logging.INFO
    return _parse_level(candidate)


def configure_logging(level: str | int | None = None) -> int:
    """Configures root logging and returns the applied level.

    Raises:
        ValueError: If the explicit level or LOG_LEVEL is not a known level.
    """
    global _LOGGING_CONFIGURED

    resolved_level = _resolve_level(level)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(format=LOG_FORMAT, level=resolved_level)
    else:
        root_logger.setLevel(resolved_level)
    for handler in root_logger.handlers:
        handler.setLevel(resolved_level)
    _LOGGING_CONFIGURED = True
    return resolved_level


def get_logger(name: str) -> logging.Logger:
    """Returns a named logger, configuring logging from the environment once.

    An unknown LOG_LEVEL falls back to INFO with a warning so that importing
    lyricsync never fails on a bad environment value.
    """
    if not _LOGGING_CONFIGURED:
        try:
            configure_logging()
        except ValueError as err:
            configure_logging(logging.INFO)
            logging.getLogger(__name__).warning("%s; using INFO", err)
    return logging.getLogger(name)
