import contextlib
import io
import logging
import sys
from pathlib import Path
from typing import Sequence

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import lyricsync.__main__ as lyricsync_main
import lyricsync.config as config


PRIMARY_SRT = """1
00:00:00,500 --> 00:00:01,000
안녕

2
00:00:02,000 --> 00:00:03,000
세상
"""

TRANSLATION_SRT = """1
00:00:00,500 --> 00:00:01,000
Hello

2
00:00:02,000 --> 00:00:02,500
World
"""


@pytest.fixture
def primary_srt() -> str:
    return PRIMARY_SRT


@pytest.fixture
def translation_srt() -> str:
    return TRANSLATION_SRT


@pytest.fixture
def write_srt(tmp_path: Path):
    """Write SRT text to a file under tmp_path and return its path."""

    def _write_srt(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write_srt


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Keeps global settings independent of the developer environment."""
    for name in list(config.os.environ):
        if name.startswith("LYRICSYNC_"):
            monkeypatch.delenv(name, raising=False)
    config.reload_settings()
    yield
    config._SETTINGS = None


@pytest.fixture
def run_cli(monkeypatch):
    """Run the lyricsync CLI with a custom argv list."""

    def _run_cli(args: Sequence[str]) -> tuple[int, str]:
        argv = ["lyricsync", *args]
        monkeypatch.setattr(sys, "argv", argv)
        monkeypatch.setattr(lyricsync_main, "load_dotenv", lambda: None)
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stdout):
            try:
                lyricsync_main.main()
            except SystemExit as exc:
                return exc.code, stdout.getvalue()
        return 0, stdout.getvalue()

    return _run_cli


@pytest.fixture(autouse=True)
def _silence_halo(monkeypatch):
    """Replace Halo spinners with a no-op context manager for tests."""

    class _DummyHalo:
        def __init__(self, *args, **kwargs):
            self.text = kwargs.get("text")

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("lyricsync.utils.timeline_utils.Halo", _DummyHalo)


@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog
