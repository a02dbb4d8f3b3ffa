"""Shared pytest fixtures and configuration for the tubefetch test suite.

Guidelines
----------
* No internet access in any test.
* yt-dlp is never executed; subprocess calls are mocked at the infra
  boundary or replaced by short ``sys.executable -c`` children.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from tubefetch.core.models import MP3, MP4, SessionInput


@pytest.fixture
def session_mp4(tmp_path: Path) -> SessionInput:
    return SessionInput(
        url="https://www.youtube.com/watch?v=abc123",
        media_format=MP4,
        quality="720p",
        folder=tmp_path / "downloaded",
    )


@pytest.fixture
def session_mp3(tmp_path: Path) -> SessionInput:
    return SessionInput(
        url="https://www.youtube.com/watch?v=abc123",
        media_format=MP3,
        quality="",
        folder=tmp_path / "downloaded",
    )


@pytest.fixture(autouse=True)
def _reset_tubefetch_logger() -> Iterator[None]:
    """Undo :func:`configure_logging` so caplog sees every record."""
    yield
    logger = logging.getLogger("tubefetch")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
