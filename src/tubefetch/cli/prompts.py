"""Interactive prompt sequence for the CLI layer.

Asks, in order: video URL, format, quality (mp4 only) and target
folder.  Answers are free text; normalization is delegated to the core
layer so the same rules apply however the answers are supplied.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from tubefetch.core.format_select import QUALITY_HEIGHTS, normalize_media_format
from tubefetch.core.models import MP4, SessionInput
from tubefetch.core.urls import normalize_url, validate_url
from tubefetch.exceptions import EnvironmentError
from tubefetch.infra.output_folder import DEFAULT_FOLDER_NAME, resolve_folder


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _ask_text(message: str, *, default: str = "") -> str:
    """Ask one free-text question.

    Ctrl+C propagates as ``KeyboardInterrupt`` so the CLI boundary can
    report the abort.
    """
    questionary = _import_questionary()
    answer: str | None = questionary.text(message, default=default).unsafe_ask()
    return answer or ""


def _quality_question() -> str:
    choices = "/".join(QUALITY_HEIGHTS)
    return f"Quality ({choices}), or Enter for the best available:"


def collect_session_input(
    url: str | None = None,
    *,
    cwd: Path | None = None,
) -> SessionInput:
    """Run the prompt sequence and return the normalized answers.

    Parameters
    ----------
    url:
        URL given on the command line.  When set, the URL prompt is
        skipped.
    cwd:
        Base directory for the default and relative output folders.

    Raises
    ------
    InvalidURLError
        Immediately after the URL answer, before any other prompt.
    """
    raw_url = url if url is not None else _ask_text("Video URL:")
    normalized = validate_url(normalize_url(raw_url))

    media_format = normalize_media_format(_ask_text("Format (mp4/mp3):", default=MP4))

    quality = ""
    if media_format == MP4:
        quality = _ask_text(_quality_question()).strip().lower()

    folder_answer = _ask_text(
        f'Folder to save into (leave empty for "./{DEFAULT_FOLDER_NAME}"):',
    )

    return SessionInput(
        url=normalized,
        media_format=media_format,
        quality=quality,
        folder=resolve_folder(folder_answer, cwd),
    )
