"""Filename sanitization and output-name construction.

Every function here is pure and deterministic.
"""

from __future__ import annotations

import re

INVALID_FILENAME_CHARS: str = '\\/:*?"<>|'

_INVALID_CHARS_RE = re.compile(r'[\\/:*?"<>|]')
_WHITESPACE_RE = re.compile(r"\s+")

# Titles yt-dlp falls back to when the real metadata is unavailable.
_PLACEHOLDER_TITLE_RE = re.compile(r"^(?:youtube\s+video\b.*|video)$", re.IGNORECASE)


def sanitize_filename(title: str) -> str:
    """Strip characters that Windows rejects and collapse whitespace."""
    cleaned = _INVALID_CHARS_RE.sub("", title)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def is_placeholder_title(title: str) -> bool:
    """Return ``True`` for empty or generic fallback titles."""
    stripped = title.strip()
    return not stripped or bool(_PLACEHOLDER_TITLE_RE.match(stripped))


def build_output_filename(title: str, label: str, ext: str) -> str:
    """Build ``<title>[ [<label>]].<ext>``.

    >>> build_output_filename("Clip", "720p", "mp4")
    'Clip [720p].mp4'
    >>> build_output_filename("Clip", "", "mp3")
    'Clip.mp3'
    """
    suffix = f" [{label}]" if label else ""
    return f"{title}{suffix}.{ext}"
