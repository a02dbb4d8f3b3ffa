"""Pure mapping from prompt answers to yt-dlp format selection.

No I/O, no side effects; every function is a lookup or a string
normalization and is trivially unit-testable.
"""

from __future__ import annotations

from tubefetch.core.models import MP3, MP4, FormatSpec

BEST_AVAILABLE: FormatSpec = FormatSpec(selector="best", label="")
"""Fallback used for any quality keyword outside :data:`QUALITY_HEIGHTS`."""

QUALITY_HEIGHTS: dict[str, int] = {
    "1080p": 1080,
    "720p": 720,
    "480p": 480,
    "360p": 360,
}


def normalize_media_format(text: str) -> str:
    """Return ``"mp3"`` when *text* says so (any case), else ``"mp4"``."""
    return MP3 if text.strip().lower() == MP3 else MP4


def select_format_spec(quality: str) -> FormatSpec:
    """Map a quality keyword such as ``"720p"`` to a :class:`FormatSpec`.

    The selector caps the video height and lets yt-dlp merge the best
    audio stream, falling back to the best single file.  Unknown or
    empty keywords yield :data:`BEST_AVAILABLE`.
    """
    label = quality.strip().lower()
    height = QUALITY_HEIGHTS.get(label)
    if height is None:
        return BEST_AVAILABLE
    return FormatSpec(
        selector=f"bestvideo[height<={height}]+bestaudio/best",
        label=label,
    )
