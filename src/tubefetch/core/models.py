"""Domain models for tubefetch.

All models are **frozen** dataclasses: immutable value objects scoped
to a single run.  They carry no I/O and no dependencies on external
packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

MP3: str = "mp3"
MP4: str = "mp4"


# ---------------------------------------------------------------------------
# Prompt answers
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SessionInput:
    """Answers collected from the interactive prompts."""

    url: str
    """Normalized video URL."""

    media_format: str
    """Either :data:`MP3` or :data:`MP4`."""

    quality: str
    """Quality keyword as typed (``"720p"``), empty for mp3 or "best"."""

    folder: Path
    """Absolute output folder."""


# ---------------------------------------------------------------------------
# Format selection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FormatSpec:
    """A yt-dlp format selector paired with its filename label."""

    selector: str
    """Expression passed to ``-f`` (e.g. ``bestvideo[height<=720]+bestaudio/best``)."""

    label: str
    """Short label appended to the filename, empty for "best available"."""


# ---------------------------------------------------------------------------
# Download plan
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DownloadPlan:
    """Everything needed to run one download, computed before execution."""

    url: str
    media_format: str
    format_spec: FormatSpec
    title: str
    output_path: Path

    @property
    def folder(self) -> Path:
        return self.output_path.parent

    @property
    def filename(self) -> str:
        return self.output_path.name
