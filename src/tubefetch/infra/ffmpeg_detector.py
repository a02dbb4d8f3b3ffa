"""Infrastructure: ffmpeg detection and platform guidance.

yt-dlp needs ffmpeg to merge video and audio streams and to extract
mp3 audio.  A binary placed next to the program takes precedence over
one on ``PATH`` and is forwarded to yt-dlp explicitly.

Rules
-----
* Detection via the filesystem and :func:`shutil.which` only, no
  subprocess.
* No ``PATH`` modification.
* No automatic installation.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from tubefetch.utils import executable_name


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FfmpegStatus:
    """Result of an ffmpeg detection probe.

    Attributes
    ----------
    found : bool
        Whether ffmpeg was located.
    path : Path | None
        Absolute path to the ffmpeg binary, or ``None``.
    colocated : bool
        ``True`` when the binary sits in the searched directory rather
        than on ``PATH``.
    install_commands : tuple[str, ...]
        Suggested install commands for the current platform.  Empty
        when ffmpeg is present.
    """

    found: bool
    path: Path | None
    colocated: bool
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_ffmpeg(search_dir: Path | None = None) -> FfmpegStatus:
    """Probe *search_dir* (default: cwd), then ``PATH``, for ffmpeg.

    Returns a :class:`FfmpegStatus` whether or not ffmpeg is present;
    the caller decides whether to warn.
    """
    base = Path.cwd() if search_dir is None else search_dir
    local = base / executable_name("ffmpeg")
    if local.is_file():
        return FfmpegStatus(
            found=True,
            path=local.resolve(),
            colocated=True,
            install_commands=(),
        )

    result = shutil.which("ffmpeg")
    if result is not None:
        return FfmpegStatus(
            found=True,
            path=Path(result).resolve(),
            colocated=False,
            install_commands=(),
        )

    return FfmpegStatus(
        found=False,
        path=None,
        colocated=False,
        install_commands=_platform_install_commands(),
    )


def colocated_ffmpeg(search_dir: Path | None = None) -> Path | None:
    """Return the ffmpeg path next to the program, if there is one."""
    status = detect_ffmpeg(search_dir)
    return status.path if status.colocated else None


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Gyan.FFmpeg",
            "choco install ffmpeg",
        )
    if system == "linux":
        return (
            "sudo apt install ffmpeg",
            "sudo dnf install ffmpeg",
            "sudo pacman -S ffmpeg",
        )
    if system == "darwin":
        return ("brew install ffmpeg",)
    return ("Please install ffmpeg from https://ffmpeg.org/download.html",)
