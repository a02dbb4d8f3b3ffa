"""Infrastructure layer — external system integration.

This layer wraps all interaction with the yt-dlp executable, child
processes, ffmpeg and the filesystem.  Every raw ``OSError`` is caught
here and re-raised as a :class:`~tubefetch.exceptions.TubefetchError`
subclass, except during best-effort cleanup where it is logged.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from tubefetch.infra.ffmpeg_detector import FfmpegStatus, colocated_ffmpeg, detect_ffmpeg
from tubefetch.infra.output_folder import cleanup_fragments, ensure_folder, resolve_folder
from tubefetch.infra.process_runner import SubprocessRunner, ToolProcess
from tubefetch.infra.tool_locator import (
    find_tool,
    locate_tool,
    resolve_tool_path,
    tool_argv,
)
from tubefetch.infra.ytdlp_title_provider import YtDlpTitleProvider

__all__: list[str] = [
    "FfmpegStatus",
    "SubprocessRunner",
    "ToolProcess",
    "YtDlpTitleProvider",
    "cleanup_fragments",
    "colocated_ffmpeg",
    "detect_ffmpeg",
    "ensure_folder",
    "find_tool",
    "locate_tool",
    "resolve_folder",
    "resolve_tool_path",
    "tool_argv",
]
