"""Argument-vector construction for the yt-dlp executable.

Commands are built as ``list[str]`` and handed to the process layer
without a shell, so URLs and paths are passed verbatim and never need
quoting.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from tubefetch.core.models import MP3, FormatSpec

TITLE_TEMPLATE: str = "%(title)s"


def escape_output_template(path: Path) -> str:
    """Return *path* as a literal yt-dlp output template.

    yt-dlp expands ``%(field)s`` in ``-o``, so every ``%`` is doubled.
    """
    return str(path).replace("%", "%%")


def build_probe_command(tool: Sequence[str], url: str) -> list[str]:
    """Return the argv that prints only the video title, without downloading."""
    return [
        *tool, "--no-playlist", "--encoding", "utf-8", "--print", TITLE_TEMPLATE, url,
    ]


def build_download_command(
    tool: Sequence[str],
    media_format: str,
    url: str,
    format_spec: FormatSpec,
    output_path: Path,
    *,
    ffmpeg_location: Path | None = None,
) -> list[str]:
    """Return the download argv for *media_format*.

    Parameters
    ----------
    tool:
        Argv prefix that launches yt-dlp (see
        :func:`tubefetch.infra.tool_locator.tool_argv`).
    media_format:
        ``"mp3"`` extracts audio; anything else downloads video merged
        into an mp4 container using ``format_spec.selector``.
    output_path:
        Explicit output file path; passed to ``-o`` with ``%`` escaped.
    ffmpeg_location:
        ffmpeg binary placed next to the program, forwarded with
        ``--ffmpeg-location`` so that it does not need to be on ``PATH``.
    """
    argv: list[str] = list(tool)

    if media_format == MP3:
        argv += ["-x", "--audio-format", "mp3", "--audio-quality", "0"]
    else:
        argv += ["-f", format_spec.selector, "--merge-output-format", "mp4"]

    # One line per progress update when stdout is a pipe.
    argv += ["--no-playlist", "--newline"]

    if ffmpeg_location is not None:
        argv += ["--ffmpeg-location", str(ffmpeg_location)]

    argv += ["-o", escape_output_template(output_path), url]
    return argv
