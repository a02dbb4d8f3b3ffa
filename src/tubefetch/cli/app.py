"""CLI application entry point and command routing for tubefetch.

This module is the **sole error boundary** for the entire application.
It catches :class:`~tubefetch.exceptions.TubefetchError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering a
short message and returning a well-defined exit code.

Architecture notes
------------------
* No business logic lives here; work is delegated to the core and
  infrastructure layers.
* The session is strictly linear: prompts, tool resolution, title
  probe, download, cleanup.  Any failure ends it.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from tubefetch.cli import exit_codes
from tubefetch.cli.console import configure_logging, console, escape_markup
from tubefetch.exceptions import DownloadProcessError, TubefetchError
from tubefetch.version import __version__

TOOL_ENV_VAR: str = "TUBEFETCH_TOOL"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``tubefetch``          — prompt for everything
    * ``tubefetch <url>``    — skip the URL prompt
    * ``tubefetch doctor``   — environment diagnostics
    """
    parser = argparse.ArgumentParser(
        prog="tubefetch",
        description="Guided single-video downloader built on yt-dlp.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-vv for debug).",
    )
    parser.add_argument(
        "--tool",
        default=os.environ.get(TOOL_ENV_VAR),
        metavar="PATH",
        help=f"Path to the yt-dlp executable (default: ${TOOL_ENV_VAR}, "
        "then ./yt-dlp).",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Video URL to download, or 'doctor' to run diagnostics.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_download(url: str | None, tool_override: str | None = None) -> int:
    """Run one interactive download session.

    Flow:
    1. Prompt for URL, format, quality and folder.
    2. Resolve (and if bundled, stage) yt-dlp.
    3. Probe the video title.
    4. Run the download with live output.
    5. Remove leftover fragment files.
    """
    from tubefetch.cli.console import relay_stderr, relay_stdout
    from tubefetch.cli.prompts import collect_session_input
    from tubefetch.core.download_service import DownloadService
    from tubefetch.core.metadata_service import MetadataService
    from tubefetch.core.models import MP3
    from tubefetch.infra.ffmpeg_detector import colocated_ffmpeg
    from tubefetch.infra.output_folder import cleanup_fragments, ensure_folder
    from tubefetch.infra.process_runner import SubprocessRunner
    from tubefetch.infra.tool_locator import locate_tool
    from tubefetch.infra.ytdlp_title_provider import YtDlpTitleProvider

    cwd = Path.cwd()
    session = collect_session_input(url, cwd=cwd)

    if ensure_folder(session.folder):
        console.print(f"[cyan]Created folder:[/cyan] {escape_markup(str(session.folder))}")

    tool = locate_tool(tool_override, cwd)

    console.print("\n[bold]Fetching title…[/bold]")
    metadata_service = MetadataService(YtDlpTitleProvider(tool))
    title = metadata_service.probe_title(session.url)

    plan = DownloadService.plan(session, title)
    if plan.media_format == MP3:
        console.print("[bold green]Downloading audio as mp3…[/bold green]\n")
    else:
        quality = plan.format_spec.label or "best quality"
        console.print(
            f"[bold green]Downloading video as mp4 ({quality})…[/bold green]\n"
        )

    download_service = DownloadService(SubprocessRunner())
    download_service.download(
        plan,
        tool,
        on_stdout=relay_stdout,
        on_stderr=relay_stderr,
        ffmpeg_location=colocated_ffmpeg(cwd),
    )

    console.print(
        f"\n[bold green]Download complete:[/bold green] {escape_markup(plan.filename)}"
    )

    removed = cleanup_fragments(plan.folder, plan.title)
    if removed:
        console.print(f"[dim]Removed {len(removed)} leftover fragment file(s).[/dim]")
    return exit_codes.SUCCESS


def _handle_doctor(tool_override: str | None = None) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from tubefetch.cli.doctor import run_doctor

    return run_doctor(tool_override)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the tubefetch CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    target: str | None = args.target

    if target is not None and target.lower() == "doctor":
        return _handle_doctor(args.tool)

    return _handle_download(target, args.tool)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DownloadProcessError:
        console.print("[bold red]An error occurred during the download.[/bold red]")
        sys.exit(exit_codes.DOWNLOAD_FAILED)
    except TubefetchError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
