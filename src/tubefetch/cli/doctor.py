"""``tubefetch doctor`` — environment diagnostics command.

Collects system information and renders a Rich table showing whether
the runtime environment can drive a download: a reachable yt-dlp
executable is required, ffmpeg is recommended.
"""

from __future__ import annotations

import platform
import sys

from tubefetch.cli import exit_codes
from tubefetch.cli.console import console, escape_markup
from tubefetch.exceptions import ToolStagingError
from tubefetch.infra.ffmpeg_detector import FfmpegStatus, detect_ffmpeg
from tubefetch.infra.tool_locator import find_tool
from tubefetch.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _tubefetch_version_check() -> Check:
    return "tubefetch", __version__, "[green]OK[/green]"


def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _ytdlp_check(tool_override: str | None = None) -> Check:
    """Return (label, value, status) for the yt-dlp executable row."""
    try:
        argv = find_tool(tool_override)
    except ToolStagingError:
        return "yt-dlp", "not found", "[red]FAIL[/red]"
    return "yt-dlp", " ".join(argv), "[green]OK[/green]"


def _ffmpeg_check(status: FfmpegStatus) -> Check:
    """Return (label, value, status) for the ffmpeg row."""
    if not status.found:
        return "ffmpeg", "not found", "[yellow]WARN[/yellow]"
    where = str(status.path) if status.path else "found"
    if status.colocated:
        where += " (next to program)"
    return "ffmpeg", where, "[green]OK[/green]"


def _os_check() -> Check:
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\ntubefetch doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_table(checks: list[Check], table_class: type) -> None:
    table = table_class(
        title="tubefetch doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, escape_markup(value), status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(tool_override: str | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when every critical check passes,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    ffmpeg_status = detect_ffmpeg()
    checks = [
        _tubefetch_version_check(),
        _python_version_check(),
        _ytdlp_check(tool_override),
        _ffmpeg_check(ffmpeg_status),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(checks)
    else:
        _print_rich_table(checks, Table)

    if not ffmpeg_status.found and ffmpeg_status.install_commands:
        console.print("ffmpeg is not installed; merging and mp3 extraction will fail.")
        console.print("Install it with one of:")
        for cmd in ffmpeg_status.install_commands:
            console.print(f"  {cmd}")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
