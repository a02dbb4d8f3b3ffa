"""Infrastructure: locate and stage the yt-dlp executable.

The program expects ``yt-dlp`` (``yt-dlp.exe`` on Windows) to live in
the current working directory.  A frozen build (PyInstaller) ships the
executable inside its bundle and copies it out on first run.

Rules
-----
* The resolved path is passed explicitly to every spawn call; the
  process-wide ``PATH`` is never modified.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import importlib.util
import logging
import shutil
import sys
from pathlib import Path

from tubefetch.exceptions import ToolStagingError
from tubefetch.utils import executable_name

logger = logging.getLogger(__name__)

TOOL_STEM: str = "yt-dlp"


def tool_name() -> str:
    """Return the platform-specific executable file name."""
    return executable_name(TOOL_STEM)


def is_frozen() -> bool:
    """Return ``True`` when running from a PyInstaller-style bundle."""
    return bool(getattr(sys, "frozen", False))


def bundle_dir() -> Path:
    """Return the directory holding bundled assets of a frozen build."""
    meipass = getattr(sys, "_MEIPASS", None)
    if meipass is not None:
        return Path(meipass)
    return Path(sys.executable).resolve().parent


def _ytdlp_module_available() -> bool:
    return importlib.util.find_spec("yt_dlp") is not None


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def resolve_tool_path(cwd: Path | None = None) -> Path:
    """Return the path of yt-dlp inside the working directory.

    In a frozen build the bundled executable is copied there first
    unless a copy already exists.

    Raises
    ------
    ToolStagingError
        If the bundled executable is missing or cannot be copied.
    """
    base = Path.cwd() if cwd is None else cwd
    target = base / tool_name()

    if is_frozen():
        _stage(bundle_dir() / tool_name(), target)

    return target


def _stage(source: Path, target: Path) -> None:
    """Copy *source* to *target* unless *target* already exists."""
    if target.exists():
        logger.debug("yt-dlp already staged at %s", target)
        return

    logger.info("Staging bundled yt-dlp: %s -> %s", source, target)
    try:
        shutil.copy2(source, target)
    except OSError as exc:
        raise ToolStagingError(
            f"Could not copy the bundled yt-dlp to {target}: {exc}",
            hint="Check that the working directory is writable.",
        ) from exc


def tool_argv(path: Path) -> list[str]:
    """Return the argv prefix that launches yt-dlp.

    Preference order: *path* when it exists, ``yt-dlp`` on ``PATH``,
    then ``python -m yt_dlp`` when the package is importable.

    Raises
    ------
    ToolStagingError
        If none of the above is available.
    """
    if path.is_file():
        return [str(path)]

    on_path = shutil.which(TOOL_STEM)
    if on_path is not None:
        logger.debug("yt-dlp not found at %s; using %s", path, on_path)
        return [on_path]

    if not is_frozen() and _ytdlp_module_available():
        logger.debug("yt-dlp not found at %s; using the yt_dlp module", path)
        return [sys.executable, "-m", "yt_dlp"]

    raise ToolStagingError(
        f"yt-dlp was not found at {path} or on PATH.",
        hint=(
            f"Place {tool_name()} next to the program, or install it with:\n"
            "    pip install yt-dlp"
        ),
    )


def _explicit_tool(override: str) -> list[str]:
    explicit = Path(override).expanduser()
    if not explicit.is_file():
        raise ToolStagingError(
            f"yt-dlp executable not found: {explicit}",
            hint="Check the --tool option or the TUBEFETCH_TOOL variable.",
        )
    return [str(explicit)]


def locate_tool(override: str | None = None, cwd: Path | None = None) -> list[str]:
    """Resolve the yt-dlp argv prefix, honouring an explicit *override* path."""
    if override:
        return _explicit_tool(override)

    return tool_argv(resolve_tool_path(cwd))


def find_tool(override: str | None = None, cwd: Path | None = None) -> list[str]:
    """Like :func:`locate_tool`, but never copies anything.

    In a frozen build that has not staged yet, the bundled executable
    itself is reported.
    """
    if override:
        return _explicit_tool(override)

    base = Path.cwd() if cwd is None else cwd
    target = base / tool_name()
    if is_frozen() and not target.exists():
        bundled = bundle_dir() / tool_name()
        if bundled.is_file():
            return [str(bundled)]
    return tool_argv(target)
