"""Infrastructure: output-folder preparation and fragment cleanup."""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_FOLDER_NAME: str = "downloaded"

# Per-stream intermediates yt-dlp leaves behind, e.g. "Title.f140.webm".
_FRAGMENT_RE = re.compile(r"\.f\d+\.(?:mp4|webm)$")


def resolve_folder(answer: str, cwd: Path | None = None) -> Path:
    """Return the output folder for a prompt *answer*.

    An empty answer selects ``<cwd>/downloaded``.
    """
    base = Path.cwd() if cwd is None else cwd
    stripped = answer.strip()
    if not stripped:
        return base / DEFAULT_FOLDER_NAME
    folder = Path(stripped).expanduser()
    return folder if folder.is_absolute() else base / folder


def ensure_folder(folder: Path) -> bool:
    """Create *folder* (and parents) if absent.

    Returns ``True`` when the folder was created by this call.
    """
    if folder.is_dir():
        return False
    folder.mkdir(parents=True, exist_ok=True)
    logger.info("Created output folder %s", folder)
    return True


def is_fragment(name: str, title: str) -> bool:
    """Return ``True`` when *name* is a leftover fragment for *title*."""
    if title not in name:
        return False
    return name.endswith(".webm") or bool(_FRAGMENT_RE.search(name))


def cleanup_fragments(folder: Path, title: str) -> list[Path]:
    """Delete leftover fragment files for *title* directly inside *folder*.

    Deletion failures are logged and skipped.  Returns the paths that
    were removed.
    """
    removed: list[Path] = []
    for entry in sorted(folder.iterdir()):
        if not entry.is_file() or not is_fragment(entry.name, title):
            continue
        try:
            entry.unlink()
        except OSError as exc:
            logger.warning("Could not remove fragment %s: %s", entry, exc)
            continue
        logger.debug("Removed fragment %s", entry)
        removed.append(entry)
    return removed
