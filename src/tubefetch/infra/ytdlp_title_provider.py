"""yt-dlp backed implementation of :class:`~tubefetch.core.protocols.TitleProvider`.

Runs the executable once in print-only mode and returns whatever title
it printed.  Every subprocess failure is re-raised as a typed
:class:`~tubefetch.exceptions.TubefetchError` subclass.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from tubefetch.core.commands import build_probe_command
from tubefetch.exceptions import MetadataError, ToolStagingError

logger = logging.getLogger(__name__)


class YtDlpTitleProvider:
    """Concrete :class:`TitleProvider` that shells out to yt-dlp.

    Usage::

        provider = YtDlpTitleProvider(["/path/to/yt-dlp"])
        raw_title = provider.fetch_title("https://www.youtube.com/watch?v=...")
    """

    def __init__(self, tool: Sequence[str]) -> None:
        self._tool: tuple[str, ...] = tuple(tool)

    def fetch_title(self, url: str) -> str:
        """Return the title yt-dlp prints for *url*.

        Blocks until the process exits; no timeout is applied.

        Raises
        ------
        ToolStagingError
            If the executable cannot be started.
        MetadataError
            If yt-dlp exits with a non-zero status.
        """
        argv = build_probe_command(self._tool, url)
        logger.debug("Probing title: %s", argv)

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise ToolStagingError(
                f"Could not start yt-dlp: {exc}",
                hint="Check that yt-dlp is present and executable.",
            ) from exc

        if completed.returncode != 0:
            logger.info(
                "Title probe exited with %d: %s",
                completed.returncode,
                completed.stderr.strip(),
            )
            raise MetadataError(
                "Failed to fetch the video title.",
                hint=_last_line(completed.stderr) or None,
            )

        return completed.stdout.strip()


def _last_line(text: str) -> str:
    """Return the last non-blank line of *text*, or ``""``."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    return lines[-1] if lines else ""
