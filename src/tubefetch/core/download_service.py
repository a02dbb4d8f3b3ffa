"""Core download service — plans and drives one download.

The actual process execution is delegated to a
:class:`~tubefetch.core.protocols.ProcessRunner` injected at
construction time.  This service is responsible for:

* Computing the output path and the yt-dlp argv.
* Delegating execution to the runner.
* Translating a non-zero exit into :class:`DownloadProcessError`.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from tubefetch.core.commands import build_download_command
from tubefetch.core.filenames import build_output_filename
from tubefetch.core.format_select import BEST_AVAILABLE, select_format_spec
from tubefetch.core.models import MP3, DownloadPlan, SessionInput
from tubefetch.core.protocols import LineSink, ProcessRunner
from tubefetch.exceptions import DownloadProcessError, TubefetchError


class DownloadService:
    """Service that runs the download for a prepared :class:`DownloadPlan`.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`ProcessRunner` protocol.
    """

    def __init__(self, runner: ProcessRunner) -> None:
        self._runner: ProcessRunner = runner

    # ------------------------------------------------------------------
    # Planning (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def plan(session: SessionInput, title: str) -> DownloadPlan:
        """Compute the format selector and output path for *session*.

        Audio downloads ignore the quality answer.
        """
        if session.media_format == MP3:
            format_spec = BEST_AVAILABLE
        else:
            format_spec = select_format_spec(session.quality)

        filename = build_output_filename(
            title,
            format_spec.label,
            session.media_format,
        )
        return DownloadPlan(
            url=session.url,
            media_format=session.media_format,
            format_spec=format_spec,
            title=title,
            output_path=session.folder / filename,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def download(
        self,
        plan: DownloadPlan,
        tool: Sequence[str],
        *,
        on_stdout: LineSink,
        on_stderr: LineSink,
        ffmpeg_location: Path | None = None,
    ) -> int:
        """Run the download described by *plan* and return the exit code.

        Raises
        ------
        DownloadProcessError
            When the process exits non-zero or cannot be run.
        """
        argv = build_download_command(
            tool,
            plan.media_format,
            plan.url,
            plan.format_spec,
            plan.output_path,
            ffmpeg_location=ffmpeg_location,
        )
        try:
            exit_code = self._runner.run(
                argv,
                on_stdout=on_stdout,
                on_stderr=on_stderr,
            )
        except TubefetchError:
            raise
        except Exception as exc:
            raise DownloadProcessError(
                f"Unexpected download error: {exc}",
                exit_code=-1,
            ) from exc

        if exit_code != 0:
            raise DownloadProcessError(
                "An error occurred during the download.",
                exit_code=exit_code,
            )
        return exit_code
