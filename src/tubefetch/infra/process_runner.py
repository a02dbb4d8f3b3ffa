"""Child-process execution with live stdout/stderr relay.

:class:`ToolProcess` owns a single :class:`subprocess.Popen` handle and
two reader threads, one per output stream.  :meth:`ToolProcess.wait`
is the single completion point: it returns only after the child has
exited **and** both streams have been drained.

The process is spawned from an argument vector; no shell is involved.
"""

from __future__ import annotations

import logging
import subprocess
import threading
from collections.abc import Sequence
from typing import IO

from tubefetch.core.protocols import LineSink
from tubefetch.exceptions import ToolStagingError

logger = logging.getLogger(__name__)


def _pump(stream: IO[str], sink: LineSink) -> None:
    """Forward each line of *stream* to *sink* until EOF."""
    with stream:
        for line in stream:
            sink(line.rstrip("\r\n"))


class ToolProcess:
    """A running child process whose output is relayed line by line.

    Usage::

        with ToolProcess(argv, on_stdout=print, on_stderr=print) as proc:
            code = proc.wait()
    """

    def __init__(
        self,
        argv: Sequence[str],
        *,
        on_stdout: LineSink,
        on_stderr: LineSink,
    ) -> None:
        self._argv: list[str] = list(argv)
        self._on_stdout = on_stdout
        self._on_stderr = on_stderr
        self._proc: subprocess.Popen[str] | None = None
        self._readers: list[threading.Thread] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Spawn the child and begin relaying its output.

        Raises
        ------
        ToolStagingError
            If the executable cannot be started.
        """
        if self._proc is not None:
            return

        logger.debug("Spawning: %s", self._argv)
        try:
            self._proc = subprocess.Popen(
                self._argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except OSError as exc:
            raise ToolStagingError(
                f"Could not start yt-dlp: {exc}",
                hint="Check that yt-dlp is present and executable.",
            ) from exc

        assert self._proc.stdout is not None
        assert self._proc.stderr is not None
        self._readers = [
            threading.Thread(
                target=_pump,
                args=(self._proc.stdout, self._on_stdout),
                name="tubefetch-stdout",
                daemon=True,
            ),
            threading.Thread(
                target=_pump,
                args=(self._proc.stderr, self._on_stderr),
                name="tubefetch-stderr",
                daemon=True,
            ),
        ]
        for reader in self._readers:
            reader.start()

    def wait(self) -> int:
        """Block until the child exits and all output is relayed."""
        if self._proc is None:
            raise RuntimeError("ToolProcess.wait() called before start()")

        exit_code = self._proc.wait()
        for reader in self._readers:
            reader.join()
        logger.debug("Process %d exited with %d", self._proc.pid, exit_code)
        return exit_code

    @property
    def returncode(self) -> int | None:
        return None if self._proc is None else self._proc.returncode

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> ToolProcess:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        # Only reached early on an exception such as KeyboardInterrupt.
        if self._proc is not None and self._proc.poll() is None:
            logger.debug("Terminating process %d", self._proc.pid)
            self._proc.kill()
            self._proc.wait()


class SubprocessRunner:
    """Concrete :class:`~tubefetch.core.protocols.ProcessRunner`."""

    def run(
        self,
        argv: Sequence[str],
        *,
        on_stdout: LineSink,
        on_stderr: LineSink,
    ) -> int:
        """Run *argv* to completion, relaying output, and return its exit code."""
        with ToolProcess(argv, on_stdout=on_stdout, on_stderr=on_stderr) as proc:
            return proc.wait()
