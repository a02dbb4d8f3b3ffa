"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

LineSink = Callable[[str], None]
"""Receives one line of child-process output, without the trailing newline."""


class TitleProvider(Protocol):
    """Contract for the metadata-probe backend.

    Any object implementing :meth:`fetch_title` satisfies this protocol
    structurally (no explicit inheritance required).
    """

    def fetch_title(self, url: str) -> str:
        """Return the raw (unsanitized) title printed for *url*.

        Implementations must map every backend failure, including a
        non-zero exit, to :class:`~tubefetch.exceptions.MetadataError`.
        """
        ...  # pragma: no cover


class ProcessRunner(Protocol):
    """Contract for running the download process with live output relay."""

    def run(
        self,
        argv: Sequence[str],
        *,
        on_stdout: LineSink,
        on_stderr: LineSink,
    ) -> int:
        """Run *argv* to completion and return its exit code.

        *on_stdout* and *on_stderr* are invoked once per line as output
        arrives.  Both streams are drained before this method returns.

        Raises
        ------
        DownloadProcessError
            When the process cannot be started at all.
        """
        ...  # pragma: no cover
