"""Custom exception hierarchy for tubefetch.

Every error that crosses a layer boundary inherits from
:class:`TubefetchError`.  Raw ``OSError`` / ``subprocess`` failures must
never propagate beyond the infrastructure layer; they are caught there
and re-raised as a typed subclass defined here.

Hierarchy
---------
TubefetchError
├── InvalidURLError
├── ToolStagingError
├── MetadataError
├── DownloadProcessError
└── EnvironmentError
"""

from __future__ import annotations


class TubefetchError(Exception):
    """Base exception for all tubefetch errors.

    The CLI error boundary renders ``str(exc)`` and, when present,
    :attr:`hint`, never a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InvalidURLError(TubefetchError):
    """Raised when the entered URL does not start with ``http``."""


# --- External tool ---------------------------------------------------------

class ToolStagingError(TubefetchError):
    """Raised when the yt-dlp executable cannot be located or staged."""


class MetadataError(TubefetchError):
    """Raised when the title probe fails or yields an unusable title."""


class DownloadProcessError(TubefetchError):
    """Raised when the download process exits with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        exit_code: int,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.exit_code: int = exit_code


# --- Environment -----------------------------------------------------------

class EnvironmentError(TubefetchError):  # noqa: A001
    """Raised when an optional runtime library is not installed."""


def append_ytdlp_upgrade_suggestion(hint: str) -> str:
    """Append yt-dlp upgrade guidance to an existing hint text.

    The suggestion is appended only once.
    """
    marker = "Also try updating yt-dlp:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    yt-dlp -U",
        )
    )
