"""Exit-code constants used by the CLI layer.

Every exit path returns one of these values rather than a bare integer.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The download (or diagnostic) finished normally."""

GENERAL_ERROR: int = 1
"""A known TubefetchError was caught and its message displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped every known error boundary."""

DOWNLOAD_FAILED: int = 3
"""yt-dlp itself exited with a non-zero status."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C (128 + SIGINT)."""
