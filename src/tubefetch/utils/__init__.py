"""Shared utilities — constants and cross-cutting helpers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from __future__ import annotations

import sys

IS_WINDOWS: bool = sys.platform.startswith("win")


def executable_name(stem: str) -> str:
    """Return *stem* with the platform executable suffix (``.exe`` on Windows)."""
    return f"{stem}.exe" if IS_WINDOWS else stem
