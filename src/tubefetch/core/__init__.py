"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, subprocess or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from tubefetch.core.download_service import DownloadService
from tubefetch.core.metadata_service import MetadataService
from tubefetch.core.models import DownloadPlan, FormatSpec, SessionInput
from tubefetch.core.protocols import ProcessRunner, TitleProvider

__all__: list[str] = [
    "DownloadPlan",
    "DownloadService",
    "FormatSpec",
    "MetadataService",
    "ProcessRunner",
    "SessionInput",
    "TitleProvider",
]
