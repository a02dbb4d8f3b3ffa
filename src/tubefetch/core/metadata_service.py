"""Core metadata service — turns a probe result into a usable title.

Depends on a :class:`~tubefetch.core.protocols.TitleProvider` injected at
construction time, keeping the core free of any subprocess imports.

Guarantees
----------
* No I/O, no ``print()``, no filesystem access.
* Only :class:`~tubefetch.exceptions.TubefetchError` subclasses escape.
"""

from __future__ import annotations

from tubefetch.core.filenames import is_placeholder_title, sanitize_filename
from tubefetch.core.protocols import TitleProvider
from tubefetch.core.urls import validate_url
from tubefetch.exceptions import (
    MetadataError,
    TubefetchError,
    append_ytdlp_upgrade_suggestion,
)


class MetadataService:
    """Stateless service that probes and validates a video title.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`TitleProvider` protocol.
    """

    def __init__(self, provider: TitleProvider) -> None:
        self._provider: TitleProvider = provider

    def probe_title(self, url: str) -> str:
        """Return the sanitized title for *url*.

        Raises
        ------
        InvalidURLError
            If *url* is empty or does not start with ``http``.
        MetadataError
            If the probe fails, or the title is empty or a generic
            placeholder such as ``"Video"``.
        """
        url = validate_url(url)
        title = sanitize_filename(self._fetch(url))

        if is_placeholder_title(title):
            raise MetadataError(
                "Could not obtain a valid title for this video.",
                hint=append_ytdlp_upgrade_suggestion(
                    "The video may be private, removed, or region-restricted.",
                ),
            )
        return title

    def _fetch(self, url: str) -> str:
        """Call the provider and ensure only our exceptions escape."""
        try:
            return self._provider.fetch_title(url)
        except TubefetchError:
            raise
        except Exception as exc:
            raise MetadataError(
                f"Unexpected title probe error: {exc}",
            ) from exc
