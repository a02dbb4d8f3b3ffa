"""URL normalization and validation.

Pure string transforms, no network access.  A recognized watch URL is
reduced to its canonical form so that playlist, timestamp and tracking
parameters never reach the downloader.
"""

from __future__ import annotations

from urllib.parse import parse_qs, urlencode, urlsplit

from tubefetch.exceptions import InvalidURLError

CANONICAL_WATCH_URL: str = "https://www.youtube.com/watch"

VIDEO_HOST_DOMAINS: tuple[str, ...] = (
    "youtube.com",
    "youtu.be",
    "youtube-nocookie.com",
)


def _is_video_host(hostname: str) -> bool:
    host = hostname.lower().rstrip(".")
    return any(
        host == domain or host.endswith(f".{domain}")
        for domain in VIDEO_HOST_DOMAINS
    )


def normalize_url(text: str) -> str:
    """Return the canonical watch URL for *text*, or *text* unchanged.

    Examples
    --------
    >>> normalize_url("https://www.youtube.com/watch?v=abc123&list=xyz")
    'https://www.youtube.com/watch?v=abc123'
    >>> normalize_url("not a url")
    'not a url'
    """
    try:
        parts = urlsplit(text.strip())
        hostname = parts.hostname
    except ValueError:
        return text

    if not parts.scheme or not hostname:
        return text
    if not _is_video_host(hostname):
        return text

    video_ids = parse_qs(parts.query).get("v")
    if not video_ids:
        return text

    return f"{CANONICAL_WATCH_URL}?{urlencode({'v': video_ids[0]})}"


def validate_url(url: str) -> str:
    """Return the stripped *url* or raise :class:`InvalidURLError`.

    Only the scheme prefix is checked; whether the page exists is left
    to the downloader.
    """
    stripped = url.strip()
    if not stripped:
        raise InvalidURLError("URL must not be empty.")
    if not stripped.lower().startswith("http"):
        raise InvalidURLError(
            f"Invalid URL: {stripped}",
            hint="URL must start with http:// or https://",
        )
    return stripped
