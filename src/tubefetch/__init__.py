"""tubefetch — guided single-video downloader.

Prompts for a URL, a format and a quality, then drives the external
``yt-dlp`` executable and tidies up the output folder.
"""

from tubefetch.version import __version__

__all__: list[str] = ["__version__"]
