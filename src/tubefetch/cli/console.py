"""CLI console helpers with optional Rich support.

Module-level imports of Rich are avoided so that bootstrap paths
(``--help``, ``--version``) keep working when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from tubefetch.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def escape_markup(text: str) -> str:
	"""Escape Rich markup in user data such as titles and paths."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


# ---------------------------------------------------------------------------
# Child-process output relay
# ---------------------------------------------------------------------------

def relay_stdout(line: str) -> None:
	"""Write one line of downloader stdout verbatim and flush."""
	sys.stdout.write(line + "\n")
	sys.stdout.flush()


def relay_stderr(line: str) -> None:
	"""Write one line of downloader stderr verbatim and flush."""
	sys.stderr.write(line + "\n")
	sys.stderr.flush()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def configure_logging(verbosity: int) -> None:
	"""Attach a handler to the ``tubefetch`` logger.

	``0`` shows warnings only, ``1`` adds info, ``2`` or more adds debug.
	"""
	level = logging.WARNING
	if verbosity >= 2:
		level = logging.DEBUG
	elif verbosity == 1:
		level = logging.INFO

	handler: logging.Handler
	try:
		from rich.logging import RichHandler

		handler = RichHandler(
			console=get_rich_console(),
			show_path=False,
			markup=False,
		)
	except (ModuleNotFoundError, EnvironmentError):
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

	logger = logging.getLogger("tubefetch")
	logger.handlers.clear()
	logger.addHandler(handler)
	logger.setLevel(level)
	logger.propagate = False
