"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from discord_scaffold.exceptions import EnvironmentError


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
	return console_class(stderr=True, highlight=False, emoji=False)


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

	def plain(self, text: str) -> None:
		"""Print *text* verbatim to stderr.

		Nothing is parsed as markup or wrapped, and tabs reach the
		terminal as-is.
		"""
		print(text, file=sys.stderr, flush=True)


def escape_markup(text: str) -> str:
	"""Escape Rich markup in *text* so it prints literally.

	Returns *text* unchanged when Rich is unavailable, since the plain
	fallback never parses markup.
	"""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


console = _ConsoleProxy()


def configure_logging(*, verbose: bool = False) -> None:
	"""Route library loggers to stderr.

	``--verbose`` shows DEBUG records from the infra layer; otherwise only
	warnings and errors.  Rich's handler is used when available.
	"""
	level = logging.DEBUG if verbose else logging.WARNING
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		logging.basicConfig(
			level=level,
			format="%(levelname)s %(name)s: %(message)s",
			stream=sys.stderr,
			force=True,
		)
		return

	logging.basicConfig(
		level=level,
		format="%(message)s",
		datefmt="[%X]",
		handlers=[RichHandler(console=get_rich_console(), show_path=False)],
		force=True,
	)
