"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``--help``, ``--version``, error reporting) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any


def get_rich_console() -> Any | None:
	"""Create a Rich console instance targeting stderr.

	Returns ``None`` when Rich is not installed.
	"""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console(stderr=True)


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is not installed."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		rich_console = get_rich_console()
		if rich_console is None:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
