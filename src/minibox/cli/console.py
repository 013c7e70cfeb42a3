"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
commands and their diagnostics keep working when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from minibox.exceptions import DependencyError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``DependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise DependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal stderr printer with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except DependencyError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def error(self, prefix: str | None, message: str, hint: str | None = None) -> None:
        """Print ``<prefix>: <message>`` and an optional hint line.

        With no *prefix* the message is printed alone.  *message* and
        *hint* are treated as literal text, never as markup, and are never
        wrapped so that a quoted argument stays on one line.
        """
        try:
            rich_console = get_rich_console()
        except DependencyError:
            print(message if prefix is None else f"{prefix}: {message}", file=sys.stderr)
            if hint:
                print(hint, file=sys.stderr)
            return

        from rich.markup import escape

        text = escape(message)
        if prefix is not None:
            text = f"[bold red]{escape(prefix)}:[/bold red] {text}"
        rich_console.print(text, soft_wrap=True)
        if hint:
            rich_console.print(f"[yellow]{escape(hint)}[/yellow]", soft_wrap=True)


console = _ConsoleProxy()
