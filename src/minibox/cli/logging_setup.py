"""Logging configuration for the ``minibox`` process.

Modules log through ``logging.getLogger(__name__)``; nothing is shown
unless the level is lowered with the ``MINIBOX_LOG_LEVEL`` environment
variable.  Records are rendered by Rich on stderr when it is installed.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping

from minibox.cli.console import get_rich_console
from minibox.exceptions import DependencyError

LOG_LEVEL_ENV: str = "MINIBOX_LOG_LEVEL"
DEFAULT_LEVEL: int = logging.WARNING


def resolve_level(value: str | None) -> int:
    """Map a level name such as ``"debug"`` to a ``logging`` constant.

    Unknown or empty values resolve to :data:`DEFAULT_LEVEL`.
    """
    if not value:
        return DEFAULT_LEVEL
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LEVEL


def _build_handler() -> logging.Handler:
    try:
        console = get_rich_console()
    except DependencyError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )
        return handler

    from rich.logging import RichHandler

    return RichHandler(console=console, show_path=False, show_time=False)


def configure_logging(environ: Mapping[str, str]) -> int:
    """Install a single stderr handler on the ``minibox`` logger.

    Returns
    -------
    int
        The effective level.
    """
    level = resolve_level(environ.get(LOG_LEVEL_ENV))
    logger = logging.getLogger("minibox")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(_build_handler())
    logger.setLevel(level)
    logger.propagate = False
    return level
