"""Help and version banners for individual commands.

Banners go to standard output through the command's ``IO`` so that a
closed stdout surfaces as a :class:`~minibox.exceptions.WriteError`
like any other output failure.
"""

from __future__ import annotations

from minibox.core.command import Command
from minibox.core.protocols import IO
from minibox.version import __version__

SUITE_NAME: str = "minibox"


def version_text(command: Command) -> str:
    """Return e.g. ``cat (minibox) 0.1.0`` followed by a newline."""
    return f"{command.name} ({SUITE_NAME}) {__version__}\n"


def print_help(io: IO, command: Command, exe_path: str, *, full: bool) -> None:
    io.stdout_write_all(command.render_help(exe_path, full=full).encode("utf-8"))


def print_version(io: IO, command: Command) -> None:
    io.stdout_write_all(version_text(command).encode("utf-8"))
