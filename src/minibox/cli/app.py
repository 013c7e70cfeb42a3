"""CLI application entry point and command routing for minibox.

This module is the **sole error boundary** for the entire application.
It catches :class:`~minibox.exceptions.MiniboxError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No command logic lives here — each command parses its own arguments
  and runs against the ``IO``/``System`` collaborators passed in.
* This module is the only place that translates between the domain world
  and the OS process exit code.
* Multi-call: started as ``cat`` (for example through a symlink), the
  matching command runs directly with every argument.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from minibox.cli import banner, exit_codes
from minibox.cli.console import console
from minibox.cli.logging_setup import configure_logging
from minibox.cli.registry import COMMANDS, get_command
from minibox.core.arguments import ArgIterator
from minibox.core.command import Command
from minibox.core.protocols import IO, System
from minibox.exceptions import (
    HelpRequested,
    MiniboxError,
    UsageError,
    VersionRequested,
    WriteError,
)
from minibox.version import __version__

logger = logging.getLogger(__name__)

PROG: str = banner.SUITE_NAME


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Only used when the first argument is not a command name:
    * ``minibox``            — list commands
    * ``minibox --help``
    * ``minibox --version``
    """
    listing = "\n".join(f"  {name}" for name in COMMANDS)
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=f"{PROG} COMMAND [ARG]...",
        description="A small multi-command utility suite.",
        epilog=f"available commands:\n{listing}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="Command to run.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------

def run_command(
    command: Command,
    args: Sequence[str],
    *,
    exe_path: str,
    io: IO,
    system: System,
) -> int:
    """Run *command* once and return its exit code.

    Help and version requests are rendered here.  ``UsageError`` and
    ``WriteError`` propagate to :func:`cli`.
    """
    logger.debug("running %s with %d argument(s)", command.name, len(args))
    try:
        command.execute(io, ArgIterator(args), system, exe_path)
    except HelpRequested as request:
        banner.print_help(io, command, exe_path, full=request.full)
    except VersionRequested:
        banner.print_version(io, command)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    io: IO | None = None,
    system: System | None = None,
    multicall: bool = False,
) -> int:
    """Run the minibox CLI.

    Parameters
    ----------
    argv:
        Explicit argument list, command name first.  When ``None``
        (default), ``sys.argv[1:]`` is used.
    io, system:
        Collaborators handed to the command.  Default to the real
        standard streams and filesystem.
    multicall:
        ``True`` when the process was started under a command's own
        name; banners then show ``cat`` rather than ``minibox cat``.

    Returns
    -------
    int
        OS process exit code.
    """
    arguments = list(sys.argv[1:] if argv is None else argv)

    if arguments:
        command = get_command(arguments[0])
        if command is not None:
            from minibox.infra import OsSystem, StdIO

            exe_path = command.name if multicall else f"{PROG} {command.name}"
            return run_command(
                command,
                arguments[1:],
                exe_path=exe_path,
                io=io if io is not None else StdIO(),
                system=system if system is not None else OsSystem(),
            )

    parser = _build_parser()
    args, extras = parser.parse_known_args(arguments)

    if args.command is not None:
        raise UsageError(
            f"unknown command: '{args.command}'",
            hint=f"Run '{PROG} --help' to list the available commands.",
        )
    if extras:
        raise UsageError(
            f"unrecognized option: '{extras[0]}'",
            hint=f"Try '{PROG} --help' for more information.",
        )

    parser.print_help()
    return exit_codes.SUCCESS


def _split_invocation(argv: Sequence[str]) -> tuple[list[str], bool]:
    """Return ``(arguments, multicall)`` for a raw ``sys.argv``."""
    invoked_as = Path(argv[0]).name if argv else PROG
    if invoked_as in COMMANDS:
        return [invoked_as, *argv[1:]], True
    return list(argv[1:]), False


def _discard_stdout() -> None:
    """Point stdout at the null device so interpreter shutdown cannot fail."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        logger.debug("stdout could not be redirected to %s", os.devnull)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.  Messages are
    prefixed with the name the process was started under; usage errors
    already name their command, so under multi-call they carry no
    extra prefix.
    """
    configure_logging(os.environ)
    arguments, multicall = _split_invocation(sys.argv)
    prefix = arguments[0] if multicall else PROG
    try:
        code = main(arguments, multicall=multicall)
        sys.exit(code)
    except UsageError as exc:
        console.error(None if multicall else PROG, str(exc), exc.hint)
        sys.exit(exit_codes.USAGE_ERROR)
    except WriteError as exc:
        console.error(prefix, str(exc), exc.hint)
        _discard_stdout()
        sys.exit(exit_codes.GENERAL_ERROR)
    except MiniboxError as exc:
        console.error(prefix, str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\nAborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            prefix,
            f"unexpected error, please report this issue: "
            f"{type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
