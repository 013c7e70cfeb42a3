"""``cat`` — concatenate files to standard output.

Two stages run per invocation:

1. :func:`parse_arguments` drains the :class:`ArgIterator` into a
   :class:`CatOptions`.  The first unrecognised option stops parsing and
   fails the invocation before any file is touched.
2. :func:`simplecat` copies each path, in order, to standard output in
   fixed-size chunks.

Failure policy
--------------
* Open and read failures are reported on standard error and the loop
  moves on to the next path.  They do not affect the exit status.
* A diagnostic that cannot be written is ignored.
* A failed write to standard output is fatal and propagates.
"""

from __future__ import annotations

import logging

from minibox.core.arguments import (
    Argument,
    ArgIterator,
    Longhand,
    LonghandWithValue,
    Shorthand,
)
from minibox.core.command import Command
from minibox.core.models import (
    NORMAL,
    CatOptions,
    InvalidArgument,
    InvalidOption,
    InvalidShortOption,
    Normal,
    ParseState,
)
from minibox.core.protocols import IO, File, System
from minibox.exceptions import DiagnosticEmissionError, OpenError, ReadError

logger = logging.getLogger(__name__)

CHUNK_SIZE: int = 1024
"""Bytes requested per read; also the size of the reusable buffer."""

SHORT_HELP: str = """\
Usage: {NAME} [OPTION]... [FILE]...
Concatenate FILE(s) to standard output.

Available options
  -n                       accepted for compatibility; output is unchanged
  -h, --help               display the help and exit
      --version            output version information and exit
"""

EXTENDED_HELP: str = """\
Example:
  cat FILE
"""


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def execute(io: IO, args: ArgIterator, system: System, exe_path: str) -> None:
    """Parse *args* and copy the named files to standard output.

    Raises
    ------
    HelpRequested, VersionRequested
        The first argument asked for a banner; nothing was copied.
    UsageError
        An argument was not recognised; nothing was copied.
    WriteError
        Standard output failed part-way through.
    """
    options = parse_arguments(args, exe_path)
    simplecat(io, system, options)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def parse_arguments(args: ArgIterator, exe_path: str) -> CatOptions:
    """Build :class:`CatOptions` from *args*, or raise :class:`UsageError`.

    Characters of a shorthand cluster that precede a bad character keep
    their effect; nothing after the bad argument is consumed.
    """
    options = CatOptions()
    state: ParseState = NORMAL

    arg = args.next_with_help_or_version(True)
    while arg is not None and isinstance(state, Normal):
        state = _apply_argument(arg, options)
        if isinstance(state, Normal):
            arg = args.next()

    if isinstance(state, InvalidArgument):
        bad = state.argument
        logger.debug("parsing stopped at %r", bad)
        if isinstance(bad, InvalidShortOption):
            command.invalid_usage(
                exe_path, f"unrecognized short option: '{bad.character}'",
            )
        command.invalid_usage(exe_path, f"unrecognized option: '{bad.text}'")

    logger.debug("parsed %r", options)
    return options


def _apply_argument(arg: Argument, options: CatOptions) -> ParseState:
    """Fold one argument into *options* and return the resulting state."""
    if isinstance(arg, Longhand):
        return InvalidArgument(InvalidOption(arg.raw))

    if isinstance(arg, LonghandWithValue):
        return InvalidArgument(InvalidOption(arg.longhand))

    if isinstance(arg, Shorthand):
        for char in arg:
            if char == "n":
                options.number_all = True
            else:
                return InvalidArgument(InvalidShortOption(char))
        return NORMAL

    options.paths.append(arg.raw)
    return NORMAL


# ---------------------------------------------------------------------------
# Copy loop
# ---------------------------------------------------------------------------

def simplecat(io: IO, system: System, options: CatOptions) -> None:
    """Copy every path in *options* to standard output, in order.

    Raises
    ------
    WriteError
        Standard output failed; remaining paths are not attempted.
    """
    view = memoryview(bytearray(CHUNK_SIZE))
    for path in options.paths:
        try:
            file = system.open_file(path)
        except OpenError as exc:
            _report(io, f"failed to open {path}: {exc.cause}")
            continue

        try:
            _copy_file(io, file, view)
        except ReadError as exc:
            _report(io, f"failed to read {path}: {exc.cause}")
        finally:
            file.close()


def _copy_file(io: IO, file: File, view: memoryview) -> None:
    """Forward *file* to standard output one chunk at a time."""
    while True:
        count = file.read_all(view)
        if count == 0:
            return
        io.stdout_write_all(view[:count])


def _report(io: IO, message: str) -> None:
    """Emit a per-file diagnostic; a failure to do so is not an error."""
    logger.debug("%s", message)
    try:
        command.print_error(io, message)
    except DiagnosticEmissionError:
        logger.debug("diagnostic dropped, standard error is unwritable")


command: Command = Command(
    name="cat",
    short_help=SHORT_HELP,
    extended_help=EXTENDED_HELP,
    execute=execute,
)
