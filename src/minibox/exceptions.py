"""Custom exception hierarchy for minibox.

All exceptions that cross layer boundaries must inherit from
:class:`MiniboxError`.  Raw ``OSError`` instances raised by the operating
system must NEVER propagate beyond the infrastructure layer — they must
be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
MiniboxError
├── UsageError
├── FileAccessError
│   ├── OpenError
│   └── ReadError
├── WriteError
├── DiagnosticEmissionError
└── DependencyError

CommandInterrupt  (control flow, not an error)
├── HelpRequested
└── VersionRequested
"""

from __future__ import annotations


class MiniboxError(Exception):
    """Base exception for all minibox errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument parsing ------------------------------------------------------

class UsageError(MiniboxError):
    """Raised when a command is invoked with arguments it does not accept."""


# --- Per-file input (recovered inside the copy loop) -----------------------

class FileAccessError(MiniboxError):
    """Base for errors tied to a single input path."""

    def __init__(self, path: str, cause: str) -> None:
        super().__init__(f"{path}: {cause}")
        self.path: str = path
        self.cause: str = cause


class OpenError(FileAccessError):
    """Raised when an input path cannot be opened for reading."""


class ReadError(FileAccessError):
    """Raised when reading from an already opened input fails."""


# --- Output ----------------------------------------------------------------

class WriteError(MiniboxError):
    """Raised when writing to standard output fails.  Always fatal."""


class DiagnosticEmissionError(MiniboxError):
    """Raised when a diagnostic line cannot be written to standard error."""


# --- Environment -----------------------------------------------------------

class DependencyError(MiniboxError):
    """Raised when an optional runtime dependency is not importable."""


# --- Control flow ----------------------------------------------------------

class CommandInterrupt(Exception):
    """Stops argument processing before the command body runs.

    Not an error: the dispatcher renders a banner and exits successfully.
    """


class HelpRequested(CommandInterrupt):
    """The first argument asked for help (``-h`` or ``--help``)."""

    def __init__(self, *, full: bool) -> None:
        super().__init__("--help" if full else "-h")
        self.full: bool = full
        """``True`` when the extended help should follow the short help."""


class VersionRequested(CommandInterrupt):
    """The first argument asked for the version banner (``--version``)."""

    def __init__(self) -> None:
        super().__init__("--version")
