"""Command descriptor and the reporting helpers every command shares."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn

from minibox.core.arguments import ArgIterator
from minibox.core.protocols import IO, System
from minibox.exceptions import UsageError

NAME_PLACEHOLDER: str = "{NAME}"

Execute = Callable[[IO, ArgIterator, System, str], None]
"""``execute(io, args, system, exe_path)`` — run one invocation."""


@dataclass(frozen=True, slots=True)
class Command:
    """A single utility in the suite.

    Help texts may contain ``{NAME}``, replaced by the name the command
    was invoked under when the text is rendered.
    """

    name: str
    short_help: str
    extended_help: str
    execute: Execute
    enabled: bool = True

    def render_help(self, exe_path: str, *, full: bool) -> str:
        """Return the short help, followed by the extended help when *full*."""
        text = self.short_help
        if full and self.extended_help:
            text = f"{text}\n{self.extended_help}"
        return text.replace(NAME_PLACEHOLDER, exe_path)

    def print_error(self, io: IO, message: str) -> None:
        """Write ``<name>: <message>`` to standard error.

        Raises
        ------
        DiagnosticEmissionError
            When standard error is unwritable.  Callers recovering from a
            per-file error are expected to ignore it.
        """
        line = f"{self.name}: {message}\n"
        io.stderr_write_all(line.encode("utf-8", "surrogateescape"))

    def invalid_usage(self, exe_path: str, message: str) -> NoReturn:
        """Fail the invocation with a usage error pointing at ``--help``."""
        raise UsageError(
            f"{self.name}: {message}",
            hint=f"Try '{exe_path} --help' for more information.",
        )
