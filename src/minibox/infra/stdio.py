"""Standard-stream implementation of :class:`~minibox.core.protocols.IO`.

The binary streams are looked up on every call rather than captured at
construction, so replacing ``sys.stdout``/``sys.stderr`` (as pytest's
``capsys`` does) is honoured.
"""

from __future__ import annotations

import sys
from typing import BinaryIO

from minibox.exceptions import DiagnosticEmissionError, WriteError
from minibox.infra.os_system import describe_os_error


def _describe(exc: OSError | ValueError) -> str:
    """Return the cause of a failed write; ``ValueError`` means a closed stream."""
    if isinstance(exc, OSError):
        return describe_os_error(exc)
    return str(exc) or "stream is closed"


class StdIO:
    """Concrete :class:`IO` writing to the process's standard streams.

    Parameters
    ----------
    stdout, stderr:
        Explicit binary streams.  When ``None`` (default), the
        ``.buffer`` of the current ``sys.stdout``/``sys.stderr`` is used.
    """

    def __init__(
        self,
        stdout: BinaryIO | None = None,
        stderr: BinaryIO | None = None,
    ) -> None:
        self._stdout: BinaryIO | None = stdout
        self._stderr: BinaryIO | None = stderr

    def _stdout_stream(self) -> BinaryIO:
        return self._stdout if self._stdout is not None else sys.stdout.buffer

    def _stderr_stream(self) -> BinaryIO:
        return self._stderr if self._stderr is not None else sys.stderr.buffer

    def stdout_write_all(self, data: bytes | bytearray | memoryview) -> None:
        stream = self._stdout_stream()
        try:
            stream.write(data)
            stream.flush()
        except (OSError, ValueError) as exc:
            raise WriteError(
                f"write error: {_describe(exc)}",
            ) from exc

    def stderr_write_all(self, data: bytes | bytearray | memoryview) -> None:
        stream = self._stderr_stream()
        try:
            stream.write(data)
            stream.flush()
        except (OSError, ValueError) as exc:
            raise DiagnosticEmissionError(
                f"cannot write to standard error: {_describe(exc)}",
            ) from exc
