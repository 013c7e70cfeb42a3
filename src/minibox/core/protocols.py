"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so every command can run against an in-memory
filesystem and captured output in tests.
"""

from __future__ import annotations

from typing import Protocol


class File(Protocol):
    """An input file opened read-only."""

    def read_all(self, buffer: bytearray | memoryview) -> int:
        """Fill *buffer* as far as possible and return the byte count.

        Fewer bytes than ``len(buffer)`` are returned only at end of file;
        ``0`` means the file is exhausted.

        Raises
        ------
        ReadError
            When the underlying read fails.
        """
        ...  # pragma: no cover

    def close(self) -> None:
        """Release the handle.  Must be safe to call after a read error."""
        ...  # pragma: no cover


class System(Protocol):
    """Filesystem access rooted at the current working directory."""

    def open_file(self, path: str) -> File:
        """Open *path* read-only.

        Raises
        ------
        OpenError
            When the path is missing, unreadable, or not a regular file.
        """
        ...  # pragma: no cover


class IO(Protocol):
    """The process's standard streams."""

    def stdout_write_all(self, data: bytes | bytearray | memoryview) -> None:
        """Write every byte of *data* to standard output.

        Raises
        ------
        WriteError
            When standard output rejects the write.  Always fatal.
        """
        ...  # pragma: no cover

    def stderr_write_all(self, data: bytes | bytearray | memoryview) -> None:
        """Write every byte of *data* to standard error.

        Raises
        ------
        DiagnosticEmissionError
            When standard error rejects the write.
        """
        ...  # pragma: no cover
