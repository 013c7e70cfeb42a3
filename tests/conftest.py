"""Shared pytest fixtures and configuration for the minibox test suite.

Guidelines
----------
* Command logic is exercised against the in-memory ``FakeSystem`` and
  ``FakeIO`` collaborators below — no real filesystem access.
* Tests that exercise the real adapters touch disk only under ``tmp_path``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from minibox.exceptions import DiagnosticEmissionError, OpenError, ReadError, WriteError


# ---------------------------------------------------------------------------
# Filesystem fake
# ---------------------------------------------------------------------------

@dataclass
class FakeFile:
    path: str
    data: bytes
    read_error_at: int | None = None
    read_error_cause: str = "Input/output error"
    position: int = 0
    closed: bool = False
    reads: list[int] = field(default_factory=list)

    def read_all(self, buffer: bytearray | memoryview) -> int:
        if self.read_error_at is not None and self.position >= self.read_error_at:
            raise ReadError(self.path, self.read_error_cause)
        chunk = self.data[self.position:self.position + len(buffer)]
        buffer[:len(chunk)] = chunk
        self.position += len(chunk)
        self.reads.append(len(chunk))
        return len(chunk)

    def close(self) -> None:
        self.closed = True


class FakeSystem:
    """In-memory ``System`` that records every open attempt."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.open_errors: dict[str, str] = {}
        self.read_errors: dict[str, tuple[int, str]] = {}
        self.opened: list[str] = []
        self.handles: list[FakeFile] = []

    def add(self, path: str, data: bytes) -> FakeSystem:
        self.files[path] = data
        return self

    def fail_open(self, path: str, cause: str = "Permission denied") -> FakeSystem:
        self.open_errors[path] = cause
        return self

    def fail_read(
        self, path: str, data: bytes, *, at: int, cause: str = "Input/output error",
    ) -> FakeSystem:
        self.files[path] = data
        self.read_errors[path] = (at, cause)
        return self

    def open_file(self, path: str) -> FakeFile:
        self.opened.append(path)
        if path in self.open_errors:
            raise OpenError(path, self.open_errors[path])
        if path not in self.files:
            raise OpenError(path, "No such file or directory")
        handle = FakeFile(path, self.files[path])
        if path in self.read_errors:
            handle.read_error_at, handle.read_error_cause = self.read_errors[path]
        self.handles.append(handle)
        return handle


# ---------------------------------------------------------------------------
# Standard-stream fake
# ---------------------------------------------------------------------------

class FakeIO:
    """In-memory ``IO`` with switchable write failures."""

    def __init__(self) -> None:
        self.stdout = bytearray()
        self.stderr = bytearray()
        self.stdout_writes: int = 0
        self.fail_stdout_on_write: int | None = None
        self.fail_stderr: bool = False

    def stdout_write_all(self, data: bytes | bytearray | memoryview) -> None:
        self.stdout_writes += 1
        if self.fail_stdout_on_write == self.stdout_writes:
            raise WriteError("write error: Broken pipe")
        self.stdout += bytes(data)

    def stderr_write_all(self, data: bytes | bytearray | memoryview) -> None:
        if self.fail_stderr:
            raise DiagnosticEmissionError("cannot write to standard error: Bad file descriptor")
        self.stderr += bytes(data)

    @property
    def diagnostics(self) -> list[str]:
        return self.stderr.decode("utf-8").splitlines()


@pytest.fixture
def fake_system() -> FakeSystem:
    return FakeSystem()


@pytest.fixture
def fake_io() -> FakeIO:
    return FakeIO()


@pytest.fixture(autouse=True)
def _restore_minibox_logger() -> Iterator[None]:
    """Undo ``configure_logging`` calls made through ``cli()``."""
    logger = logging.getLogger("minibox")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
