"""Filesystem-backed implementation of :class:`~minibox.core.protocols.System`.

Every ``OSError`` raised while opening or reading is caught here and
re-raised as :class:`~minibox.exceptions.OpenError` or
:class:`~minibox.exceptions.ReadError` — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

import logging
from io import FileIO
from pathlib import Path

from minibox.exceptions import OpenError, ReadError

logger = logging.getLogger(__name__)


def describe_os_error(exc: OSError) -> str:
    """Return the short human-readable cause of *exc*."""
    return exc.strerror or str(exc) or type(exc).__name__


class OsFile:
    """A read-only file handle satisfying the ``File`` protocol."""

    def __init__(self, path: str, handle: FileIO) -> None:
        self.path: str = path
        self._handle: FileIO = handle

    def read_all(self, buffer: bytearray | memoryview) -> int:
        """Read until *buffer* is full or the file ends."""
        view = memoryview(buffer)
        total = 0
        try:
            while total < len(view):
                count = self._handle.readinto(view[total:])
                if not count:
                    break
                total += count
        except OSError as exc:
            raise ReadError(self.path, describe_os_error(exc)) from exc
        return total

    def close(self) -> None:
        self._handle.close()


class OsSystem:
    """Concrete :class:`System` over the real filesystem.

    Parameters
    ----------
    cwd:
        Directory that relative paths are resolved against.  ``None``
        (default) uses the process working directory.
    """

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd: Path | None = cwd

    def open_file(self, path: str) -> OsFile:
        target = Path(path) if self._cwd is None else self._cwd / path
        try:
            handle = open(target, "rb", buffering=0)
        except OSError as exc:
            raise OpenError(path, describe_os_error(exc)) from exc
        logger.debug("opened %s", target)
        return OsFile(path, handle)
