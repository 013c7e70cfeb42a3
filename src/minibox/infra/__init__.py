"""Infrastructure layer — operating-system integration.

This layer wraps all interaction with the filesystem and the standard
streams.  Every raw ``OSError`` must be caught here and re-raised as a
:class:`~minibox.exceptions.MiniboxError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing formatting; callers decide what to print.
* Must satisfy the protocols in :mod:`minibox.core.protocols`.
"""

from minibox.infra.os_system import OsFile, OsSystem, describe_os_error
from minibox.infra.stdio import StdIO

__all__: list[str] = [
    "OsFile",
    "OsSystem",
    "StdIO",
    "describe_os_error",
]
