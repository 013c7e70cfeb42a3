"""Core layer — argument classification and command logic.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or stdio access; use the injected protocols.
* No imports from ``cli`` or ``infra``.
"""

from minibox.core.arguments import (
    ArgIterator,
    Argument,
    Longhand,
    LonghandWithValue,
    Positional,
    Shorthand,
)
from minibox.core.command import Command
from minibox.core.models import CatOptions
from minibox.core.protocols import IO, File, System

__all__: list[str] = [
    "ArgIterator",
    "Argument",
    "CatOptions",
    "Command",
    "File",
    "IO",
    "Longhand",
    "LonghandWithValue",
    "Positional",
    "Shorthand",
    "System",
]
