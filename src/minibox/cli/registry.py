"""The set of commands this build of minibox ships."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from minibox.core import cat
from minibox.core.command import Command

_ALL_COMMANDS: tuple[Command, ...] = (
    cat.command,
)

COMMANDS: Mapping[str, Command] = MappingProxyType(
    {cmd.name: cmd for cmd in _ALL_COMMANDS if cmd.enabled},
)
"""Enabled commands keyed by name, in registration order."""


def get_command(name: str) -> Command | None:
    """Return the enabled command called *name*, if any."""
    return COMMANDS.get(name)
