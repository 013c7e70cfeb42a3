"""Domain models shared by the command implementations.

Options objects are deliberately mutable: a parser creates one empty
and fills it argument by argument.  Parse-state values are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# cat options
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class CatOptions:
    """Everything ``cat`` learned from its arguments."""

    number_all: bool = False
    """Set by ``-n``.  Recorded but not yet applied to the output."""

    show_tabs: bool = False
    """Reserved for a tab-visualising mode; no flag sets it."""

    show_ends: bool = False
    """Reserved for an end-of-line marking mode; no flag sets it."""

    paths: list[str] = field(default_factory=list)
    """Input paths in command-line order.  Empty means no input."""


# ---------------------------------------------------------------------------
# Parse state
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvalidOption:
    """An option-shaped argument the command does not accept."""

    text: str


@dataclass(frozen=True, slots=True)
class InvalidShortOption:
    """A character inside a shorthand cluster the command does not accept."""

    character: str


@dataclass(frozen=True, slots=True)
class Normal:
    """Parsing is proceeding; no bad argument has been seen."""


@dataclass(frozen=True, slots=True)
class InvalidArgument:
    """A bad argument stopped parsing.  Nothing after it was consumed."""

    argument: InvalidOption | InvalidShortOption


ParseState = Normal | InvalidArgument

NORMAL: Normal = Normal()
