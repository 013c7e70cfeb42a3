"""Syntactic classification of command-line arguments.

Every command in the suite pulls its arguments from an
:class:`ArgIterator`.  The iterator knows nothing about which options a
command accepts: it only looks at the leading ``-``/``--`` shape of each
string and hands back one of four token types.

Token types
-----------
* :class:`Longhand` — ``--name``
* :class:`LonghandWithValue` — ``--name=value``
* :class:`Shorthand` — ``-abc``, a cluster of one-letter switches
* :class:`Positional` — anything else, including a bare ``-``

A lone ``--`` ends option processing: it is swallowed, and every later
string is classified as :class:`Positional`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from minibox.exceptions import HelpRequested, VersionRequested

logger = logging.getLogger(__name__)

END_OF_OPTIONS: str = "--"


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Longhand:
    """A word-form switch without a value, e.g. ``--verbose``."""

    raw: str
    name: str


@dataclass(frozen=True, slots=True)
class LonghandWithValue:
    """A word-form switch carrying an inline value, e.g. ``--color=auto``."""

    raw: str
    name: str
    value: str

    @property
    def longhand(self) -> str:
        """The option part of :attr:`raw`, without ``=value``."""
        return f"--{self.name}"


class Shorthand:
    """A single-dash cluster of one-letter switches, e.g. ``-na``.

    The cluster is itself a pull iterator over its characters.  Characters
    are consumed left to right and are never revisited.
    """

    __slots__ = ("raw", "value", "_index")

    def __init__(self, raw: str) -> None:
        self.raw: str = raw
        self.value: str = raw[1:]
        self._index: int = 0

    def next(self) -> str | None:
        """Return the next unconsumed character, or ``None`` when exhausted."""
        if self._index >= len(self.value):
            return None
        char = self.value[self._index]
        self._index += 1
        return char

    def __iter__(self) -> Iterator[str]:
        while (char := self.next()) is not None:
            yield char

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shorthand):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self) -> int:
        return hash(self.raw)

    def __repr__(self) -> str:
        return f"Shorthand(raw={self.raw!r})"


@dataclass(frozen=True, slots=True)
class Positional:
    """Any argument that is not option-shaped; usually a path."""

    raw: str


Argument = Longhand | LonghandWithValue | Shorthand | Positional


def classify(raw: str) -> Argument:
    """Classify a single argument string by its shape alone."""
    if raw.startswith("--"):
        body = raw[2:]
        name, sep, value = body.partition("=")
        if sep:
            return LonghandWithValue(raw=raw, name=name, value=value)
        return Longhand(raw=raw, name=body)
    if raw.startswith("-") and len(raw) > 1:
        return Shorthand(raw)
    return Positional(raw=raw)


# ---------------------------------------------------------------------------
# Iterator
# ---------------------------------------------------------------------------

class ArgIterator:
    """Lazy, non-restartable view over the arguments of one invocation.

    Classification is mechanical with one exception: a lone ``--`` is
    consumed as the end-of-options marker and never yielded, after which
    every argument is :class:`Positional`.

    Parameters
    ----------
    args:
        The raw argument strings, excluding the program name.
    """

    def __init__(self, args: Sequence[str]) -> None:
        self._args: tuple[str, ...] = tuple(args)
        self._index: int = 0
        self._options_ended: bool = False

    def __iter__(self) -> Iterator[Argument]:
        return self

    def __next__(self) -> Argument:
        arg = self.next()
        if arg is None:
            raise StopIteration
        return arg

    def next(self) -> Argument | None:
        """Classify and return the next argument, or ``None`` at the end."""
        while self._index < len(self._args):
            raw = self._args[self._index]
            self._index += 1
            if self._options_ended:
                return Positional(raw=raw)
            if raw == END_OF_OPTIONS:
                self._options_ended = True
                continue
            return classify(raw)
        return None

    def next_with_help_or_version(self, consume_first: bool) -> Argument | None:
        """Pull the first argument, recognising help and version requests.

        Parameters
        ----------
        consume_first:
            When ``False`` the returned token is only peeked at: the
            following :meth:`next` call yields it again.

        Raises
        ------
        HelpRequested
            The first argument is ``-h`` (short) or ``--help`` (full).
        VersionRequested
            The first argument is ``--version``.
        """
        if self._index < len(self._args) and not self._options_ended:
            first = self._args[self._index]
            if first == "-h":
                logger.debug("short help requested")
                raise HelpRequested(full=False)
            if first == "--help":
                logger.debug("full help requested")
                raise HelpRequested(full=True)
            if first == "--version":
                logger.debug("version requested")
                raise VersionRequested()

        if consume_first:
            return self.next()

        index, options_ended = self._index, self._options_ended
        arg = self.next()
        self._index, self._options_ended = index, options_ended
        return arg
