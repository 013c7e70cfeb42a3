"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — every argument was consumed and output was written.

Per-file open/read failures still exit with this code; they are
reported as diagnostics only.
"""

GENERAL_ERROR: int = 1
"""A fatal MiniboxError (e.g. standard output closed) was caught."""

USAGE_ERROR: int = 2
"""The command line was rejected before any file was touched."""

UNEXPECTED_ERROR: int = 70
"""An unhandled exception escaped all known error boundaries (EX_SOFTWARE)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
