"""Allow ``python -m minibox`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m minibox`` behaves identically to the ``minibox``
console script.
"""

from __future__ import annotations

from minibox.cli.app import cli

if __name__ == "__main__":
    cli()
