"""minibox — a small multi-command utility suite.

Built as a strict layered architecture: pure command logic in ``core``,
operating-system adapters in ``infra``, and the process boundary in ``cli``.
"""

from minibox.version import __version__

__all__: list[str] = ["__version__"]
