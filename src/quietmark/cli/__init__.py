# topmark:header:start
#
#   project      : Quietmark
#   file         : __init__.py
#   file_relpath : src/quietmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quietmark CLI package.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        quietmark = "quietmark.cli.main:cli"

All subcommands live in ``quietmark.cli.commands``.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
