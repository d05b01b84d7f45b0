# topmark:header:start
#
#   project      : Quietmark
#   file         : __main__.py
#   file_relpath : src/quietmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for ``python -m quietmark``.

Delegates to the Click group in [`quietmark.cli.main`][] so that the console
script and the module interface behave identically.

Examples:
    Show the suppression state of every rule for one check::

        python -m quietmark status grammar.bnf --check BnfUnusedRule
"""

from __future__ import annotations

from quietmark.cli.main import cli

if __name__ == "__main__":
    cli()
