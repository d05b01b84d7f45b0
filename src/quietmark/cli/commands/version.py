# topmark:header:start
#
#   project      : Quietmark
#   file         : version.py
#   file_relpath : src/quietmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quietmark `version` command.

Prints the Quietmark version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from quietmark.cli.cmd_common import get_console, get_effective_verbosity
from quietmark.constants import QUIETMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of Quietmark.",
)
def version_command() -> None:
    """Show the current version of Quietmark."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Quietmark version:", bold=True, underline=True))
        console.print(f"    {console.styled(QUIETMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(QUIETMARK_VERSION, bold=True))
