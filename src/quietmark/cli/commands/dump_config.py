# topmark:header:start
#
#   project      : Quietmark
#   file         : dump_config.py
#   file_relpath : src/quietmark/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quietmark `dump-config` command.

Prints the effective configuration (defaults merged with discovered and
explicit config files) as TOML, followed by the list of sources as comments.
"""

from __future__ import annotations

import click

from quietmark.cli.cmd_common import get_config, get_console, get_effective_verbosity
from quietmark.config.io import to_toml


@click.command(
    name="dump-config",
    help="Print the effective configuration as TOML.",
)
def dump_config_command() -> None:
    """Dump the merged configuration."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = get_config(ctx)

    console.print(to_toml(config.to_toml_dict()), nl=False)
    if get_effective_verbosity(ctx) > 0:
        console.print()
        for source in config.config_files:
            console.print(f"# source: {source}")
    for diagnostic in config.diagnostics:
        console.warn(f"[config] {diagnostic}")
