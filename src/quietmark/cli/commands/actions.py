# topmark:header:start
#
#   project      : Quietmark
#   file         : actions.py
#   file_relpath : src/quietmark/cli/commands/actions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quietmark `actions` command.

Lists the suppression actions offered for a node, marking the ones that
cannot apply (no enclosing container of that kind, or a read-only file).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quietmark.cli.cmd_common import get_config, get_console, load_document, resolve_target
from quietmark.cli.options import common_target_options
from quietmark.suppress.suppressor import CommentSuppressor

if TYPE_CHECKING:
    from pathlib import Path

    from quietmark.bnf.psi import BnfComposite, BnfDocument
    from quietmark.cli.console import ConsoleLike


@click.command(
    name="actions",
    help="List the suppression actions available for a rule or attribute.",
)
@common_target_options
def actions_command(
    *,
    path: Path,
    check_id: str,
    rule_name: str | None,
    attr_name: str | None,
) -> None:
    """Print one line per action: scope, label and availability."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    suppressor = CommentSuppressor(get_config(ctx))
    document: BnfDocument = load_document(path)
    target: BnfComposite = resolve_target(document, rule_name, attr_name)

    for action in suppressor.get_suppress_actions(target, check_id):
        if action.is_available(target):
            console.print(f"{action.scope.value:<10} {action.label}")
        else:
            line: str = f"{action.scope.value:<10} {action.label} (n/a)"
            console.print(console.styled(line, dim=True))
