# topmark:header:start
#
#   project      : Quietmark
#   file         : suppress.py
#   file_relpath : src/quietmark/cli/commands/suppress.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quietmark `suppress` command.

Applies one suppression action to a rule, attribute or the whole file. By
default this is a dry run that exits with `WOULD_CHANGE` when the file would be
edited; ``--apply`` writes the result back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quietmark.cli.cmd_common import get_config, get_console, load_document, resolve_target
from quietmark.cli.errors import (
    QuietmarkInternalError,
    QuietmarkIOError,
    QuietmarkPermissionDeniedError,
    QuietmarkUsageError,
)
from quietmark.cli.exit_codes import ExitCode
from quietmark.cli.options import common_target_options
from quietmark.config.logging import get_logger
from quietmark.errors import DocumentNotWritableError
from quietmark.suppress.suppressor import CommentSuppressor
from quietmark.tree.kinds import NodeKind
from quietmark.utils.diff import compute_patch, render_patch

if TYPE_CHECKING:
    from pathlib import Path

    from quietmark.bnf.psi import BnfComposite, BnfDocument
    from quietmark.cli.console import ConsoleLike
    from quietmark.config.logging import QuietmarkLogger
    from quietmark.suppress.writer import SuppressionAction

logger: QuietmarkLogger = get_logger(__name__)


@click.command(
    name="suppress",
    help="Add a suppression comment for a check (dry run unless --apply).",
)
@common_target_options
@click.option(
    "--scope",
    type=click.Choice([NodeKind.RULE.value, NodeKind.ATTRIBUTE.value, NodeKind.DOCUMENT.value]),
    default=NodeKind.RULE.value,
    show_default=True,
    help="Container that receives the suppression comment.",
)
@click.option("--apply", "apply_changes", is_flag=True, help="Write the change to the file.")
@click.option("--diff", "show_diff", is_flag=True, help="Print a unified diff of the change.")
def suppress_command(
    *,
    path: Path,
    check_id: str,
    rule_name: str | None,
    attr_name: str | None,
    scope: str,
    apply_changes: bool,
    show_diff: bool,
) -> None:
    """Apply the ``--scope`` action for ``check_id`` to the selected node."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    suppressor = CommentSuppressor(get_config(ctx))
    document: BnfDocument = load_document(path)
    target: BnfComposite = resolve_target(document, rule_name, attr_name)

    actions: list[SuppressionAction] = [
        action
        for action in suppressor.get_suppress_actions(target, check_id)
        if action.scope.value == scope
    ]
    if len(actions) != 1:
        raise QuietmarkInternalError(f"Expected exactly one '{scope}' action, got {len(actions)}")
    action: SuppressionAction = actions[0]

    if action.find_container(target) is None:
        raise QuietmarkUsageError(
            f"'{action.label}' needs a {scope}; select one with --rule/--attr"
        )

    try:
        action.apply(target)
    except DocumentNotWritableError as e:
        raise QuietmarkPermissionDeniedError(str(e)) from e

    if not document.modified:
        console.print(f"{path}: '{check_id}' is already suppressed for this {scope}")
        return

    if show_diff:
        patch: list[str] = compute_patch(document.original_text, document.text, str(path))
        if ctx.obj.get("color_enabled", False):
            console.print(render_patch(patch), nl=False)
        else:
            console.print("".join(patch), nl=False)

    if not apply_changes:
        console.print(f"{path}: would apply '{action.label}' for '{check_id}'")
        ctx.exit(ExitCode.WOULD_CHANGE)

    try:
        document.save()
    except OSError as e:
        raise QuietmarkIOError(f"Cannot write {path}: {e}") from e
    console.print(f"{path}: applied '{action.label}' for '{check_id}'")
