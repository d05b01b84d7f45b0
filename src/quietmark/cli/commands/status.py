# topmark:header:start
#
#   project      : Quietmark
#   file         : status.py
#   file_relpath : src/quietmark/cli/commands/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quietmark `status` command.

Lists the suppressible nodes of a grammar (the document, every rule and every
attribute) with their suppression state for one check. With ``--rule`` and/or
``--attr`` only that node is reported, and the exit code tells whether it is
suppressed (0) or not (1).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quietmark.cli.cmd_common import (
    get_config,
    get_console,
    get_effective_verbosity,
    load_document,
    resolve_target,
)
from quietmark.cli.exit_codes import ExitCode
from quietmark.cli.options import common_target_options
from quietmark.suppress.resolver import SuppressionResolver
from quietmark.tree.kinds import NodeKind

if TYPE_CHECKING:
    from pathlib import Path

    from quietmark.bnf.psi import BnfComposite, BnfDocument
    from quietmark.cli.console import ConsoleLike


def _describe(node: BnfComposite) -> str:
    if node.kind is NodeKind.DOCUMENT:
        return "file"
    return f"{node.kind.value} {node.name or '?'} (line {node.line})"


def _suppressible_nodes(document: BnfDocument) -> list[BnfComposite]:
    nodes: list[BnfComposite] = [document.root]
    nodes.extend(document.attrs())
    for rule in document.rules():
        nodes.append(rule)
        nodes.extend(document.attrs(rule))
    return nodes


@click.command(
    name="status",
    help="Show whether a check is suppressed for the rules and attributes of a grammar.",
)
@common_target_options
def status_command(
    *,
    path: Path,
    check_id: str,
    rule_name: str | None,
    attr_name: str | None,
) -> None:
    """Report suppression state for ``check_id``."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    resolver = SuppressionResolver(get_config(ctx))
    document: BnfDocument = load_document(path)

    if rule_name is not None or attr_name is not None:
        target: BnfComposite = resolve_target(document, rule_name, attr_name)
        suppressed: bool = resolver.is_suppressed(target, check_id)
        state: str = "suppressed" if suppressed else "active"
        if get_effective_verbosity(ctx) >= 0:
            console.print(f"{_describe(target)}: {state}")
        ctx.exit(ExitCode.SUCCESS if suppressed else ExitCode.FAILURE)

    for node in _suppressible_nodes(document):
        suppressed = resolver.is_suppressed(node, check_id)
        label: str = console.styled("suppressed", fg="yellow") if suppressed else "active"
        console.print(f"{_describe(node)}: {label}")
