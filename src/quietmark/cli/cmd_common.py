# topmark:header:start
#
#   project      : Quietmark
#   file         : cmd_common.py
#   file_relpath : src/quietmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by Quietmark CLI commands.

These helpers translate core exceptions into CLI errors so that every command
exits with the same codes for the same failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quietmark.bnf.psi import BnfDocument
from quietmark.cli.errors import (
    QuietmarkEncodingError,
    QuietmarkFileNotFoundError,
    QuietmarkIOError,
    QuietmarkUsageError,
)
from quietmark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from quietmark.bnf.psi import BnfComposite
    from quietmark.cli.console import ConsoleLike
    from quietmark.config.logging import QuietmarkLogger
    from quietmark.config.model import Config

logger: QuietmarkLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    return ctx.obj["console"]


def get_config(ctx: click.Context) -> Config:
    return ctx.obj["config"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group callback."""
    return int(ctx.obj.get("verbosity_level", 0))


def load_document(path: Path) -> BnfDocument:
    """Read a BNF document, mapping OS errors onto CLI errors."""
    if not path.exists():
        raise QuietmarkFileNotFoundError(f"No such file: {path}")
    try:
        return BnfDocument.from_path(path)
    except UnicodeDecodeError as e:
        raise QuietmarkEncodingError(f"Cannot decode {path} as UTF-8: {e}") from e
    except OSError as e:
        raise QuietmarkIOError(f"Cannot read {path}: {e}") from e


def resolve_target(
    document: BnfDocument,
    rule_name: str | None,
    attr_name: str | None,
) -> BnfComposite:
    """Return the node named by ``--rule``/``--attr`` (the document root if neither is set).

    Raises:
        QuietmarkUsageError: If the rule or attribute does not exist.
    """
    rule: BnfComposite | None = None
    if rule_name is not None:
        rule = document.find_rule(rule_name)
        if rule is None:
            raise QuietmarkUsageError(f"No rule named '{rule_name}' in {document.name}")
    if attr_name is not None:
        attr: BnfComposite | None = document.find_attr(attr_name, rule)
        if attr is None:
            where: str = f"rule '{rule_name}'" if rule_name else "the global attributes"
            raise QuietmarkUsageError(f"No attribute '{attr_name}' in {where} of {document.name}")
        return attr
    return rule if rule is not None else document.root
