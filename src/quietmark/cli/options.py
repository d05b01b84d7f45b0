# topmark:header:start
#
#   project      : Quietmark
#   file         : options.py
#   file_relpath : src/quietmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options for Quietmark commands.

Group-level options (verbosity, color, config files) are resolved once in
[`quietmark.cli.main`][]; target options (file, check id, rule, attribute) are
shared by the ``status``, ``actions`` and ``suppress`` commands.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from quietmark.cli.errors import QuietmarkUsageError
from quietmark.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the ``-v`` count.

    Raises:
        QuietmarkUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise QuietmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def log_level_for_verbosity(verbosity: int) -> int | None:
    """Map ``-vv`` to DEBUG and ``-vvv`` to TRACE; lower verbosity leaves logging alone."""
    if verbosity >= 3:
        return TRACE_LEVEL
    if verbosity == 2:
        return logging.DEBUG
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for debug (-vv) and trace (-vvv) logging.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only print errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Honors --color/--no-color first, then FORCE_COLOR and NO_COLOR, and finally
    enables color when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color and --no-color options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --config (repeatable) and --no-config options."""
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(path_type=Path, dir_okay=False),
        help="Extra config file (quietmark.toml or pyproject.toml). May be repeated.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Skip config discovery; only defaults and --config files apply.",
    )(f)
    return f


def common_target_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the FILE argument and --check/--rule/--attr options."""
    f = click.argument(
        "path",
        type=click.Path(path_type=Path, dir_okay=False),
    )(f)
    f = click.option(
        "--check",
        "check_id",
        required=True,
        help="Identifier of the check, e.g. BnfUnusedRule.",
    )(f)
    f = click.option(
        "--rule",
        "rule_name",
        default=None,
        help="Name of the flagged rule.",
    )(f)
    f = click.option(
        "--attr",
        "attr_name",
        default=None,
        help="Name of the flagged attribute (inside --rule, or global when --rule is omitted).",
    )(f)
    return f
