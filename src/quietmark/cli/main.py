# topmark:header:start
#
#   project      : Quietmark
#   file         : main.py
#   file_relpath : src/quietmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Quietmark CLI.

Group-level options are resolved once and stored in ``ctx.obj``:

* ``console``: the program-output console;
* ``color_enabled``: whether ANSI styling is on;
* ``verbosity_level``: ``-1`` (quiet), ``0`` or the ``-v`` count;
* ``config``: the frozen, merged [`Config`][quietmark.config.model.Config].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from quietmark.cli.commands.actions import actions_command
from quietmark.cli.commands.dump_config import dump_config_command
from quietmark.cli.commands.status import status_command
from quietmark.cli.commands.suppress import suppress_command
from quietmark.cli.commands.version import version_command
from quietmark.cli.console import ClickConsole
from quietmark.cli.errors import QuietmarkConfigError
from quietmark.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    log_level_for_verbosity,
    resolve_color_mode,
    resolve_verbosity,
)
from quietmark.config.logging import get_logger, resolve_env_log_level, setup_logging
from quietmark.config.model import MutableConfig
from quietmark.errors import ConfigLoadError

if TYPE_CHECKING:
    from quietmark.cli.console import ConsoleLike
    from quietmark.config.logging import QuietmarkLogger
    from quietmark.config.model import Config

logger: QuietmarkLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context."""
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # QUIETMARK_LOG_LEVEL wins over -vv/-vvv.
    level_log: int | None = resolve_env_log_level() or log_level_for_verbosity(level_cli)
    ctx.obj["log_level"] = level_log
    setup_logging(level=level_log)

    effective_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def init_config(ctx: click.Context, *, config_files: tuple[Path, ...], no_config: bool) -> None:
    """Load and freeze the merged configuration into ``ctx.obj["config"]``."""
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            start=None if no_config else Path.cwd(),
            extra_files=config_files,
        )
    except ConfigLoadError as e:
        raise QuietmarkConfigError(str(e)) from e
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    ctx.obj["config"] = config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Quietmark: comment-based check suppression for BNF grammars.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Entry point for the Quietmark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    init_config(ctx, config_files=config_files, no_config=no_config)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'quietmark status FILE --check ID' to inspect suppressions.")


cli.add_command(status_command)
cli.add_command(actions_command)
cli.add_command(suppress_command)
cli.add_command(dump_config_command)
cli.add_command(version_command)
