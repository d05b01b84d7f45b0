# topmark:header:start
#
#   project      : Quietmark
#   file         : errors.py
#   file_relpath : src/quietmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for Quietmark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from quietmark.cli.exit_codes import ExitCode


class QuietmarkCliError(click.ClickException):
    """Base class for all Quietmark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class QuietmarkUsageError(QuietmarkCliError):
    """Error for invalid invocations (unknown rule or attribute, bad flags)."""

    exit_code = ExitCode.USAGE_ERROR


class QuietmarkConfigError(QuietmarkCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class QuietmarkFileNotFoundError(QuietmarkCliError):
    """Error when input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class QuietmarkPermissionDeniedError(QuietmarkCliError):
    """Error when the document to edit is read-only."""

    exit_code = ExitCode.PERMISSION_DENIED


class QuietmarkIOError(QuietmarkCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class QuietmarkEncodingError(QuietmarkCliError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class QuietmarkInternalError(QuietmarkCliError):
    """Error for contract violations inside Quietmark (a bug)."""

    exit_code = ExitCode.INTERNAL_ERROR
